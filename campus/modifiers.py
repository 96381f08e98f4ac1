from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:  # pragma: no cover - imports for type hints only
    from .state import GameState


@dataclass(frozen=True)
class Modifier:
    """Adjustment the economy and wellbeing engines consult each tick."""

    income_multiplier: float = 1.0
    wellbeing_offset: float = 0.0

    def combine(self, other: "Modifier") -> "Modifier":
        return Modifier(
            income_multiplier=self.income_multiplier * other.income_multiplier,
            wellbeing_offset=self.wellbeing_offset + other.wellbeing_offset,
        )


NEUTRAL = Modifier()

ModifierHook = Callable[["GameState"], Modifier]


def collect(hooks: Iterable[ModifierHook], state: "GameState") -> Modifier:
    """Evaluate every hook against ``state`` and fold the results."""
    result = NEUTRAL
    for hook in hooks:
        result = result.combine(hook(state))
    return result
