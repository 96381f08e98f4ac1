from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import BuildingType


@dataclass(frozen=True)
class Tile:
    """Represents a single grid tile."""

    x: int
    y: int
    building: BuildingType = BuildingType.NONE
    # Growth progress (0-100) for seeds and saplings, visual variety otherwise
    variant: int = 0
    # Quarter turns clockwise (0-3)
    rotation: int = 0

    def __repr__(self) -> str:
        return (
            f"Tile(({self.x}, {self.y}), {self.building.value}, "
            f"variant={self.variant}, rot={self.rotation})"
        )

    @property
    def empty(self) -> bool:
        return self.building is BuildingType.NONE

    def with_building(
        self, building: BuildingType, *, rotation: int | None = None
    ) -> "Tile":
        """Return a copy holding ``building`` with a fresh growth counter."""
        return replace(
            self,
            building=building,
            variant=0,
            rotation=self.rotation if rotation is None else rotation % 4,
        )

    def cleared(self) -> "Tile":
        return replace(self, building=BuildingType.NONE, variant=0)
