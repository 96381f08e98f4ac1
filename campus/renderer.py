from __future__ import annotations

import sys
import time
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from blessed import Terminal

from .blueprints import blueprint_for
from .constants import STATUS_PANEL_Y, UI_COLOR_RGB, Color, GameMode

logger = logging.getLogger(__name__)

if TYPE_CHECKING:  # pragma: no cover - imports for type hints only
    from .state import GameState

GROUND_GLYPH = "."
VISITOR_GLYPH = "@"


def format_status(state: "GameState") -> str:
    """One-line summary of the campaign for the status panel."""
    stats = state.stats
    status = (
        f"Day:{stats.day} Year:{state.year} "
        f"${stats.money:,.0f} "
        f"Nature:{stats.population:.0f} "
        f"Wellbeing:{stats.wellbeing:.0f} "
        f"Buzz:{state.buzz:.0f} "
        f"Legacy:{state.legacy_energy}"
    )
    if state.mode is GameMode.FOCUS:
        timer = state.timer
        minutes, seconds = divmod(timer.time_left, 60)
        status += f" {timer.mode.name.title()}:{minutes:02d}:{seconds:02d}"
    if stats.game_won:
        status += " WON"
    elif stats.game_lost:
        status += " LOST"
    return status


def format_mission(state: "GameState") -> str:
    mission = state.current_mission
    if mission is None:
        return "Mission: -"
    marker = "[done, press c]" if mission.completed else ""
    return f"Mission: {mission.description} (+${mission.reward:,}) {marker}".rstrip()


class Renderer:
    """Terminal renderer for the campus grid using blessed."""

    UI_RGB = UI_COLOR_RGB
    COLOR_ATTRS = {
        Color.GROUND: "green",
        Color.PATH: "white",
        Color.LANDMARK: "bold_red",
        Color.ACADEMIC: "bold_yellow",
        Color.HOUSING: "magenta",
        Color.DINING: "yellow",
        Color.ATHLETICS: "cyan",
        Color.ART: "bold_magenta",
        Color.GREENERY: "bold_green",
        Color.HAZARD: "red",
        Color.VISITOR: "bold_white",
    }

    def __init__(self, use_color: bool = True) -> None:
        self.term = Terminal()
        if use_color and not self.term.does_styling:
            # blessed disables styling on a non-tty stream
            self.term = Terminal(force_styling=True)
        self.use_color = use_color

        # Previously drawn frame, used to redraw only changed rows
        self._last_glyphs: Optional[List[List[str]]] = None
        self._last_colors: Optional[List[List[object]]] = None
        self._last_size: tuple[int, int] = (0, 0)

    def clear(self) -> None:
        sys.stdout.write(self.term.clear())
        sys.stdout.flush()
        self._last_glyphs = None
        self._last_colors = None

    def _apply_color(self, text: str, color: object) -> str:
        if not self.use_color or color is None:
            return text
        if color is Color.UI:
            return self.term.color_rgb(*self.UI_RGB) + text
        attr = self.COLOR_ATTRS.get(color)
        if attr and hasattr(self.term, attr):
            return getattr(self.term, attr)(text)
        return text

    def draw_grid(
        self, glyphs: List[List[str]], colors: Optional[List[List[object]]] = None
    ) -> None:
        if colors is None:
            colors = [[None for _ in row] for row in glyphs]

        height = len(glyphs)
        width = len(glyphs[0]) if height else 0
        full_redraw = (width, height) != self._last_size or self._last_glyphs is None
        if full_redraw:
            self.clear()
            self._last_size = (width, height)

        out: List[str] = []
        for y, row in enumerate(glyphs):
            color_row = colors[y]
            if not full_redraw and self._last_glyphs is not None:
                if row == self._last_glyphs[y] and color_row == self._last_colors[y]:
                    continue

            # Group runs of the same colour into one styled segment
            segments: List[str] = []
            start = 0
            current = color_row[0] if color_row else None
            for x, color in enumerate(color_row):
                if color != current:
                    segments.append(self._apply_color("".join(row[start:x]), current))
                    start = x
                    current = color
            segments.append(self._apply_color("".join(row[start:]), current))
            out.append(self.term.move_xy(0, y) + "".join(segments))

        sys.stdout.write("".join(out))
        sys.stdout.flush()

        self._last_glyphs = [list(row) for row in glyphs]
        self._last_colors = [list(row) for row in colors]

    def frame(self, state: "GameState") -> tuple[List[List[str]], List[List[object]]]:
        """Glyph and colour grids for ``state``, visitor drawn on top."""
        glyphs: List[List[str]] = []
        colors: List[List[object]] = []
        for row in state.grid.rows():
            glyph_row: List[str] = []
            color_row: List[object] = []
            for tile in row:
                if tile.empty:
                    glyph_row.append(GROUND_GLYPH)
                    color_row.append(Color.GROUND)
                else:
                    bp = blueprint_for(tile.building)
                    glyph_row.append(bp.glyph)
                    color_row.append(bp.color)
            glyphs.append(glyph_row)
            colors.append(color_row)

        visitor = state.visitor
        if visitor is not None:
            glyphs[visitor.y][visitor.x] = VISITOR_GLYPH
            colors[visitor.y][visitor.x] = Color.VISITOR
        return glyphs, colors

    def render_game(self, state: "GameState", news: Sequence[str] = ()) -> None:
        start = time.perf_counter()
        glyphs, colors = self.frame(state)
        self.draw_grid(glyphs, colors)
        self.render_status(format_status(state))
        lines = [format_mission(state)]
        if state.mode is GameMode.FOCUS and state.timer.focusing:
            lines.append("Focus running: placing or claiming resets the clock")
        lines.extend(news)
        self.render_lines(lines, start_y=STATUS_PANEL_Y + 1)
        logger.debug("render_game took %.2f ms", (time.perf_counter() - start) * 1000)

    def render_status(self, text: str) -> None:
        """Render a status line just below the grid."""
        self.render_lines([text], start_y=STATUS_PANEL_Y)

    def render_lines(self, lines: Sequence[str], start_y: int = 0) -> None:
        width = self.term.width
        prefix = self.term.color_rgb(*self.UI_RGB) if self.use_color else ""
        for idx, line in enumerate(lines):
            sys.stdout.write(
                self.term.move_xy(0, start_y + idx) + prefix + line.ljust(width)[:width]
            )
        sys.stdout.flush()
