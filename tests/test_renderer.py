import sys
from dataclasses import replace

from campus.constants import UI_COLOR_RGB, BuildingType, Color, GameMode
from campus.renderer import VISITOR_GLYPH, Renderer, format_mission, format_status
from campus.visitor import Visitor


class Dummy:
    def __init__(self):
        self.written = []

    def write(self, s):
        self.written.append(s)

    def flush(self):
        pass


def _quiet_terminal(monkeypatch, renderer):
    monkeypatch.setattr(renderer.term, "move_xy", lambda x, y: "")
    monkeypatch.setattr(renderer.term, "clear", lambda: "")
    out = Dummy()
    monkeypatch.setattr(sys, "stdout", out)
    return out


def test_ui_fixed_colour(monkeypatch):
    renderer = Renderer()
    _quiet_terminal(monkeypatch, renderer)
    called = {}

    def fake_rgb(r, g, b):
        called["rgb"] = (r, g, b)
        return ""

    monkeypatch.setattr(renderer.term, "color_rgb", fake_rgb)
    renderer.draw_grid([["X"]], [[Color.UI]])
    assert called["rgb"] == UI_COLOR_RGB


def test_no_colour(monkeypatch):
    renderer = Renderer(use_color=False)
    out = _quiet_terminal(monkeypatch, renderer)
    called = {}

    def fake_rgb(r, g, b):
        called["rgb"] = (r, g, b)
        return ""

    monkeypatch.setattr(renderer.term, "color_rgb", fake_rgb)
    renderer.draw_grid([["X", "Y"]], [[Color.UI, Color.GROUND]])
    assert "rgb" not in called
    assert "".join(out.written) == "XY"


def test_only_changed_rows_are_redrawn(monkeypatch):
    renderer = Renderer(use_color=False)
    out = _quiet_terminal(monkeypatch, renderer)
    renderer.draw_grid([["a"], ["b"]])
    out.written.clear()
    renderer.draw_grid([["a"], ["c"]])
    assert "".join(out.written) == "c"


def test_frame_draws_buildings_and_visitor(make_state, put):
    state = put(make_state(), 1, 0, BuildingType.STUDENT_DORM)
    state = replace(state, visitor=Visitor(2, 0, 2, 0))
    renderer = Renderer(use_color=False)
    glyphs, colors = renderer.frame(state)
    assert glyphs[0][:3] == [".", "H", VISITOR_GLYPH]
    assert colors[0][1] is Color.HOUSING
    assert colors[0][2] is Color.VISITOR
    cx, cy = state.grid.center
    assert glyphs[cy][cx] == "M"


def test_status_lines(make_state):
    state = make_state(GameMode.FOCUS, day=400)
    status = format_status(state)
    assert "Day:400" in status
    assert "Year:2" in status
    assert "Idle:25:00" in status
    assert format_mission(state).startswith("Mission: Plant 3 Oak Trees")
    assert format_mission(make_state(GameMode.CREATIVE)) == "Mission: -"
