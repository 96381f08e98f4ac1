from dataclasses import replace

from campus.constants import BREAK_TIME, FOCUS_TIME, GameMode, TimerMode, Tone
from campus.focus import FocusTimer, focus_multiplier
from campus.game import reset_focus, tick_focus_clock, toggle_focus


def test_multiplier_tiers():
    assert focus_multiplier(0) == 1
    assert focus_multiplier(60) == 1
    assert focus_multiplier(61) == 2
    assert focus_multiplier(900) == 2
    assert focus_multiplier(901) == 5
    assert focus_multiplier(1500) == 5
    assert focus_multiplier(1501) == 10


def test_toggle_cycle():
    timer = FocusTimer()
    started = timer.toggled()
    assert started.mode is TimerMode.FOCUS
    assert started.time_left == FOCUS_TIME
    assert started.toggled() == FocusTimer()
    assert FocusTimer(TimerMode.BREAK, 10).toggled() == FocusTimer()


def test_idle_clock_does_not_move():
    timer, completed = FocusTimer().tick()
    assert timer == FocusTimer()
    assert not completed


def test_focus_rolls_into_break_then_idle():
    timer, completed = FocusTimer(TimerMode.FOCUS, 1).tick()
    assert completed
    assert timer == FocusTimer(TimerMode.BREAK, BREAK_TIME)
    timer, completed = FocusTimer(TimerMode.BREAK, 1).tick()
    assert not completed
    assert timer == FocusTimer(TimerMode.IDLE, FOCUS_TIME)


def test_clock_awards_completion_bonus(make_state):
    state = make_state(GameMode.FOCUS)
    state = replace(state, timer=FocusTimer(TimerMode.FOCUS, 1))
    state, notes = tick_focus_clock(state)
    assert state.stats.money == 25_000 + 800_000
    assert state.timer.mode is TimerMode.BREAK
    assert len(notes) == 1
    assert notes[0].tone is Tone.POSITIVE


def test_clock_only_runs_in_focus_mode(make_state):
    state = make_state(GameMode.STANDARD)
    state = replace(state, timer=FocusTimer(TimerMode.FOCUS, 10))
    after, notes = tick_focus_clock(state)
    assert after is state
    assert notes == []


def test_toggle_and_reset_on_state(make_state):
    state = toggle_focus(make_state(GameMode.FOCUS))
    assert state.timer.focusing
    state, _ = tick_focus_clock(state)
    assert state.timer.time_left == FOCUS_TIME - 1
    assert reset_focus(state).timer == FocusTimer()
