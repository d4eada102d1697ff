import random

from app.engine.streak import StreakState, update_streak


def test_first_log_starts_streak():
    assert update_streak(StreakState(), False, False) == StreakState(current=1, longest=1)


def test_consecutive_days_extend_streak():
    state = update_streak(StreakState(), False, False)
    state = update_streak(state, False, True)
    assert state == StreakState(current=2, longest=2)


def test_gap_resets_streak():
    state = StreakState(current=5, longest=5)
    state = update_streak(state, False, False)
    assert state == StreakState(current=1, longest=5)


def test_second_log_same_day_is_ignored():
    state = StreakState(current=3, longest=4)
    assert update_streak(state, True, True) == state
    assert update_streak(state, True, False) == state


def test_longest_never_decreases():
    rng = random.Random(7)
    state = StreakState()
    for _ in range(500):
        before = state.longest
        state = update_streak(state, rng.random() < 0.2, rng.random() < 0.6)
        assert state.longest >= before
        assert state.longest >= state.current
