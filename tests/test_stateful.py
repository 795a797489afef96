import pytest

from schedule_api.schedulers import Stateful, Constant, Sequence, Loop, every, ScheduleConfigError


def identity(t):
    return t


def test_default_cursor_advances_every_call():
    cursor = Stateful(identity)
    assert [cursor.next() for _ in range(4)] == [1, 2, 3, 4]
    assert cursor.state == 5


def test_cursor_is_a_python_iterator():
    cursor = Stateful(Sequence([0.1, 0.01], [2, 1]))
    assert next(cursor) == 0.1
    assert next(cursor) == 0.1
    assert next(cursor) == 0.01
    assert iter(cursor) is cursor


def test_predicate_sees_pre_increment_state():
    seen = []

    def advance(state):
        seen.append(state)
        return True

    cursor = Stateful(identity, advance=advance)
    values = [cursor.next() for _ in range(3)]
    assert values == [1, 2, 3]
    assert seen == [1, 2, 3]


def test_even_state_predicate_holds_at_first_step():
    # state 1 never satisfies the predicate, so the counter never moves
    cursor = Stateful(Constant(5), advance=lambda state: state % 2 == 0)
    values, states = [], []
    for _ in range(5):
        values.append(cursor.next())
        states.append(cursor.state)
    assert values == [5, 5, 5, 5, 5]
    assert states == [1, 1, 1, 1, 1]


def test_gated_advance_trajectory():
    flags = iter([False, True, False, True, True])
    cursor = Stateful(identity, advance=lambda state: next(flags))
    trajectory = []
    for _ in range(5):
        trajectory.append(cursor.state)
        cursor.next()
    assert trajectory == [1, 1, 2, 2, 3]
    assert cursor.state == 4


def test_reset_restores_first_call():
    seen = []

    def advance(state):
        seen.append(state)
        return True

    sched = Loop(identity, 3)
    cursor = Stateful(sched, advance=advance)
    first = cursor.next()
    first_seen = list(seen)
    for _ in range(4):
        cursor.next()

    assert cursor.reset() is cursor
    assert cursor.state == 1
    seen.clear()
    assert cursor.next() == first == 1
    assert seen == first_seen == [1]
    assert cursor.state == 2


def test_cursors_sharing_a_schedule_are_independent():
    sched = Sequence([identity, Constant(0)], [2, 1])
    a = Stateful(sched)
    b = Stateful(sched)
    assert [a.next() for _ in range(3)] == [1, 2, 0]
    assert b.next() == 1
    assert (a.state, b.state) == (4, 2)


def test_state_dict_roundtrip():
    cursor = Stateful(identity)
    for _ in range(6):
        cursor.next()
    restored = Stateful(identity)
    restored.load_state_dict(cursor.state_dict())
    assert restored.state == 7
    assert restored.next() == cursor.next()


def test_numbers_are_accepted():
    cursor = Stateful(0.5)
    assert cursor.next() == 0.5


def test_every_advances_once_per_n_calls():
    cursor = Stateful(identity, advance=every(3))
    assert [cursor.next() for _ in range(7)] == [1, 1, 1, 2, 2, 2, 3]


@pytest.mark.parametrize("n", [0, -1, 1.5])
def test_every_rejects_bad_n(n):
    with pytest.raises(ScheduleConfigError):
        every(n)


def test_reset_mid_window_matches_fresh_every_cursor():
    fresh = Stateful(identity, advance=every(3))
    fresh_values = [fresh.next() for _ in range(4)]

    cursor = Stateful(identity, advance=every(3))
    cursor.next()
    cursor.next()
    cursor.reset()
    assert [cursor.next() for _ in range(4)] == fresh_values == [1, 1, 1, 2]
    assert cursor.state == fresh.state


def test_every_phase_survives_state_dict():
    cursor = Stateful(identity, advance=every(3))
    for _ in range(4):
        cursor.next()
    saved = cursor.state_dict()
    assert saved == {"state": 2, "advance": {"calls": 4}}

    restored = Stateful(identity, advance=every(3))
    restored.load_state_dict(saved)
    assert [restored.next() for _ in range(4)] == [cursor.next() for _ in range(4)]
    assert restored.state == cursor.state
