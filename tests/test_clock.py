from focusbox.core.clock import SessionClock


def test_deltas_are_split_without_loss() -> None:
    clock = SessionClock.started(100.0)
    deltas = [0.25, 1.5, 3.0, 0.5, 7.0]
    now = 100.0
    for index, delta in enumerate(deltas):
        clock.is_paused = index % 2 == 1
        now += delta
        clock.advance(now)
        assert clock.total_elapsed == sum(deltas[: index + 1])

    assert clock.active_elapsed == 10.25
    assert clock.paused_elapsed == 2.0


def test_backwards_step_adds_nothing() -> None:
    clock = SessionClock.started(50.0)
    clock.advance(60.0)

    assert clock.advance(55.0) == 0.0
    assert clock.active_elapsed == 10.0
    assert clock.last_sample_instant == 55.0
