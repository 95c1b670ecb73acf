import pytest

from focusbox.core.errors import DurationTooLong, NonPositiveDuration
from focusbox.core.session import SessionController, SessionState, TaskDefinition
from focusbox.core.urgency import UrgencyTier


def make_task(seconds: int = 100) -> TaskDefinition:
    return TaskDefinition(project="The Big One", description="Piece of cake", duration_seconds=seconds)


def test_new_controller_is_idle_and_not_live() -> None:
    controller = SessionController(clock=lambda: 0.0)

    assert controller.state == SessionState.IDLE
    assert controller.is_expired() is True
    assert controller.tick(5.0).state == SessionState.IDLE


def test_countdown_reaches_warning_critical_then_expires() -> None:
    controller = SessionController()
    start = controller.start(make_task(100), now=0.0)
    assert start.label_text == "-01:40"
    assert start.urgency == UrgencyTier.NORMAL

    snapshot = controller.tick(71.0)
    assert snapshot.urgency == UrgencyTier.WARNING
    assert snapshot.label_text == "-00:29"
    assert controller.is_expired() is False

    snapshot = controller.tick(91.0)
    assert snapshot.active_elapsed == 91.0
    assert snapshot.urgency == UrgencyTier.CRITICAL

    snapshot = controller.tick(100.0)
    assert snapshot.state == SessionState.EXPIRED
    assert controller.is_expired() is True


def test_expiry_keeps_crossing_delta_and_stops_time() -> None:
    controller = SessionController()
    controller.start(make_task(10), now=0.0)

    controller.tick(12.5)
    assert controller.active_elapsed == 12.5

    controller.tick(20.0)
    controller.toggle_pause()
    controller.adjust_duration(600)
    assert controller.active_elapsed == 12.5
    assert controller.target_seconds == 10.0
    assert controller.is_paused is False
    assert controller.is_expired() is True


def test_pause_resume_keeps_accumulators_apart() -> None:
    controller = SessionController()
    controller.start(make_task(100), now=0.0)
    controller.tick(10.0)

    paused = controller.toggle_pause()
    assert paused.state == SessionState.PAUSED
    assert paused.active_elapsed == 10.0
    assert paused.paused_elapsed == 0.0

    controller.tick(15.0)
    assert controller.paused_elapsed == 5.0
    assert controller.active_elapsed == 10.0

    resumed = controller.toggle_pause()
    assert resumed.state == SessionState.RUNNING
    controller.tick(20.0)
    assert controller.active_elapsed == 15.0
    assert controller.paused_elapsed == 5.0


def test_paused_label_shows_pause_time_and_remaining() -> None:
    controller = SessionController()
    controller.start(make_task(3700), now=0.0)
    controller.tick(40.0)
    controller.toggle_pause()

    snapshot = controller.tick(100.0)

    assert snapshot.is_paused is True
    assert snapshot.label_text == "Paused: 01:00 / -01:01:00"


def test_toggle_pause_does_not_sample_the_clock() -> None:
    calls: list[float] = []

    def clock() -> float:
        calls.append(0.0)
        return 0.0

    controller = SessionController(clock=clock)
    controller.start(make_task(100))
    calls.clear()

    controller.toggle_pause()
    controller.toggle_pause()
    controller.adjust_duration(60)

    assert calls == []
    assert controller.last_sample_instant == 0.0


def test_time_is_conserved_across_transitions() -> None:
    controller = SessionController()
    controller.start(make_task(1000), now=0.0)
    now = 0.0
    for index, delta in enumerate([0.25, 4.0, 1.5, 0.5, 8.0, 2.0]):
        if index % 2:
            controller.toggle_pause()
        now += delta
        controller.tick(now)
        assert controller.active_elapsed + controller.paused_elapsed == now


def test_adjust_duration_commits_only_positive_targets() -> None:
    controller = SessionController()
    controller.start(make_task(120), now=0.0)

    assert controller.adjust_duration(300).target_seconds == 420.0
    assert controller.adjust_duration(-60).target_seconds == 360.0
    assert controller.adjust_duration(-360).target_seconds == 360.0
    assert controller.adjust_duration(-500).target_seconds == 360.0


def test_adjust_duration_updates_label_immediately() -> None:
    controller = SessionController()
    controller.start(make_task(100), now=0.0)
    controller.tick(80.0)
    assert controller.snapshot().urgency == UrgencyTier.WARNING

    snapshot = controller.adjust_duration(300)

    assert snapshot.label_text == "-05:20"
    assert snapshot.urgency == UrgencyTier.NORMAL


def test_distractions_count_and_reset_on_new_session() -> None:
    controller = SessionController()
    controller.start(make_task(100), now=0.0)
    for _ in range(3):
        controller.record_distraction()
    assert controller.distraction_count == 3

    controller.start(make_task(50), now=10.0)

    assert controller.distraction_count == 0
    assert controller.active_elapsed == 0.0
    assert controller.target_seconds == 50.0


def test_distractions_ignored_without_live_session() -> None:
    controller = SessionController()
    controller.record_distraction()
    assert controller.distraction_count == 0

    controller.start(make_task(5), now=0.0)
    controller.tick(5.0)
    controller.record_distraction()
    assert controller.distraction_count == 0


@pytest.mark.parametrize("seconds", [0, -60])
def test_start_rejects_non_positive_duration(seconds: int) -> None:
    controller = SessionController()

    with pytest.raises(NonPositiveDuration):
        controller.start(make_task(seconds), now=0.0)

    assert controller.state == SessionState.IDLE


def test_hidden_view_counts_as_expired() -> None:
    controller = SessionController()
    controller.start(make_task(100), now=0.0)

    assert controller.is_expired(visible=True) is False
    assert controller.is_expired(visible=False) is True


def test_finish_closes_session() -> None:
    controller = SessionController()
    controller.start(make_task(100), now=0.0)
    controller.tick(30.0)

    final = controller.finish()

    assert final.active_elapsed == 30.0
    assert controller.state == SessionState.IDLE
    assert controller.is_expired() is True
    assert controller.toggle_pause().is_paused is False


def test_rejected_start_leaves_running_session_untouched() -> None:
    controller = SessionController()
    original = make_task(100)
    controller.start(original, now=0.0)
    controller.tick(50.0)
    controller.record_distraction()

    with pytest.raises(DurationTooLong):
        controller.start(TaskDefinition("Other", "huge", 10**400), now=60.0)
    with pytest.raises(NonPositiveDuration):
        controller.start(TaskDefinition("Other", "empty", 0), now=60.0)

    assert controller.task == original
    assert controller.state == SessionState.RUNNING
    assert controller.active_elapsed == 50.0
    assert controller.target_seconds == 100.0
    assert controller.distraction_count == 1
    assert controller.last_sample_instant == 50.0
