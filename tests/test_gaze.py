from focus.gaze import GazeState, GazeTracker, advance, state_of
from focus.models import AttentionSample, GazeSession


def feed(session, settings, pattern):
    """Run (timestamp, attentive) pairs through advance(); return final session and fire times."""
    fired_at = []
    for t, attentive in pattern:
        session, fired = advance(session, AttentionSample(timestamp=t, attentive=attentive), settings)
        if fired:
            fired_at.append(t)
    return session, fired_at


def away(start, stop, step=0.5):
    n = int(round((stop - start) / step))
    return [(start + i * step, False) for i in range(n + 1)]


def test_first_look_away_enters_looking_away(settings):
    s, fired = advance(GazeSession(), AttentionSample(timestamp=10.0, attentive=False), settings)
    assert not fired
    assert state_of(s) is GazeState.LOOKING_AWAY
    assert s.look_away_started_at == 10.0


def test_attentive_while_focused_is_noop(settings):
    s0 = GazeSession()
    s1, fired = advance(s0, AttentionSample(timestamp=1.0, attentive=True), settings)
    assert s1 == s0 and not fired


def test_within_grace_never_warns(settings):
    # 0.0 .. 3.0 inclusive: away for exactly G, not more
    s, fired = feed(GazeSession(), settings, away(0.0, 3.0))
    assert fired == []
    assert s.warning_count == 0


def test_past_grace_warns_exactly_once(settings):
    s, fired = feed(GazeSession(), settings, away(0.0, 8.5))
    assert fired == [3.5]
    assert s.warning_count == 1


def test_one_warning_per_cooldown_window(settings):
    # warnings at 3.5, then strictly more than 5s later each time
    s, fired = feed(GazeSession(), settings, away(0.0, 20.0))
    assert fired == [3.5, 9.0, 14.5, 20.0]
    assert s.warning_count == 4
    assert s.last_warning_at == 20.0


def test_recovery_resets_look_away_but_keeps_warnings(settings):
    s, _ = feed(GazeSession(), settings, away(0.0, 10.0))
    assert s.warning_count == 2
    s, fired = advance(s, AttentionSample(timestamp=10.5, attentive=True), settings)
    assert not fired
    assert state_of(s) is GazeState.FOCUSED
    assert s.look_away_started_at is None
    assert s.warning_count == 2


def test_grace_restarts_after_recovery(settings):
    pattern = away(0.0, 4.0) + [(4.5, True)] + away(20.0, 23.0)
    s, fired = feed(GazeSession(), settings, pattern)
    # second stretch never exceeds the grace period
    assert fired == [3.5]
    assert s.look_away_started_at == 20.0


def test_flicker_does_not_warn(settings):
    pattern = []
    for i in range(40):
        pattern.append((i * 0.5, i % 2 == 0))
    s, fired = feed(GazeSession(), settings, pattern)
    assert fired == []


def test_warning_count_is_monotonic(settings):
    pattern = away(0.0, 6.0) + [(6.5, True)] + away(7.0, 15.0) + [(15.5, True), (16.0, True)] + away(16.5, 30.0)
    session = GazeSession()
    counts = []
    for t, attentive in pattern:
        session, _ = advance(session, AttentionSample(timestamp=t, attentive=attentive), settings)
        counts.append(session.warning_count)
        # started_at is set iff looking away
        assert (session.look_away_started_at is not None) == session.currently_looking_away
    assert counts == sorted(counts)
    assert counts[-1] > 0


def test_tracker_logs_offsets_from_session_start(settings):
    tracker = GazeTracker(settings, started_at=100.0)
    fired = [tracker.step(AttentionSample(timestamp=t, attentive=a))
             for t, a in away(100.0, 110.0)]
    fired = [w for w in fired if w is not None]
    assert tracker.warning_count == 2
    assert [w.timestamp_offset for w in tracker.warnings] == [3.5, 9.0]
    assert fired == tracker.warnings
    assert tracker.state is GazeState.LOOKING_AWAY
