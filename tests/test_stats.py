import pytest

from pingkit.stats import PingStats, round_trip_ms


def test_fresh_stats_have_no_loss():
    stats = PingStats()
    assert stats.transmitted == 0
    assert stats.loss_percent() == 0
    assert stats.min_rtt is None


def test_record_tracks_extremes():
    stats = PingStats()
    for rtt in (4.0, 1.5, 9.25):
        stats.record(rtt)
    assert stats.received == 3
    assert stats.min_rtt == 1.5
    assert stats.max_rtt == 9.25
    assert stats.total_rtt == pytest.approx(4.0 + 1.5 + 9.25)


def test_loss_is_truncated():
    stats = PingStats(transmitted=3, received=1)
    assert stats.loss_percent() == 66


def test_loss_is_bounded():
    stats = PingStats(transmitted=5, received=5)
    assert stats.loss_percent() == 0
    stats.received = 0
    assert stats.loss_percent() == 100


def test_summary_with_replies():
    stats = PingStats(transmitted=2)
    stats.record(1.0)
    stats.record(3.0)
    lines = stats.summary("example.com").splitlines()
    assert lines[0] == "--- example.com ping statistics ---"
    assert lines[1] == "2 packets transmitted, 2 packets received, 0% packet loss"
    assert lines[2] == "round-trip min/avg/max/stddev = 1.000/2.000/3.000/1.000 ms"


def test_summary_without_replies_has_no_round_trip_line():
    stats = PingStats(transmitted=1)
    text = stats.summary("example.com")
    assert "round-trip" not in text
    assert text.splitlines()[1] == "1 packets transmitted, 0 packets received, 100% packet loss"


def test_identical_samples_give_zero_stddev():
    stats = PingStats(transmitted=3)
    for _ in range(3):
        stats.record(0.1)
    assert stats.summary("h").endswith("/0.000 ms")


def test_reset_clears_counters():
    stats = PingStats(transmitted=4)
    stats.record(2.0)
    stats.reset()
    assert (stats.transmitted, stats.received, stats.max_rtt) == (0, 0, 0.0)
    assert stats.min_rtt is None
    assert stats.summary("h").count("\n") == 1


def test_round_trip_ms():
    assert round_trip_ms(10.0, 10.5) == pytest.approx(500.0)
    assert round_trip_ms(3.0, 3.0) == 0.0