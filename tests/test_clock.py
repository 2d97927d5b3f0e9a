"""Tests for the bet-window countdown."""

from datetime import datetime, time

import pytest

from matka_client.betting.clock import Countdown, remaining

from conftest import make_game


def test_open_counts_to_end_time_across_midnight():
    game = make_game(currentStatus="open", endTime="23:10")
    countdown = remaining(datetime(2024, 5, 1, 23, 59, 30), game)

    assert countdown.hours == 23
    assert countdown.minutes == 11
    assert countdown.seconds == 29


@pytest.mark.parametrize(
    "status, expected",
    [
        ("open", Countdown(hours=13, minutes=10, seconds=59)),    # endTime 23:10
        ("closed", Countdown(hours=13, minutes=30, seconds=59)),  # resultTime 23:30
        ("waiting", Countdown(hours=23, minutes=0, seconds=59)),  # startTime 09:00, tomorrow
    ],
)
def test_boundary_follows_status(status, expected):
    game = make_game(currentStatus=status)
    assert remaining(time(10, 0, 0), game) == expected


def test_no_boundary_gives_zero():
    game = make_game(currentStatus="result_declared")
    assert remaining(datetime(2024, 5, 1, 12, 0, 0), game) == Countdown()
    assert remaining(datetime(2024, 5, 1, 12, 0, 0), None) == Countdown()


def test_boundary_now_is_zero_minutes():
    game = make_game(currentStatus="open", endTime="9:05")
    countdown = remaining(datetime(2024, 5, 1, 9, 5, 10), game)
    assert (countdown.hours, countdown.minutes, countdown.seconds) == (0, 0, 49)


def test_recomputed_when_snapshot_changes():
    now = datetime(2024, 5, 1, 20, 0, 0)
    assert remaining(now, make_game(currentStatus="open")).hours == 3
    assert remaining(now, make_game(currentStatus="closed")).minutes == 30


def test_str():
    assert str(Countdown(hours=1, minutes=2, seconds=3)) == "01:02:03"
