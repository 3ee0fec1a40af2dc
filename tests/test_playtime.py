"""Tests for engine/playtime.py."""
from datetime import datetime

from engine.playtime import format_seconds, rollover_cutoff


def test_cutoff_after_rollover_is_same_day():
    now = datetime(2026, 3, 10, 10, 15).timestamp()
    assert rollover_cutoff(now) == datetime(2026, 3, 10, 4, 0).timestamp()


def test_cutoff_before_rollover_is_previous_day():
    now = datetime(2026, 3, 10, 2, 30).timestamp()
    assert rollover_cutoff(now) == datetime(2026, 3, 9, 4, 0).timestamp()


def test_cutoff_exactly_at_rollover():
    now = datetime(2026, 3, 10, 4, 0).timestamp()
    assert rollover_cutoff(now) == now


def test_cutoff_custom_hour():
    now = datetime(2026, 3, 10, 5, 0).timestamp()
    assert rollover_cutoff(now, hour=6) == datetime(2026, 3, 9, 6, 0).timestamp()


def test_format_seconds():
    assert format_seconds(45) == '45s'
    assert format_seconds(750) == '12m 30s'
    assert format_seconds(3900) == '1h 05m'
    assert format_seconds(0) == '0s'
    assert format_seconds(None) == '0s'
