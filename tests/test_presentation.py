from __future__ import annotations

import pytest

from app.core.errors import InvalidWindowError
from app.core.models import Status
from app.services.history import to_epoch_millis
from app.services.presentation import detailed_view, resolve_range, sparkline_view
from app.services.window import resolve_window, utc_now


def test_sparkline_spans_compact_window(make_monitor, obs, now):
    monitor = make_monitor(history=[obs(30, "up")])

    view = sparkline_view(monitor, now)

    window = resolve_window(20, now)
    assert view.x_min == to_epoch_millis(window.cutoff)
    assert view.x_max == to_epoch_millis(now)
    assert [p.x for p in view.points] == [view.x_min, view.x_max]
    assert view.placeholder is False
    assert view.is_down is False


def test_sparkline_placeholder_for_empty_history(make_monitor, now):
    view = sparkline_view(make_monitor(history=[]), now)

    assert view.placeholder is True
    assert view.points == []
    assert view.is_down is False


def test_sparkline_down_flag_follows_last_received_record(make_monitor, obs, now):
    # newest by time is up, but the collaborator delivered the down record last
    monitor = make_monitor(history=[obs(1, "up"), obs(3, "down")])

    assert sparkline_view(monitor, now).is_down is True


def test_chart_id_is_caller_supplied(make_monitor, obs, now):
    monitor = make_monitor("abc", history=[obs(5)])

    assert sparkline_view(monitor, now).chart_id == "chart-abc"
    assert sparkline_view(monitor, now, chart_id="card-1").chart_id == "card-1"


def test_detailed_view_uses_selected_range(make_monitor, obs, now):
    monitor = make_monitor(history=[obs(90, "up"), obs(30, "down"), obs(10, "up")])

    view = detailed_view(monitor, "1h", now)

    assert view.minutes == 60
    assert view.x_min == to_epoch_millis(resolve_window(60, now).cutoff)
    assert view.down_markers == [i for i, p in enumerate(view.points) if p.status == Status.DOWN]
    assert view.down_markers
    assert view.placeholder is False


def test_detailed_view_accepts_alternate_ranges(make_monitor, obs, now):
    ranges = {"24h": 1440, "48h": 2880, "72h": 4320}

    view = detailed_view(make_monitor(history=[obs(2000)]), "48h", now, ranges=ranges)

    assert view.minutes == 2880
    assert view.ranges == ranges


def test_detailed_view_placeholder(make_monitor, now):
    assert detailed_view(make_monitor(history=[]), "20m", now).placeholder is True


def test_unknown_range_is_rejected():
    with pytest.raises(InvalidWindowError):
        resolve_range("5y")


def test_views_read_clock_when_now_omitted(make_monitor, obs):
    monitor = make_monitor(history=[obs(30, "up")])
    before = to_epoch_millis(utc_now())

    sparkline = sparkline_view(monitor)
    detailed = detailed_view(monitor, "1h")

    after = to_epoch_millis(utc_now())
    assert before <= sparkline.x_max <= after
    assert sparkline.x_max - sparkline.x_min == 20 * 60_000
    assert before <= detailed.x_max <= after
    assert detailed.x_max - detailed.x_min == 60 * 60_000
