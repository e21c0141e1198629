"""Tests del selector de granularidad / formato por rango."""

from datetime import datetime

import pytest

from queue_api.aggregation.strategy import (
    DAILY,
    HOURLY_DATE_TIME,
    HOURLY_TIME,
    LabelFormat,
    select_strategy,
)
from queue_api.core.domain import Granularity, TimeRange


class TestSelectStrategy:

    def test_day_range_is_hourly_with_time_labels(self):
        strategy = select_strategy(TimeRange.DAY)
        assert strategy == HOURLY_TIME
        assert strategy.granularity is Granularity.HOUR
        assert strategy.label_format is LabelFormat.HOUR_MINUTE

    def test_week_range_is_hourly_with_date_time_labels(self):
        assert select_strategy(TimeRange.WEEK) == HOURLY_DATE_TIME

    @pytest.mark.parametrize("time_range", [TimeRange.TWO_WEEKS, TimeRange.MONTH, TimeRange.LIFETIME])
    def test_long_ranges_are_daily(self, time_range):
        strategy = select_strategy(time_range)
        assert strategy == DAILY
        assert strategy.granularity is Granularity.DAY

    def test_accepts_string_values(self):
        assert select_strategy("24h") == HOURLY_TIME
        assert select_strategy("30D") == DAILY

    @pytest.mark.parametrize("bogus", ["1y", "", None, "week"])
    def test_unknown_range_falls_back_to_week_policy(self, bogus):
        assert select_strategy(bogus) == HOURLY_DATE_TIME


class TestLabelFormat:

    def test_render(self):
        dt = datetime(2024, 5, 10, 13, 5)
        assert LabelFormat.HOUR_MINUTE.render(dt) == "13:05"
        assert LabelFormat.MONTH_DAY_TIME.render(dt) == "05/10 13:05"
        assert LabelFormat.MONTH_DAY.render(dt) == "05/10"


class TestTimeRange:

    def test_lookback_hours(self):
        assert [r.lookback_hours for r in TimeRange] == [24, 168, 336, 720, None]

    def test_parse(self):
        assert TimeRange.parse(" 7d ") is TimeRange.WEEK
        assert TimeRange.parse(TimeRange.MONTH) is TimeRange.MONTH
        assert TimeRange.parse("90d") is None
