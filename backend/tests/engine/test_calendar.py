"""Tests for weekend, holiday and working-day arithmetic."""

from datetime import date, datetime

from sprint_capacity.engine.calendar import (
    count_calendar_days,
    count_working_days,
    holiday_set,
    is_holiday,
    is_weekend,
    iter_days,
    to_date,
)


class TestToDate:
    def test_datetime_drops_time_of_day(self):
        assert to_date(datetime(2025, 6, 9, 23, 59)) == date(2025, 6, 9)

    def test_iso_string(self):
        assert to_date("2025-06-09") == date(2025, 6, 9)

    def test_iso_timestamp_string_uses_calendar_part(self):
        assert to_date("2025-06-09T00:00:00.000Z") == date(2025, 6, 9)

    def test_holiday_set_mixes_strings_and_dates(self):
        assert holiday_set(["2025-06-09", date(2025, 12, 25)]) == frozenset(
            {date(2025, 6, 9), date(2025, 12, 25)}
        )

    def test_holiday_set_none_is_empty(self):
        assert holiday_set(None) == frozenset()


class TestIsWeekend:
    def test_saturday_and_sunday(self):
        assert is_weekend(date(2025, 6, 7)) is True
        assert is_weekend(date(2025, 6, 8)) is True

    def test_weekdays(self):
        assert not any(is_weekend(date(2025, 6, d)) for d in range(2, 7))


class TestIsHoliday:
    def test_listed_day(self):
        assert is_holiday(date(2025, 6, 9), ["2025-06-09"]) is True

    def test_datetime_late_in_day_still_matches(self):
        """Membership is by calendar day, a late timestamp does not slip to another day."""
        assert is_holiday(datetime(2025, 6, 9, 23, 30), [date(2025, 6, 9)]) is True

    def test_unlisted_day(self):
        assert is_holiday(date(2025, 6, 10), ["2025-06-09"]) is False

    def test_empty_holiday_list(self):
        assert is_holiday(date(2025, 1, 1), []) is False


class TestCountWorkingDays:
    def test_two_full_weeks(self):
        assert count_working_days(date(2025, 6, 2), date(2025, 6, 13)) == 10

    def test_holiday_inside_range(self):
        assert count_working_days(date(2025, 6, 2), date(2025, 6, 13), ["2025-06-09"]) == 9

    def test_holiday_on_weekend_not_subtracted_twice(self):
        assert count_working_days(date(2025, 6, 2), date(2025, 6, 8), ["2025-06-07"]) == 5

    def test_single_working_day(self):
        assert count_working_days(date(2025, 6, 2), date(2025, 6, 2)) == 1

    def test_weekend_only(self):
        assert count_working_days(date(2025, 6, 7), date(2025, 6, 8)) == 0

    def test_single_holiday(self):
        assert count_working_days(date(2025, 6, 9), date(2025, 6, 9), {date(2025, 6, 9)}) == 0

    def test_end_before_start(self):
        assert count_working_days(date(2025, 6, 13), date(2025, 6, 2)) == 0


class TestCalendarDays:
    def test_inclusive_count(self):
        assert count_calendar_days(date(2025, 6, 2), date(2025, 6, 13)) == 12

    def test_same_day(self):
        assert count_calendar_days(date(2025, 6, 2), date(2025, 6, 2)) == 1

    def test_end_before_start(self):
        assert count_calendar_days(date(2025, 6, 3), date(2025, 6, 2)) == 0

    def test_iter_days_crosses_month_end(self):
        assert list(iter_days(date(2025, 5, 31), date(2025, 6, 1))) == [date(2025, 5, 31), date(2025, 6, 1)]
