"""Tests for clipping absences to a sprint window."""

from datetime import date

from sprint_capacity.engine.absences import (
    absence_working_days_in_range,
    clip_to_period,
    merge_intervals,
    union_absence_working_days,
)

START = date(2025, 6, 2)
END = date(2025, 6, 13)


class TestClipToPeriod:
    def test_disjoint_before(self):
        assert clip_to_period(date(2025, 5, 1), date(2025, 5, 5), START, END) is None

    def test_disjoint_after(self):
        assert clip_to_period(date(2025, 6, 14), date(2025, 6, 20), START, END) is None

    def test_touching_first_day(self):
        assert clip_to_period(date(2025, 5, 28), START, START, END) == (START, START)

    def test_covering_whole_period(self):
        assert clip_to_period(date(2025, 5, 1), date(2025, 7, 1), START, END) == (START, END)


class TestAbsenceWorkingDaysInRange:
    def test_inside_sprint(self, make_absence):
        absence = make_absence(1, date(2025, 6, 4), date(2025, 6, 5))
        assert absence_working_days_in_range(absence, START, END) == 2

    def test_entirely_before_sprint(self, make_absence):
        absence = make_absence(1, date(2025, 5, 1), date(2025, 5, 5))
        assert absence_working_days_in_range(absence, START, END) == 0

    def test_long_absence_outside_sprint_counts_nothing(self, make_absence):
        absence = make_absence(1, date(2025, 1, 1), date(2025, 5, 30))
        assert absence_working_days_in_range(absence, START, END) == 0

    def test_clipped_at_sprint_start(self, make_absence):
        """Fri 30.05 to Tue 03.06 only charges Mon and Tue."""
        absence = make_absence(1, date(2025, 5, 30), date(2025, 6, 3))
        assert absence_working_days_in_range(absence, START, END) == 2

    def test_clipped_at_sprint_end(self, make_absence):
        absence = make_absence(1, date(2025, 6, 12), date(2025, 6, 20))
        assert absence_working_days_in_range(absence, START, END) == 2

    def test_weekend_absence(self, make_absence):
        absence = make_absence(1, date(2025, 6, 7), date(2025, 6, 8))
        assert absence_working_days_in_range(absence, START, END) == 0

    def test_holiday_inside_absence_not_charged(self, make_absence):
        absence = make_absence(1, date(2025, 6, 9), date(2025, 6, 10))
        assert absence_working_days_in_range(absence, START, END, ["2025-06-09"]) == 1


class TestUnion:
    def test_merge_overlapping(self):
        merged = merge_intervals([
            (date(2025, 6, 4), date(2025, 6, 6)),
            (date(2025, 6, 2), date(2025, 6, 4)),
        ])
        assert merged == [(date(2025, 6, 2), date(2025, 6, 6))]

    def test_merge_adjacent(self):
        merged = merge_intervals([
            (date(2025, 6, 2), date(2025, 6, 3)),
            (date(2025, 6, 4), date(2025, 6, 5)),
        ])
        assert merged == [(date(2025, 6, 2), date(2025, 6, 5))]

    def test_merge_keeps_gaps(self):
        merged = merge_intervals([
            (date(2025, 6, 2), date(2025, 6, 2)),
            (date(2025, 6, 4), date(2025, 6, 4)),
        ])
        assert len(merged) == 2

    def test_overlapping_days_counted_once(self, make_absence):
        absences = [
            make_absence(1, date(2025, 6, 2), date(2025, 6, 4)),
            make_absence(1, date(2025, 6, 4), date(2025, 6, 6)),
        ]
        assert union_absence_working_days(absences, START, END) == 5

    def test_no_absences(self):
        assert union_absence_working_days([], START, END) == 0
