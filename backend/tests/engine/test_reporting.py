"""Tests for capacity labels, utilization bands and the team summary."""

from datetime import date

import pytest

from sprint_capacity.engine.capacity import calculate_sprint_capacity
from sprint_capacity.engine.reporting import (
    capacity_utilization,
    format_capacity,
    format_date,
    format_date_range,
    summarize_sprint_capacity,
)
from sprint_capacity.roles import is_standard_role, role_display_name
from sprint_capacity.schemas.team import TeamMemberInput


class TestFormatting:
    @pytest.mark.parametrize(
        "value,unit,expected",
        [
            (64, "hours", "64 h"),
            (12.25, "story-points", "12.3 SP"),
            (10, "days", "10 Tage"),
            (7.04, "points", "7"),
            (0, "hours", "0 h"),
            (52.5, "hours", "52.5 h"),
        ],
    )
    def test_format_capacity(self, value, unit, expected):
        assert format_capacity(value, unit) == expected

    def test_format_date(self):
        assert format_date(date(2025, 6, 2)) == "02.06.2025"

    def test_format_date_range(self):
        assert format_date_range(date(2025, 6, 2), date(2025, 6, 13)) == "02.06.2025 - 13.06.2025"


class TestUtilization:
    @pytest.mark.parametrize(
        "used,status",
        [(50, "low"), (60, "low"), (80, "optimal"), (95, "high"), (100, "high"), (101, "overcommitted")],
    )
    def test_bands(self, used, status):
        assert capacity_utilization(used, 100).status == status

    def test_percentage(self):
        assert capacity_utilization(40, 80).percentage == 50

    def test_zero_capacity(self):
        util = capacity_utilization(10, 0)
        assert util.percentage == 0
        assert util.status == "low"


class TestRoles:
    def test_standard_role(self):
        assert is_standard_role("Scrum Master") is True
        assert is_standard_role("Astronaut") is False

    def test_display_name_normalizes_case(self):
        assert role_display_name(" developer ") == "Developer"

    def test_custom_role_kept(self):
        assert role_display_name("Agile Coach") == "Agile Coach"

    def test_blank_role(self):
        assert role_display_name("") == "Unassigned"


class TestSummary:
    @pytest.fixture
    def team(self):
        return [
            TeamMemberInput(id=1, name="Anna", role="developer", capacity_per_day=8, focus_factor=1.0),
            TeamMemberInput(id=2, name="Ben", role="QA Engineer", capacity_per_day=6, focus_factor=0.5),
        ]

    def test_full_availability(self, sprint, team):
        result = calculate_sprint_capacity(sprint, team, [], [])
        summary = summarize_sprint_capacity(result, team)
        assert summary.member_count == 2
        assert summary.total_capacity == 110
        assert summary.total_capacity_label == "110 h"
        assert summary.total_working_days == 20
        assert summary.average_capacity_per_member == 55
        assert summary.availability_rate == 100
        assert [r.role for r in summary.by_role] == ["Developer", "QA Engineer"]
        assert summary.by_role[0].average_capacity == 80
        assert [r.kind for r in summary.recommendations] == ["optimal_availability", "planning"]
        assert summary.utilization is None

    def test_heavy_absences(self, sprint, team, make_absence):
        absences = [make_absence(2, date(2025, 6, 2), date(2025, 6, 13))]
        result = calculate_sprint_capacity(sprint, team, absences, [])
        summary = summarize_sprint_capacity(result, team)
        assert summary.total_absence_days == 10
        assert summary.availability_rate == 50
        assert [r.kind for r in summary.recommendations] == ["low_availability", "many_absences", "planning"]

    def test_utilization_of_committed_work(self, sprint, team):
        result = calculate_sprint_capacity(sprint, team, [], [])
        summary = summarize_sprint_capacity(result, team, committed=88)
        assert summary.utilization.percentage == pytest.approx(80)
        assert summary.utilization.status == "optimal"

    def test_empty_team(self, sprint):
        result = calculate_sprint_capacity(sprint, [], [], [])
        summary = summarize_sprint_capacity(result, [])
        assert summary.average_capacity_per_member == 0
        assert summary.availability_rate == 0
        assert [r.kind for r in summary.recommendations] == ["planning"]
