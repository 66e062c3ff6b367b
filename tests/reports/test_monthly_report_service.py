from __future__ import annotations

from datetime import date

import pytest

from src.center_admin.center_admin.core.exceptions import ValidationError


def test_march_scenario_matches_expected_stats(container, add_student, add_attendance):
    for sid, name in [("S1", "Ravi"), ("S2", "Meena"), ("S3", "Kiran")]:
        add_student(sid, name)
    add_attendance(date(2024, 3, 4), ["S1", "S2"])
    add_attendance(date(2024, 3, 11), ["S1"])

    report = container.report_service.get_monthly_report("C1", 2, 2024, "5th")

    assert report.month == "March"
    assert report.year == 2024
    assert report.class_name == "5th"
    assert report.working_days == 2
    assert report.total_students == 3
    assert [(s.student_id, s.present_days, s.percentage) for s in report.student_stats] == [
        ("S1", 2, 100.0),
        ("S2", 1, 50.0),
        ("S3", 0, 0.0),
    ]
    assert report.average_attendance == pytest.approx(50.0, abs=1e-9)


def test_no_working_days_yields_zero_everywhere(container, add_student):
    add_student("S1", "Ravi")
    add_student("S2", "Meena")

    report = container.report_service.get_monthly_report("C1", 5, 2024, "All")

    assert report.working_days == 0
    assert report.total_students == 2
    assert all(s.percentage == 0 for s in report.student_stats)
    assert report.average_attendance == 0


def test_no_students_average_is_zero(container, add_attendance):
    add_attendance(date(2024, 3, 4), ["GHOST"])

    report = container.report_service.get_monthly_report("C1", 2, 2024, "All")

    assert report.working_days == 1
    assert report.total_students == 0
    assert report.student_stats == ()
    assert report.average_attendance == 0


def test_month_boundaries_are_inclusive_and_exclusive_outside(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_attendance(date(2024, 1, 31), ["S1"])
    add_attendance(date(2024, 2, 1), ["S1"])
    add_attendance(date(2024, 2, 29), [])
    add_attendance(date(2024, 3, 1), ["S1"])

    report = container.report_service.get_monthly_report("C1", 1, 2024, "All")

    assert report.month == "February"
    assert report.working_days == 2
    assert report.student_stats[0].present_days == 1
    assert report.student_stats[0].percentage == pytest.approx(50.0)


def test_december_window_does_not_spill_into_next_year(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_attendance(date(2023, 12, 31), ["S1"])
    add_attendance(date(2024, 1, 1), ["S1"])

    report = container.report_service.get_monthly_report("C1", 11, 2023, "All")

    assert report.month == "December"
    assert report.working_days == 1


def test_class_filter_and_center_scope(container, volunteer, add_student, add_attendance):
    add_student("S1", "Ravi", "5th")
    add_student("S2", "Meena", "6th")
    add_student("X1", "Other center", "5th", center_id="C2")
    add_attendance(date(2024, 3, 4), ["S1", "S2", "X1"])
    add_attendance(date(2024, 3, 5), ["X1"], center_id="C2")

    fifth = container.report_service.get_monthly_report("C1", 2, 2024, "5th")
    everyone = container.report_service.get_monthly_report("C1", 2, 2024, "All")

    assert [s.student_id for s in fifth.student_stats] == ["S1"]
    assert fifth.working_days == 1
    assert [s.student_id for s in everyone.student_stats] == ["S1", "S2"]
    assert everyone.class_name == "All"


@pytest.mark.parametrize("class_filter", ["all", "ALL", " All ", "", None])
def test_all_classes_filter_ignores_case(container, add_student, class_filter):
    add_student("S1", "Ravi", "5th")
    add_student("S2", "Meena", "6th")

    report = container.report_service.get_monthly_report("C1", 2, 2024, class_filter)

    assert [s.student_id for s in report.student_stats] == ["S1", "S2"]
    assert report.class_name == "All"


def test_same_day_sheets_count_separately(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_attendance(date(2024, 3, 4), ["S1"])
    add_attendance(date(2024, 3, 4), [])

    report = container.report_service.get_monthly_report("C1", 2, 2024, "All")

    assert report.working_days == 2
    assert report.student_stats[0].percentage == pytest.approx(50.0)


def test_present_days_never_exceed_working_days(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_student("S2", "Meena")
    add_attendance(date(2024, 3, 4), ["S1", "S1", "S2"])
    add_attendance(date(2024, 3, 6), ["S1"])

    report = container.report_service.get_monthly_report("C1", 2, 2024, "All")

    for s in report.student_stats:
        assert s.present_days <= report.working_days
    mean = sum(s.percentage for s in report.student_stats) / len(report.student_stats)
    assert report.average_attendance == pytest.approx(mean, abs=1e-9)


def test_repeated_calls_return_identical_output(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_attendance(date(2024, 3, 4), ["S1"])

    first = container.report_service.get_monthly_report("C1", 2, 2024, "All")
    second = container.report_service.get_monthly_report("C1", 2, 2024, "All")

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_uses_wire_field_names(container, add_student, add_attendance):
    add_student("S1", "Ravi")
    add_attendance(date(2024, 3, 4), ["S1"])

    data = container.report_service.get_monthly_report("C1", 2, 2024, "All").to_dict()

    assert data["workingDays"] == 1
    assert data["averageAttendance"] == 100.0
    assert data["studentStats"] == [{"studentId": "S1", "name": "Ravi", "presentDays": 1, "percentage": 100.0}]


@pytest.mark.parametrize("month", [-1, 12])
def test_month_out_of_range_is_rejected(container, month):
    with pytest.raises(ValidationError):
        container.report_service.get_monthly_report("C1", month, 2024, "All")
