import pytest

from app.api.v1.student.schemas import AttendanceOverview, SubjectAttendance
from app.core.enums import AttendanceStatus, attendance_status


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (100, AttendanceStatus.EXCELLENT),
        (85, AttendanceStatus.EXCELLENT),
        (84.99, AttendanceStatus.GOOD),
        (75, AttendanceStatus.GOOD),
        (74.99, AttendanceStatus.WARNING),
        (65, AttendanceStatus.WARNING),
        (64.99, AttendanceStatus.CRITICAL),
        (0, AttendanceStatus.CRITICAL),
    ],
)
def test_attendance_status_buckets(percentage, expected) -> None:
    assert attendance_status(percentage) == expected


def test_subject_attendance_percentage() -> None:
    subject = SubjectAttendance(subject_name="Computer Networks", attended=13, total=20)
    assert subject.percentage == 65.0
    assert subject.status == AttendanceStatus.WARNING


def test_subject_with_no_classes_is_zero() -> None:
    subject = SubjectAttendance(subject_name="Seminar", attended=0, total=0)
    assert subject.percentage == 0.0
    assert subject.status == AttendanceStatus.CRITICAL


def test_overall_percentage_is_weighted_by_classes() -> None:
    overview = AttendanceOverview(
        subject_wise_attendance=[
            SubjectAttendance(subject_name="A", attended=9, total=10),
            SubjectAttendance(subject_name="B", attended=10, total=40),
        ]
    )
    assert overview.total_classes == 50
    assert overview.attended_classes == 19
    # 19 / 50, not the mean of 90% and 25%
    assert overview.overall_percentage == 38.0
    assert overview.status == AttendanceStatus.CRITICAL


def test_empty_overview() -> None:
    overview = AttendanceOverview()
    assert overview.overall_percentage == 0.0
    assert overview.model_dump()["total_classes"] == 0


@pytest.mark.parametrize(
    "attended, total, expected",
    [
        (33999, 40000, AttendanceStatus.GOOD),
        (29999, 40000, AttendanceStatus.WARNING),
        (25999, 40000, AttendanceStatus.CRITICAL),
        (17, 20, AttendanceStatus.EXCELLENT),
        (13, 20, AttendanceStatus.WARNING),
    ],
)
def test_status_uses_unrounded_percentage(attended, total, expected) -> None:
    subject = SubjectAttendance(subject_name="Data Structures", attended=attended, total=total)
    assert subject.status == expected
    overview = AttendanceOverview(subject_wise_attendance=[subject])
    assert overview.status == expected


def test_displayed_percentage_is_rounded() -> None:
    subject = SubjectAttendance(subject_name="Data Structures", attended=33999, total=40000)
    assert subject.percentage == 85.0
    assert subject.status == AttendanceStatus.GOOD
