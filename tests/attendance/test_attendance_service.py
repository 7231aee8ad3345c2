from __future__ import annotations

from datetime import timedelta

import pytest

from src.hostel_management.hostel_management.attendance.model import AttendanceRecord
from src.hostel_management.hostel_management.core.exceptions import ConflictError, ValidationError


def test_mark_today_once_per_day(container, make_student, fixed_now):
    make_student("stu-1", branch="north-block", room_number="101")

    record = container.attendance_service.mark_today("stu-1", now=fixed_now)
    assert record.date == "2026-03-15"
    assert record.present is True
    assert record.check_in_time == "2026-03-15T09:30:00.000Z"

    with pytest.raises(ConflictError):
        container.attendance_service.mark_today("stu-1", now=fixed_now + timedelta(hours=3))

    container.attendance_service.mark_today("stu-1", now=fixed_now + timedelta(days=1))
    assert [r.date for r in container.attendance_service.list_for_student("stu-1")] == ["2026-03-15", "2026-03-16"]


def test_mark_today_requires_branch(container, make_student):
    make_student("stu-1")
    with pytest.raises(ValidationError, match="Branch not assigned"):
        container.attendance_service.mark_today("stu-1")


def test_overview(container, make_student, fixed_now):
    make_student("stu-1", branch="north-block", room_number="101")
    make_student("stu-2", email="b@example.com", branch="north-block", room_number="102")
    make_student("stu-3", email="c@example.com")

    container.attendance_service.mark_today("stu-1", now=fixed_now - timedelta(days=1))
    container.attendance_service.mark_today("stu-1", now=fixed_now)
    container.attendance_repo.create(
        AttendanceRecord(
            student_id="stu-2",
            student_name="Asha Rao",
            branch="north-block",
            date="2026-03-14",
            present=False,
            check_in_time="2026-03-14T10:00:00.000Z",
        )
    )
    container.attendance_service.mark_today("stu-2", now=fixed_now)

    overview = container.attendance_service.overview(now=fixed_now)

    stats = {s["studentId"]: s for s in overview["studentStats"]}
    assert stats["stu-1"]["percentage"] == 100
    assert stats["stu-2"]["presentDays"] == 1
    assert stats["stu-2"]["percentage"] == 50
    assert stats["stu-3"]["totalDays"] == 0
    assert overview["branchStats"] == [{"branch": "north-block", "totalStudents": 2, "averageAttendance": 75}]
    assert overview["todayStats"] == {"date": "2026-03-15", "totalMarked": 2, "totalStudents": 3, "percentage": 66.7}
    assert len(overview["attendance"]) == 4
