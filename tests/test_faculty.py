import asyncio
import random
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

from app.api.v1.faculty import service as faculty_service
from app.api.v1.faculty.mock_data import (
    create_class_attendances,
    create_students,
    create_subjects,
    create_todays_classes,
    random_attendance_status,
)
from app.core.config import settings
from app.core.enums import AttendanceRecordStatus


def test_generated_sheets_follow_class_sections() -> None:
    now = datetime.now(timezone.utc)
    rng = random.Random(7)
    classes = create_todays_classes(create_subjects(), now.date())
    students = create_students(rng)
    sheets = create_class_attendances(classes, students, now, rng)

    assert len(students) == 45
    assert [s.class_id for s in sheets] == ["CLASS001", "CLASS002", "CLASS003"]
    for class_item, sheet in zip(classes, sheets):
        assert sheet.students
        assert all(i.student.section == class_item.section for i in sheet.students)
        assert not any(i.is_marked for i in sheet.students)
        counts = sheet.present_count + sheet.absent_count + sheet.late_count + sheet.excused_count
        assert counts == sheet.total_students


def test_random_attendance_status_thresholds() -> None:
    class FixedRandom:
        def __init__(self, value):
            self.value = value

        def random(self):
            return self.value

    # probability 1.0: <0.8 present, <0.9 late, <0.95 excused, otherwise absent
    assert random_attendance_status(100, FixedRandom(0.5)) == AttendanceRecordStatus.PRESENT
    assert random_attendance_status(100, FixedRandom(0.85)) == AttendanceRecordStatus.LATE
    assert random_attendance_status(100, FixedRandom(0.92)) == AttendanceRecordStatus.EXCUSED
    assert random_attendance_status(100, FixedRandom(0.99)) == AttendanceRecordStatus.ABSENT


@pytest.mark.asyncio
async def test_dashboard(client: AsyncClient, faculty_headers) -> None:
    response = await client.get("/api/v1/faculty/dashboard", headers=faculty_headers)
    assert response.status_code == 200
    data = response.json()

    assert data["faculty"]["full_name"] == "Anjali Verma"
    assert data["stats"]["total_students"] == 45
    assert data["stats"]["pending_assignments"] == 1
    assert data["stats"]["todays_attendance"] == {"total": 3, "marked": 0, "percentage": 0.0}
    assert [c["id"] for c in data["todays_classes"]] == ["CLASS001", "CLASS002", "CLASS003"]
    assert len(data["recent_activities"]) == 4


@pytest.mark.asyncio
async def test_unknown_class_attendance(client: AsyncClient, faculty_headers) -> None:
    response = await client.get("/api/v1/faculty/classes/CLASS999/attendance", headers=faculty_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_single_student(client: AsyncClient, faculty_headers) -> None:
    sheet = (await client.get("/api/v1/faculty/classes/CLASS001/attendance", headers=faculty_headers)).json()
    student = sheet["students"][0]["student"]

    response = await client.put(
        f"/api/v1/faculty/classes/CLASS001/attendance/{student['id']}",
        json={"status": "absent", "remarks": "Medical emergency"},
        headers=faculty_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    item = next(i for i in updated["students"] if i["student"]["id"] == student["id"])
    assert item["status"] == "absent"
    assert item["remarks"] == "Medical emergency"
    assert item["is_marked"] is True
    statuses = [i["status"] for i in updated["students"]]
    assert updated["absent_count"] == statuses.count("absent")
    assert updated["present_count"] == statuses.count("present")

    activities = (await client.get("/api/v1/faculty/activities", headers=faculty_headers)).json()
    assert activities[0]["title"] == "Attendance Marked"
    assert activities[0]["description"] == f"{student['full_name']} marked as Absent"


@pytest.mark.asyncio
async def test_update_unknown_student(client: AsyncClient, faculty_headers) -> None:
    response = await client.put(
        "/api/v1/faculty/classes/CLASS001/attendance/STU999",
        json={"status": "present"},
        headers=faculty_headers,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_activity_feed_is_capped(client: AsyncClient, faculty_headers) -> None:
    sheet = (await client.get("/api/v1/faculty/classes/CLASS002/attendance", headers=faculty_headers)).json()
    student_id = sheet["students"][0]["student"]["id"]
    for _ in range(12):
        await client.put(
            f"/api/v1/faculty/classes/CLASS002/attendance/{student_id}",
            json={"status": "late"},
            headers=faculty_headers,
        )
    activities = (await client.get("/api/v1/faculty/activities", headers=faculty_headers)).json()
    assert len(activities) == 10
    assert all(a["title"] == "Attendance Marked" for a in activities)


@pytest.mark.asyncio
async def test_mark_all_and_submit(client: AsyncClient, faculty_headers) -> None:
    response = await client.post(
        "/api/v1/faculty/classes/CLASS003/attendance/mark-all",
        json={"status": "present"},
        headers=faculty_headers,
    )
    sheet = response.json()
    assert sheet["present_count"] == sheet["total_students"]
    assert sheet["attendance_percentage"] == 100.0

    student_id = sheet["students"][0]["student"]["id"]
    await client.put(
        f"/api/v1/faculty/classes/CLASS003/attendance/{student_id}",
        json={"status": "late"},
        headers=faculty_headers,
    )

    response = await client.post("/api/v1/faculty/classes/CLASS003/attendance/submit", headers=faculty_headers)
    assert response.status_code == 200
    sheet = response.json()
    total = sheet["total_students"]
    assert sheet["is_submitted"] is True
    assert all(i["is_marked"] for i in sheet["students"])
    # Late students still count towards the sheet percentage
    assert sheet["attendance_percentage"] == 100.0

    classes = (await client.get("/api/v1/faculty/classes", headers=faculty_headers)).json()
    assert next(c for c in classes if c["id"] == "CLASS003")["status"] == "completed"

    activities = (await client.get("/api/v1/faculty/activities", headers=faculty_headers)).json()
    expected_pct = int((total - 1) / total * 100)
    assert activities[0]["title"] == "Attendance Submitted"
    assert activities[0]["description"] == (
        f"Software Engineering - {total - 1} present, 0 absent ({expected_pct}%)"
    )

    dashboard = (await client.get("/api/v1/faculty/dashboard", headers=faculty_headers)).json()
    assert dashboard["stats"]["todays_attendance"]["marked"] == 1
    assert dashboard["stats"]["todays_attendance"]["percentage"] == 33.33


@pytest.mark.asyncio
async def test_assignments_filter(client: AsyncClient, faculty_headers) -> None:
    response = await client.get(
        "/api/v1/faculty/assignments", params={"status": "needs_grading"}, headers=faculty_headers
    )
    assert [a["id"] for a in response.json()] == ["ASSIGN002"]


@pytest.mark.asyncio
async def test_refresh_regenerates_state(client: AsyncClient, faculty_headers) -> None:
    await client.post("/api/v1/faculty/classes/CLASS001/attendance/submit", headers=faculty_headers)
    response = await client.post("/api/v1/faculty/dashboard/refresh", headers=faculty_headers)
    assert response.status_code == 200
    assert response.json()["stats"]["todays_attendance"]["marked"] == 0


@pytest.mark.asyncio
async def test_concurrent_first_loads_keep_changes(monkeypatch) -> None:
    monkeypatch.setattr(settings, "mock_latency_seconds", 0.02)

    await asyncio.gather(
        faculty_service.submit_attendance("FAC1023", "CLASS001"),
        faculty_service.load_dashboard("FAC1023"),
    )

    attendance = await faculty_service.get_class_attendance("FAC1023", "CLASS001")
    assert attendance.is_submitted is True
    activities = await faculty_service.list_recent_activities("FAC1023")
    assert activities[0].title == "Attendance Submitted"
