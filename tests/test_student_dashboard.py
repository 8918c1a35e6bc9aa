import asyncio
from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from app.api.v1.student import service as student_service
from app.api.v1.student.service import StudentDashboardState, greeting_for
from app.core.config import settings


@pytest.mark.parametrize(
    "hour, greeting",
    [(0, "Good Morning"), (11, "Good Morning"), (12, "Good Afternoon"), (16, "Good Afternoon"), (17, "Good Evening"), (23, "Good Evening")],
)
def test_greeting_for_hour(hour, greeting) -> None:
    assert greeting_for(hour) == greeting


@pytest.mark.asyncio
async def test_dashboard(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/student/dashboard", headers=student_headers)
    assert response.status_code == 200
    data = response.json()

    assert data["greeting"] in {"Good Morning", "Good Afternoon", "Good Evening"}
    assert data["student"]["full_name"] == "Yaduraj Singh"
    overview = data["attendance_overview"]
    assert overview["total_classes"] == 85
    assert overview["attended_classes"] == 69
    assert overview["overall_percentage"] == 81.18
    assert overview["status"] == "good"

    due_dates = [a["due_date"] for a in data["upcoming_assignments"]]
    assert due_dates == sorted(due_dates)
    notice_dates = [n["date"] for n in data["recent_notices"]]
    assert notice_dates == sorted(notice_dates, reverse=True)
    assert data["registration_status"]["min_credits"] == 12
    assert data["registration_status"]["max_credits"] == 24


@pytest.mark.asyncio
async def test_dashboard_is_kept_until_refresh(client: AsyncClient, student_headers) -> None:
    first = (await client.get("/api/v1/student/dashboard", headers=student_headers)).json()
    second = (await client.get("/api/v1/student/dashboard", headers=student_headers)).json()
    assert first["loaded_at"] == second["loaded_at"]

    refreshed = await client.post("/api/v1/student/dashboard/refresh", headers=student_headers)
    assert refreshed.status_code == 200
    assert refreshed.json()["student"]["id"] == first["student"]["id"]


@pytest.mark.asyncio
async def test_subject_wise_attendance(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/student/attendance", headers=student_headers)
    subjects = {s["subject_name"]: s for s in response.json()["subject_wise_attendance"]}
    assert subjects["Data Structures"]["percentage"] == 90.0
    assert subjects["Data Structures"]["status"] == "excellent"
    assert subjects["Operating Systems"]["status"] == "good"
    assert subjects["Computer Networks"]["status"] == "warning"


@pytest.mark.asyncio
async def test_notices_filtered_by_category(client: AsyncClient, student_headers) -> None:
    response = await client.get(
        "/api/v1/student/notices", params={"category": "hostel"}, headers=student_headers
    )
    assert response.status_code == 200
    notices = response.json()
    assert [n["id"] for n in notices] == ["NOT004"]


@pytest.mark.asyncio
async def test_profile(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/student/profile", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["enrollment_number"] == "245uai130"


@pytest.mark.asyncio
async def test_faculty_cannot_open_student_dashboard(client: AsyncClient, faculty_headers) -> None:
    response = await client.get("/api/v1/student/dashboard", headers=faculty_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_concurrent_first_loads_generate_once(monkeypatch) -> None:
    monkeypatch.setattr(settings, "mock_latency_seconds", 0.02)
    generated = []
    original = StudentDashboardState.populate

    def counting_populate(self, record) -> None:
        generated.append(self.user_id)
        original(self, record)

    monkeypatch.setattr(StudentDashboardState, "populate", counting_populate)

    first, second = await asyncio.gather(
        student_service.load_dashboard("STU245UAI130"),
        student_service.load_dashboard("STU245UAI130"),
    )
    assert generated == ["STU245UAI130"]
    assert first.loaded_at == second.loaded_at


# ----- Profile -----
@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient, student_headers) -> None:
    response = await client.patch(
        "/api/v1/student/profile",
        json={
            "phone_number": "+91 9000000001",
            "address": {
                "street": "Hostel Block C",
                "city": "Greater Noida",
                "state": "UP",
                "pincode": "201312",
                "country": "India",
            },
        },
        headers=student_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["phone_number"] == "+91 9000000001"
    assert data["address"]["street"] == "Hostel Block C"
    assert data["guardian_info"]["name"] == "Sujeet Kumar Singh"

    # Edits outlive a refresh
    refreshed = (await client.post("/api/v1/student/dashboard/refresh", headers=student_headers)).json()
    assert refreshed["student"]["phone_number"] == "+91 9000000001"
    assert refreshed["student"]["address"]["street"] == "Hostel Block C"


@pytest.mark.asyncio
async def test_update_profile_needs_a_field(client: AsyncClient, student_headers) -> None:
    response = await client.patch("/api/v1/student/profile", json={"phone_number": None}, headers=student_headers)
    assert response.status_code == 400

    response = await client.patch("/api/v1/student/profile", json={"phone_number": "123"}, headers=student_headers)
    assert response.status_code == 422


# ----- Goals -----
@pytest.mark.asyncio
async def test_goals(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/student/goals", headers=student_headers)
    assert response.status_code == 200
    goals = response.json()
    assert {g["id"] for g in goals} == {"GOAL001", "GOAL002", "GOAL003"}
    target_dates = [g["target_date"] for g in goals]
    assert target_dates == sorted(target_dates)


@pytest.mark.asyncio
async def test_create_goal(client: AsyncClient, student_headers) -> None:
    target = date.today() + timedelta(days=60)
    response = await client.post(
        "/api/v1/student/goals",
        json={"type": "career", "title": "  Finish summer internship  ", "target_date": target.isoformat()},
        headers=student_headers,
    )
    assert response.status_code == 201
    goal = response.json()
    assert goal["title"] == "Finish summer internship"
    assert goal["status"] == "active"
    assert goal["progress"] == 0.0
    assert goal["priority"] == "medium"

    goals = (await client.get("/api/v1/student/goals", headers=student_headers)).json()
    assert goal["id"] in {g["id"] for g in goals}


@pytest.mark.asyncio
async def test_create_goal_validation(client: AsyncClient, student_headers) -> None:
    future = (date.today() + timedelta(days=30)).isoformat()
    response = await client.post(
        "/api/v1/student/goals",
        json={"type": "academic", "title": "   ", "target_date": future},
        headers=student_headers,
    )
    assert response.status_code == 400

    past = (date.today() - timedelta(days=1)).isoformat()
    response = await client.post(
        "/api/v1/student/goals",
        json={"type": "academic", "title": "Late goal", "target_date": past},
        headers=student_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_goal_progress_completes_and_reopens(client: AsyncClient, student_headers) -> None:
    url = "/api/v1/student/goals/GOAL003/progress"
    response = await client.patch(url, json={"progress": 1.0}, headers=student_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "completed"

    completed = (await client.get("/api/v1/student/goals", params={"status": "completed"}, headers=student_headers)).json()
    assert [g["id"] for g in completed] == ["GOAL003"]

    response = await client.patch(url, json={"progress": 0.9}, headers=student_headers)
    assert response.json()["status"] == "active"
    assert response.json()["progress"] == 0.9


@pytest.mark.asyncio
async def test_goal_progress_errors(client: AsyncClient, student_headers) -> None:
    response = await client.patch(
        "/api/v1/student/goals/GOAL999/progress", json={"progress": 0.5}, headers=student_headers
    )
    assert response.status_code == 404

    response = await client.patch(
        "/api/v1/student/goals/GOAL001/progress", json={"progress": 1.5}, headers=student_headers
    )
    assert response.status_code == 422


# ----- Skills -----
@pytest.mark.asyncio
async def test_skills_strongest_first(client: AsyncClient, student_headers) -> None:
    skills = (await client.get("/api/v1/student/skills", headers=student_headers)).json()
    assert skills[0]["skill_name"] == "Problem Solving"
    assert skills[0]["proficiency_level"] == "expert"

    technical = (
        await client.get("/api/v1/student/skills", params={"category": "technical"}, headers=student_headers)
    ).json()
    assert [s["id"] for s in technical] == ["SKL001", "SKL003"]


@pytest.mark.asyncio
async def test_add_skill(client: AsyncClient, student_headers) -> None:
    response = await client.post(
        "/api/v1/student/skills",
        json={"skill_name": "Public Speaking", "category": "soft", "certifications": ["Toastmasters", " "]},
        headers=student_headers,
    )
    assert response.status_code == 201
    skill = response.json()
    assert skill["proficiency_level"] == "beginner"
    assert skill["certifications"] == ["Toastmasters"]
    assert skill["endorsements"] == 0
    assert skill["is_verified"] is False

    duplicate = await client.post(
        "/api/v1/student/skills",
        json={"skill_name": "public speaking", "category": "soft"},
        headers=student_headers,
    )
    assert duplicate.status_code == 400


@pytest.mark.asyncio
async def test_update_skill_proficiency(client: AsyncClient, student_headers) -> None:
    response = await client.patch(
        "/api/v1/student/skills/SKL005/proficiency",
        json={"proficiency_level": "expert"},
        headers=student_headers,
    )
    assert response.status_code == 200
    assert response.json()["proficiency_level"] == "expert"

    response = await client.patch(
        "/api/v1/student/skills/SKL999/proficiency",
        json={"proficiency_level": "expert"},
        headers=student_headers,
    )
    assert response.status_code == 404
