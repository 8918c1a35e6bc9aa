import pytest
from httpx import AsyncClient


async def _select(client: AsyncClient, headers, *course_ids) -> dict:
    response = await client.post("/api/v1/registration/form/school", json={"school_id": 1}, headers=headers)
    assert response.status_code == 200
    data = response.json()
    for course_id in course_ids:
        response = await client.post(f"/api/v1/registration/form/courses/{course_id}/toggle", headers=headers)
        assert response.status_code == 200
        data = response.json()
    return data


@pytest.mark.asyncio
async def test_list_schools(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/registration/schools", headers=student_headers)
    assert response.status_code == 200
    assert [s["school_code"] for s in response.json()] == ["SOICT", "SOE", "SOM"]


@pytest.mark.asyncio
async def test_list_courses_filters_by_type(client: AsyncClient, faculty_headers) -> None:
    response = await client.get(
        "/api/v1/registration/schools/1/courses",
        params={"course_type": "elective"},
        headers=faculty_headers,
    )
    assert response.status_code == 200
    courses = response.json()
    assert courses
    assert all(c["course_type"] == "elective" for c in courses)


@pytest.mark.asyncio
async def test_unknown_school(client: AsyncClient, student_headers) -> None:
    response = await client.get("/api/v1/registration/schools/99/courses", headers=student_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_toggle_requires_school(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/registration/form/courses/C101/toggle", headers=student_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select a school first"


@pytest.mark.asyncio
async def test_toggle_adds_and_removes(client: AsyncClient, student_headers) -> None:
    form = await _select(client, student_headers, "C101", "C103")
    assert form["current_step"] == 1
    assert form["total_credits"] == 7

    response = await client.post("/api/v1/registration/form/courses/C101/toggle", headers=student_headers)
    form = response.json()
    assert [c["id"] for c in form["selected_courses"]] == ["C103"]
    assert form["total_credits"] == 3


@pytest.mark.asyncio
async def test_toggle_course_from_other_school(client: AsyncClient, student_headers) -> None:
    await _select(client, student_headers)
    response = await client.post("/api/v1/registration/form/courses/E201/toggle", headers=student_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_step_navigation_is_clamped(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/registration/form/previous", headers=student_headers)
    assert response.json()["current_step"] == 0

    response = await client.post("/api/v1/registration/form/step", json={"step": 4}, headers=student_headers)
    assert response.json()["current_step"] == 4
    response = await client.post("/api/v1/registration/form/next", headers=student_headers)
    data = response.json()
    assert data["current_step"] == 4
    assert data["step_title"] == "Confirmation"


@pytest.mark.asyncio
async def test_submit_with_errors_is_rejected(client: AsyncClient, student_headers) -> None:
    await _select(client, student_headers, "C101")
    response = await client.get("/api/v1/registration/form/validation", headers=student_headers)
    result = response.json()
    assert result["is_valid"] is False
    assert "Minimum 12 credits required" in result["errors"]

    response = await client.post("/api/v1/registration/form/submit", headers=student_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_submit_registration(client: AsyncClient, student_headers) -> None:
    await _select(client, student_headers, "C101", "C102", "C103", "C105")
    response = await client.patch(
        "/api/v1/registration/form",
        json={"academic_year": "2025-26", "additional_notes": "Hostel resident"},
        headers=student_headers,
    )
    assert response.status_code == 200

    response = await client.post("/api/v1/registration/form/submit", headers=student_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Registration completed successfully! 4 courses registered."
    assert data["form"]["current_step"] == 4
    registration = data["registration"]
    assert registration["total_credits"] == 15
    assert registration["course_registrations"][0]["additional_info"] == {"notes": "Hostel resident"}

    response = await client.get("/api/v1/registration/history", headers=student_headers)
    assert [r["id"] for r in response.json()] == [registration["id"]]


@pytest.mark.asyncio
async def test_reset_form(client: AsyncClient, student_headers) -> None:
    await _select(client, student_headers, "C101")
    response = await client.post("/api/v1/registration/form/reset", headers=student_headers)
    form = response.json()
    assert form["selected_school"] is None
    assert form["selected_courses"] == []
    assert form["current_step"] == 0


@pytest.mark.asyncio
async def test_form_is_student_only(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/registration/form", headers=admin_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_selection_change_during_submit_does_not_leak(monkeypatch) -> None:
    import asyncio

    from app.api.v1.registration import service
    from app.api.v1.registration.schemas import RegistrationFormUpdate
    from app.core.config import settings

    monkeypatch.setattr(settings, "mock_latency_seconds", 0.05)
    student_id = "STU245UAI130"
    await service.select_school(student_id, 1)
    for course_id in ("C101", "C102", "C103", "C105"):
        service.toggle_course(student_id, course_id)
    service.update_form(student_id, RegistrationFormUpdate(academic_year="2025-26"))

    async def drop_courses() -> None:
        await asyncio.sleep(0.01)
        for course_id in ("C102", "C103", "C105"):
            service.toggle_course(student_id, course_id)

    result, _ = await asyncio.gather(service.submit(student_id), drop_courses())

    assert result.message == "Registration completed successfully! 4 courses registered."
    assert result.registration.total_credits == 15
    assert [c.course_id for c in result.registration.course_registrations] == ["C101", "C102", "C103", "C105"]
    assert service.list_registrations(student_id)[0].total_credits == 15
