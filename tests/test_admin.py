import asyncio
import random

import pytest
from httpx import AsyncClient

from app.api.v1.admin import service as admin_service
from app.api.v1.admin.mock_data import create_departments, create_system_statistics
from app.api.v1.admin.service import AdminDashboardState
from app.core.config import settings


def test_system_statistics_stay_in_range() -> None:
    rng = random.Random(42)
    for _ in range(50):
        stats = create_system_statistics(rng)
        assert 2500 <= stats.total_students <= 3500
        assert 180 <= stats.total_faculty <= 250
        assert 45 <= stats.active_courses <= 65
        assert 78.0 <= stats.average_attendance <= 88.0
        assert 7.2 <= stats.average_cgpa <= 8.4
        assert 82.0 <= stats.faculty_satisfaction <= 92.0


def test_departments() -> None:
    departments = create_departments()
    assert [d.code for d in departments] == ["CSE", "IT", "ECE", "ME", "CE", "EE", "BT", "AS"]
    assert sum(d.student_count for d in departments) == 4400


@pytest.mark.asyncio
async def test_dashboard(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/admin/dashboard", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["admin"]["role"] == "super_admin"
    assert len(data["departments"]) == 8
    timestamps = [a["timestamp"] for a in data["recent_activities"]]
    assert len(timestamps) == 8
    assert data["recent_activities"][0]["id"] == "ACT001"


@pytest.mark.asyncio
async def test_dashboard_statistics_kept_until_refresh(client: AsyncClient, admin_headers) -> None:
    first = (await client.get("/api/v1/admin/dashboard", headers=admin_headers)).json()
    second = (await client.get("/api/v1/admin/dashboard", headers=admin_headers)).json()
    assert first["statistics"] == second["statistics"]

    response = await client.post("/api/v1/admin/dashboard/refresh", headers=admin_headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_activities_filtered_by_priority(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/admin/activities", params={"priority": "high"}, headers=admin_headers)
    assert [a["id"] for a in response.json()] == ["ACT002", "ACT005"]


@pytest.mark.asyncio
async def test_active_departments(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/admin/departments", params={"active_only": True}, headers=admin_headers)
    assert response.status_code == 200
    assert len(response.json()) == 8


@pytest.mark.asyncio
async def test_faculty_cannot_open_admin_dashboard(client: AsyncClient, faculty_headers) -> None:
    response = await client.get("/api/v1/admin/dashboard", headers=faculty_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_concurrent_first_loads_generate_once(monkeypatch) -> None:
    monkeypatch.setattr(settings, "mock_latency_seconds", 0.02)
    generated = []
    original = AdminDashboardState.populate

    def counting_populate(self) -> None:
        generated.append(self.user_id)
        original(self)

    monkeypatch.setattr(AdminDashboardState, "populate", counting_populate)

    first, second = await asyncio.gather(
        admin_service.load_dashboard("ADM0001"),
        admin_service.load_dashboard("ADM0001"),
    )
    assert generated == ["ADM0001"]
    assert first.statistics == second.statistics

    await admin_service.load_dashboard("ADM0001", refresh=True)
    assert generated == ["ADM0001", "ADM0001"]
