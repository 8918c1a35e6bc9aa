import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import status

from app.auth.directory import get_admin_profile
from app.core.config import settings
from app.core.enums import ActivityPriority
from app.core.exceptions import ServiceError
from app.core.logging_config import get_logger
from app.core.schemas import Activity, AdminProfile, Department
from app.core.state import StateRegistry

from .mock_data import create_departments, create_recent_activities, create_system_statistics
from .schemas import AdminDashboardResponse, SystemStatistics

logger = get_logger(__name__)


class AdminDashboardState:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.lock = asyncio.Lock()
        self.admin: Optional[AdminProfile] = None
        self.statistics: Optional[SystemStatistics] = None
        self.departments: List[Department] = []
        self.recent_activities: List[Activity] = []
        self.loaded_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def populate(self) -> None:
        now = datetime.now(timezone.utc)
        self.admin = get_admin_profile(self.user_id)
        self.statistics = create_system_statistics()
        self.departments = create_departments()
        self.recent_activities = create_recent_activities(now)
        self.loaded_at = now
        logger.debug("Generated admin dashboard data for %s", self.user_id)


_states: StateRegistry[AdminDashboardState] = StateRegistry(AdminDashboardState)


async def _ensure_loaded(user_id: str, refresh: bool = False) -> AdminDashboardState:
    state = _states.get(user_id)
    if refresh or not state.is_loaded:
        async with state.lock:
            if refresh or not state.is_loaded:
                await asyncio.sleep(settings.mock_latency_seconds)
                state.populate()
    if state.admin is None:
        raise ServiceError("Admin profile not found", status.HTTP_404_NOT_FOUND)
    return state


async def load_dashboard(user_id: str, refresh: bool = False) -> AdminDashboardResponse:
    state = await _ensure_loaded(user_id, refresh=refresh)
    return AdminDashboardResponse(
        admin=state.admin,
        statistics=state.statistics,
        departments=state.departments,
        recent_activities=sorted(state.recent_activities, key=lambda a: a.timestamp, reverse=True),
        loaded_at=state.loaded_at,
    )


async def list_departments(user_id: str, active_only: bool = False) -> List[Department]:
    state = await _ensure_loaded(user_id)
    if active_only:
        return [d for d in state.departments if d.is_active]
    return list(state.departments)


async def list_recent_activities(user_id: str, priority: Optional[ActivityPriority] = None) -> List[Activity]:
    state = await _ensure_loaded(user_id)
    activities = state.recent_activities
    if priority is not None:
        activities = [a for a in activities if a.priority == priority]
    return sorted(activities, key=lambda a: a.timestamp, reverse=True)
