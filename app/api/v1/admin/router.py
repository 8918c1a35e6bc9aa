from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.auth.rbac import require_admin
from app.auth.schemas import CurrentUser
from app.core.enums import ActivityPriority
from app.core.exceptions import ServiceError
from app.core.schemas import Activity, Department

from .schemas import AdminDashboardResponse
from . import service

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/dashboard", response_model=AdminDashboardResponse)
async def get_dashboard(
    current_user: CurrentUser = Depends(require_admin),
) -> AdminDashboardResponse:
    """System statistics, departments and recent activity."""
    try:
        return await service.load_dashboard(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/dashboard/refresh", response_model=AdminDashboardResponse)
async def refresh_dashboard(
    current_user: CurrentUser = Depends(require_admin),
) -> AdminDashboardResponse:
    try:
        return await service.load_dashboard(current_user.id, refresh=True)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/departments", response_model=List[Department])
async def list_departments(
    active_only: bool = Query(False),
    current_user: CurrentUser = Depends(require_admin),
) -> List[Department]:
    try:
        return await service.list_departments(current_user.id, active_only=active_only)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/activities", response_model=List[Activity])
async def list_activities(
    priority: Optional[ActivityPriority] = Query(None),
    current_user: CurrentUser = Depends(require_admin),
) -> List[Activity]:
    try:
        return await service.list_recent_activities(current_user.id, priority=priority)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
