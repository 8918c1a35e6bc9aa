from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.auth.rbac import require_faculty
from app.auth.schemas import CurrentUser
from app.core.enums import FacultyAssignmentStatus
from app.core.exceptions import ServiceError
from app.core.schemas import Activity

from .schemas import (
    AttendanceUpdate,
    ClassAttendance,
    FacultyAssignment,
    FacultyClass,
    FacultyDashboardResponse,
    MarkAllRequest,
)
from . import service

router = APIRouter(prefix="/api/v1/faculty", tags=["faculty"])


@router.get("/dashboard", response_model=FacultyDashboardResponse)
async def get_dashboard(
    current_user: CurrentUser = Depends(require_faculty),
) -> FacultyDashboardResponse:
    """Profile, quick stats, today's classes, assignments and recent activity."""
    try:
        return await service.load_dashboard(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/dashboard/refresh", response_model=FacultyDashboardResponse)
async def refresh_dashboard(
    current_user: CurrentUser = Depends(require_faculty),
) -> FacultyDashboardResponse:
    try:
        return await service.load_dashboard(current_user.id, refresh=True)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/classes", response_model=List[FacultyClass])
async def list_classes(
    current_user: CurrentUser = Depends(require_faculty),
) -> List[FacultyClass]:
    try:
        return await service.list_todays_classes(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/classes/{class_id}/attendance", response_model=ClassAttendance)
async def get_class_attendance(
    class_id: str,
    current_user: CurrentUser = Depends(require_faculty),
) -> ClassAttendance:
    try:
        return await service.get_class_attendance(current_user.id, class_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/classes/{class_id}/attendance/{student_id}", response_model=ClassAttendance)
async def update_attendance(
    class_id: str,
    student_id: str,
    payload: AttendanceUpdate,
    current_user: CurrentUser = Depends(require_faculty),
) -> ClassAttendance:
    try:
        return await service.update_attendance_status(
            current_user.id, class_id, student_id, payload.status, remarks=payload.remarks
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/classes/{class_id}/attendance/mark-all", response_model=ClassAttendance)
async def mark_all_attendance(
    class_id: str,
    payload: MarkAllRequest,
    current_user: CurrentUser = Depends(require_faculty),
) -> ClassAttendance:
    try:
        return await service.mark_all(current_user.id, class_id, payload.status)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/classes/{class_id}/attendance/submit", response_model=ClassAttendance)
async def submit_attendance(
    class_id: str,
    current_user: CurrentUser = Depends(require_faculty),
) -> ClassAttendance:
    """Submit the sheet. The class is marked completed."""
    try:
        return await service.submit_attendance(current_user.id, class_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/assignments", response_model=List[FacultyAssignment])
async def list_assignments(
    status: Optional[FacultyAssignmentStatus] = Query(None),
    current_user: CurrentUser = Depends(require_faculty),
) -> List[FacultyAssignment]:
    try:
        return await service.list_assignments(current_user.id, status_filter=status)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/activities", response_model=List[Activity])
async def list_activities(
    current_user: CurrentUser = Depends(require_faculty),
) -> List[Activity]:
    try:
        return await service.list_recent_activities(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
