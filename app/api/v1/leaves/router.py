from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import require_staff, require_student
from app.auth.schemas import CurrentUser
from app.core.enums import LeaveStatus
from app.core.exceptions import ServiceError
from app.db.session import get_db

from .schemas import LeaveApplication, LeaveApply, LeaveReview
from . import service

router = APIRouter(prefix="/api/v1/leaves", tags=["leaves"])


@router.post(
    "/apply",
    response_model=LeaveApplication,
    status_code=status.HTTP_201_CREATED,
)
async def apply_leave(
    payload: LeaveApply,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_student),
) -> LeaveApplication:
    """Apply for leave. Starts as pending until a faculty member or admin reviews it."""
    try:
        return await service.apply_leave(db, current_user, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/my", response_model=List[LeaveApplication])
async def list_my_leaves(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_student),
) -> List[LeaveApplication]:
    """Leave applications of the current student, newest first."""
    return await service.list_my_leaves(db, current_user.id)


@router.post("/{leave_id}/cancel", response_model=LeaveApplication)
async def cancel_leave(
    leave_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_student),
) -> LeaveApplication:
    try:
        return await service.cancel_leave(db, current_user.id, leave_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/pending", response_model=List[LeaveApplication])
async def list_pending_leaves(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_staff),
) -> List[LeaveApplication]:
    return await service.list_pending_leaves(db)


@router.get("", response_model=List[LeaveApplication])
async def list_all_leaves(
    status_filter: Optional[LeaveStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_staff),
) -> List[LeaveApplication]:
    return await service.list_all_leaves(db, status_filter=status_filter)


@router.post("/{leave_id}/approve", response_model=LeaveApplication)
async def approve_leave(
    leave_id: UUID,
    payload: LeaveReview,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_staff),
) -> LeaveApplication:
    try:
        return await service.approve_leave(db, leave_id, current_user.id, remarks=payload.remarks)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{leave_id}/reject", response_model=LeaveApplication)
async def reject_leave(
    leave_id: UUID,
    payload: LeaveReview,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_staff),
) -> LeaveApplication:
    try:
        return await service.reject_leave(db, leave_id, current_user.id, remarks=payload.remarks)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
