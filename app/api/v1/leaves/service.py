"""Leave apply, my, cancel, pending, approve, reject on top of the local store."""

import uuid
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.schemas import CurrentUser
from app.core.enums import LeaveStatus
from app.core.exceptions import NotFoundError, ServiceError
from app.core.logging_config import get_logger

from .schemas import LeaveApplication, LeaveApply
from .store import LeaveStore

logger = get_logger(__name__)

# Applications that still hold the student's dates
_BLOCKING_STATUSES = (LeaveStatus.PENDING, LeaveStatus.APPROVED)


def _newest_first(applications: List[LeaveApplication]) -> List[LeaveApplication]:
    return sorted(applications, key=lambda a: a.applied_at, reverse=True)


async def _save(store: LeaveStore, applications: List[LeaveApplication]) -> None:
    if not await store.save(applications):
        raise ServiceError("Failed to save leave applications", status.HTTP_500_INTERNAL_SERVER_ERROR)


async def apply_leave(
    db: AsyncSession,
    current_user: CurrentUser,
    payload: LeaveApply,
) -> LeaveApplication:
    """Apply for leave; validate dates, reason and overlap."""
    if payload.to_date < payload.from_date:
        raise ServiceError("to_date must be on or after from_date", status.HTTP_400_BAD_REQUEST)
    reason = payload.reason.strip()
    if not reason:
        raise ServiceError("Reason is required", status.HTTP_400_BAD_REQUEST)

    store = LeaveStore(db)
    async with store.lock:
        applications = await store.load()

        # Overlapping leave check
        for existing in applications:
            if (
                existing.student_id == current_user.id
                and existing.status in _BLOCKING_STATUSES
                and existing.from_date <= payload.to_date
                and existing.to_date >= payload.from_date
            ):
                raise ServiceError("Overlapping leave application exists for this period", status.HTTP_400_BAD_REQUEST)

        application = LeaveApplication(
            id=uuid.uuid4(),
            student_id=current_user.id,
            student_name=current_user.name or current_user.id,
            leave_type=payload.leave_type,
            from_date=payload.from_date,
            to_date=payload.to_date,
            total_days=(payload.to_date - payload.from_date).days + 1,
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_at=datetime.now(timezone.utc),
        )
        applications.append(application)
        await _save(store, applications)
    logger.info("Leave %s applied by %s (%s to %s)", application.id, current_user.id, payload.from_date, payload.to_date)
    return application


async def list_my_leaves(db: AsyncSession, student_id: str) -> List[LeaveApplication]:
    applications = await LeaveStore(db).load()
    return _newest_first([a for a in applications if a.student_id == student_id])


async def list_pending_leaves(db: AsyncSession) -> List[LeaveApplication]:
    applications = await LeaveStore(db).load()
    return _newest_first([a for a in applications if a.status == LeaveStatus.PENDING])


async def list_all_leaves(db: AsyncSession, status_filter: Optional[LeaveStatus] = None) -> List[LeaveApplication]:
    applications = await LeaveStore(db).load()
    if status_filter is not None:
        applications = [a for a in applications if a.status == status_filter]
    return _newest_first(applications)


def _find(applications: List[LeaveApplication], leave_id: UUID) -> LeaveApplication:
    for application in applications:
        if application.id == leave_id:
            return application
    raise NotFoundError("Leave application not found")


async def cancel_leave(db: AsyncSession, student_id: str, leave_id: UUID) -> LeaveApplication:
    store = LeaveStore(db)
    async with store.lock:
        applications = await store.load()
        application = _find(applications, leave_id)
        if application.student_id != student_id:
            raise ServiceError("You can only cancel your own leave applications", status.HTTP_403_FORBIDDEN)
        if application.status != LeaveStatus.PENDING:
            raise ServiceError("Only PENDING leave can be cancelled", status.HTTP_400_BAD_REQUEST)
        application.status = LeaveStatus.CANCELLED
        await _save(store, applications)
    logger.info("Leave %s cancelled by %s", leave_id, student_id)
    return application


async def _review(
    db: AsyncSession,
    leave_id: UUID,
    reviewer_id: str,
    new_status: LeaveStatus,
    remarks: Optional[str],
) -> LeaveApplication:
    store = LeaveStore(db)
    async with store.lock:
        applications = await store.load()
        application = _find(applications, leave_id)
        if application.status != LeaveStatus.PENDING:
            action = "approved" if new_status == LeaveStatus.APPROVED else "rejected"
            raise ServiceError(f"Only PENDING leave can be {action}", status.HTTP_400_BAD_REQUEST)
        application.status = new_status
        application.reviewed_by = reviewer_id
        application.reviewed_at = datetime.now(timezone.utc)
        application.remarks = remarks.strip() if remarks and remarks.strip() else None
        await _save(store, applications)
    logger.info("Leave %s %s by %s", leave_id, new_status.value, reviewer_id)
    return application


async def approve_leave(
    db: AsyncSession,
    leave_id: UUID,
    reviewer_id: str,
    remarks: Optional[str] = None,
) -> LeaveApplication:
    return await _review(db, leave_id, reviewer_id, LeaveStatus.APPROVED, remarks)


async def reject_leave(
    db: AsyncSession,
    leave_id: UUID,
    reviewer_id: str,
    remarks: Optional[str] = None,
) -> LeaveApplication:
    return await _review(db, leave_id, reviewer_id, LeaveStatus.REJECTED, remarks)
