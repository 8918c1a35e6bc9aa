from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.core.enums import LeaveStatus, LeaveType


# ----- Stored record -----
class LeaveApplication(BaseModel):
    """A student's request for approved absence. Persisted in the local key-value store."""

    id: UUID
    student_id: str
    student_name: str
    leave_type: LeaveType
    from_date: date
    to_date: date
    total_days: int = Field(..., ge=1)
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING
    applied_at: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    remarks: Optional[str] = None

    class Config:
        from_attributes = True


# ----- Apply Leave -----
class LeaveApply(BaseModel):
    """Apply for leave. Student id and name are set by backend from current user."""

    leave_type: LeaveType
    from_date: date = Field(...)
    to_date: date = Field(...)
    reason: str = Field(..., max_length=2000)


# ----- Approve / Reject -----
class LeaveReview(BaseModel):
    remarks: Optional[str] = Field(None, max_length=2000)
