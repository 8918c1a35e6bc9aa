from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.core.enums import SubmissionStatus


class AssignmentSubmission(BaseModel):
    id: UUID
    assignment_id: str
    student_id: str
    submission_text: str
    submitted_at: datetime
    status: SubmissionStatus
    grade: Optional[float] = None
    feedback: Optional[str] = None
    graded_at: Optional[datetime] = None
    graded_by: Optional[str] = None
    submission_number: int = Field(..., ge=0)
    is_late_submission: bool = False

    class Config:
        from_attributes = True


class SubmissionCreate(BaseModel):
    submission_text: str = Field(..., max_length=10000)


class SubmissionGrade(BaseModel):
    grade: float = Field(..., ge=0, le=100)
    feedback: Optional[str] = Field(None, max_length=2000)
