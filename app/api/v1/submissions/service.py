"""Assignment submissions: submit, drafts, history and grading. Text only."""

import uuid
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import status

from app.api.v1.student import service as student_service
from app.core.enums import SubmissionStatus
from app.core.exceptions import NotFoundError, ServiceError
from app.core.logging_config import get_logger
from app.core.state import StateRegistry

from .schemas import AssignmentSubmission

logger = get_logger(__name__)


class StudentSubmissions:
    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        self.items: List[AssignmentSubmission] = []

    def for_assignment(self, assignment_id: str) -> List[AssignmentSubmission]:
        return [s for s in self.items if s.assignment_id == assignment_id]

    def draft_for(self, assignment_id: str) -> Optional[AssignmentSubmission]:
        return next(
            (s for s in self.for_assignment(assignment_id) if s.status == SubmissionStatus.DRAFT),
            None,
        )


_books: StateRegistry[StudentSubmissions] = StateRegistry(StudentSubmissions)


def _newest_first(items: List[AssignmentSubmission]) -> List[AssignmentSubmission]:
    return sorted(items, key=lambda s: (s.submitted_at, s.submission_number), reverse=True)


async def _assignment_or_404(student_id: str, assignment_id: str):
    assignment = await student_service.find_assignment(student_id, assignment_id)
    if assignment is None:
        raise NotFoundError("Assignment not found")
    return assignment


async def submit_assignment(student_id: str, assignment_id: str, submission_text: str) -> AssignmentSubmission:
    """Submit an assignment. Each submission gets the next attempt number; an open draft is discarded."""
    if not submission_text.strip():
        raise ServiceError("Submission text is required", status.HTTP_400_BAD_REQUEST)
    assignment = await _assignment_or_404(student_id, assignment_id)
    book = _books.get(student_id)
    now = datetime.now(timezone.utc)

    previous = [s for s in book.for_assignment(assignment_id) if s.status != SubmissionStatus.DRAFT]
    draft = book.draft_for(assignment_id)
    if draft is not None:
        book.items.remove(draft)

    submission = AssignmentSubmission(
        id=uuid.uuid4(),
        assignment_id=assignment_id,
        student_id=student_id,
        submission_text=submission_text,
        submitted_at=now,
        status=SubmissionStatus.SUBMITTED,
        submission_number=len(previous) + 1,
        is_late_submission=assignment.due_date < now,
    )
    book.items.append(submission)
    await student_service.mark_assignment_submitted(student_id, assignment_id)
    logger.info(
        "Submission #%d for %s by %s (late=%s)",
        submission.submission_number,
        assignment_id,
        student_id,
        submission.is_late_submission,
    )
    return submission


async def save_draft(student_id: str, assignment_id: str, submission_text: str) -> AssignmentSubmission:
    await _assignment_or_404(student_id, assignment_id)
    book = _books.get(student_id)
    existing = book.draft_for(assignment_id)
    if existing is not None:
        book.items.remove(existing)
    draft = AssignmentSubmission(
        id=uuid.uuid4(),
        assignment_id=assignment_id,
        student_id=student_id,
        submission_text=submission_text,
        submitted_at=datetime.now(timezone.utc),
        status=SubmissionStatus.DRAFT,
        submission_number=0,
    )
    book.items.append(draft)
    return draft


async def get_draft(student_id: str, assignment_id: str) -> Optional[AssignmentSubmission]:
    return _books.get(student_id).draft_for(assignment_id)


async def delete_draft(student_id: str, assignment_id: str) -> None:
    book = _books.get(student_id)
    draft = book.draft_for(assignment_id)
    if draft is None:
        raise NotFoundError("No draft saved for this assignment")
    book.items.remove(draft)
    logger.info("Draft for %s discarded by %s", assignment_id, student_id)


async def get_submission_history(student_id: str, assignment_id: str) -> List[AssignmentSubmission]:
    await _assignment_or_404(student_id, assignment_id)
    return _newest_first(_books.get(student_id).for_assignment(assignment_id))


async def list_student_submissions(student_id: str) -> List[AssignmentSubmission]:
    return _newest_first(_books.get(student_id).items)


async def list_submissions_for_assignment(assignment_id: str) -> List[AssignmentSubmission]:
    """Non-draft submissions from every student, for grading."""
    items = [
        s
        for book in _books.values()
        for s in book.for_assignment(assignment_id)
        if s.status != SubmissionStatus.DRAFT
    ]
    return _newest_first(items)


async def grade_submission(
    submission_id: UUID,
    grader_id: str,
    grade: float,
    feedback: Optional[str] = None,
) -> AssignmentSubmission:
    submission = next(
        (s for book in _books.values() for s in book.items if s.id == submission_id),
        None,
    )
    if submission is None:
        raise NotFoundError("Submission not found")
    if submission.status != SubmissionStatus.SUBMITTED:
        raise ServiceError("Only submitted work can be graded", status.HTTP_400_BAD_REQUEST)
    submission.status = SubmissionStatus.GRADED
    submission.grade = grade
    submission.feedback = feedback
    submission.graded_at = datetime.now(timezone.utc)
    submission.graded_by = grader_id
    logger.info("Submission %s graded %.1f by %s", submission_id, grade, grader_id)
    return submission
