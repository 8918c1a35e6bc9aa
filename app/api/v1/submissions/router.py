from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth.rbac import require_faculty, require_student
from app.auth.schemas import CurrentUser
from app.core.exceptions import ServiceError

from .schemas import AssignmentSubmission, SubmissionCreate, SubmissionGrade
from . import service

router = APIRouter(prefix="/api/v1/submissions", tags=["submissions"])


@router.post(
    "/assignments/{assignment_id}",
    response_model=AssignmentSubmission,
    status_code=status.HTTP_201_CREATED,
)
async def submit_assignment(
    assignment_id: str,
    payload: SubmissionCreate,
    current_user: CurrentUser = Depends(require_student),
) -> AssignmentSubmission:
    try:
        return await service.submit_assignment(current_user.id, assignment_id, payload.submission_text)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/assignments/{assignment_id}/draft", response_model=AssignmentSubmission)
async def save_draft(
    assignment_id: str,
    payload: SubmissionCreate,
    current_user: CurrentUser = Depends(require_student),
) -> AssignmentSubmission:
    """Save work in progress. Replaces any earlier draft."""
    try:
        return await service.save_draft(current_user.id, assignment_id, payload.submission_text)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/assignments/{assignment_id}/draft", response_model=Optional[AssignmentSubmission])
async def get_draft(
    assignment_id: str,
    current_user: CurrentUser = Depends(require_student),
) -> Optional[AssignmentSubmission]:
    return await service.get_draft(current_user.id, assignment_id)


@router.delete("/assignments/{assignment_id}/draft", status_code=status.HTTP_204_NO_CONTENT)
async def delete_draft(
    assignment_id: str,
    current_user: CurrentUser = Depends(require_student),
) -> None:
    try:
        await service.delete_draft(current_user.id, assignment_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/assignments/{assignment_id}/history", response_model=List[AssignmentSubmission])
async def get_history(
    assignment_id: str,
    current_user: CurrentUser = Depends(require_student),
) -> List[AssignmentSubmission]:
    try:
        return await service.get_submission_history(current_user.id, assignment_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/my", response_model=List[AssignmentSubmission])
async def list_my_submissions(
    current_user: CurrentUser = Depends(require_student),
) -> List[AssignmentSubmission]:
    return await service.list_student_submissions(current_user.id)


@router.get("/assignments/{assignment_id}", response_model=List[AssignmentSubmission])
async def list_for_assignment(
    assignment_id: str,
    current_user: CurrentUser = Depends(require_faculty),
) -> List[AssignmentSubmission]:
    return await service.list_submissions_for_assignment(assignment_id)


@router.post("/{submission_id}/grade", response_model=AssignmentSubmission)
async def grade_submission(
    submission_id: UUID,
    payload: SubmissionGrade,
    current_user: CurrentUser = Depends(require_faculty),
) -> AssignmentSubmission:
    try:
        return await service.grade_submission(
            submission_id, current_user.id, payload.grade, feedback=payload.feedback
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
