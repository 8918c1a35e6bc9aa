from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.auth.dependencies import get_current_user
from app.auth.rbac import require_student
from app.auth.schemas import CurrentUser
from app.core.enums import CourseType
from app.core.exceptions import ServiceError

from .schemas import (
    Course,
    RegistrationForm,
    RegistrationFormUpdate,
    RegistrationSubmitResponse,
    School,
    SchoolSelect,
    SemesterRegistration,
    StepChange,
    ValidationResult,
)
from . import service

router = APIRouter(prefix="/api/v1/registration", tags=["registration"])


@router.get("/schools", response_model=List[School])
async def list_schools(
    current_user: CurrentUser = Depends(get_current_user),
) -> List[School]:
    return await service.list_schools()


@router.get("/schools/{school_id}/courses", response_model=List[Course])
async def list_courses(
    school_id: int,
    course_type: Optional[CourseType] = Query(None, description="Filter by course type"),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[Course]:
    try:
        return await service.list_courses(school_id, course_type=course_type)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/form", response_model=RegistrationForm)
async def get_form(
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    return service.get_form(current_user.id)


@router.patch("/form", response_model=RegistrationForm)
async def update_form(
    payload: RegistrationFormUpdate,
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    """Update academic year, registration type or notes."""
    return service.update_form(current_user.id, payload)


@router.post("/form/school", response_model=RegistrationForm)
async def select_school(
    payload: SchoolSelect,
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    """Select a school, load its courses and move on to course selection."""
    try:
        return await service.select_school(current_user.id, payload.school_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/form/courses/{course_id}/toggle", response_model=RegistrationForm)
async def toggle_course(
    course_id: str,
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    """Add the course if not selected, remove it otherwise. Total credits are recomputed."""
    try:
        return service.toggle_course(current_user.id, course_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/form/next", response_model=RegistrationForm)
async def next_step(
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    return service.next_step(current_user.id)


@router.post("/form/previous", response_model=RegistrationForm)
async def previous_step(
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    return service.previous_step(current_user.id)


@router.post("/form/step", response_model=RegistrationForm)
async def go_to_step(
    payload: StepChange,
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    return service.go_to_step(current_user.id, payload.step)


@router.get("/form/validation", response_model=ValidationResult)
async def validate_form(
    current_user: CurrentUser = Depends(require_student),
) -> ValidationResult:
    return service.validate(current_user.id)


@router.post(
    "/form/submit",
    response_model=RegistrationSubmitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_registration(
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationSubmitResponse:
    try:
        return await service.submit(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/form/reset", response_model=RegistrationForm)
async def reset_form(
    current_user: CurrentUser = Depends(require_student),
) -> RegistrationForm:
    return service.reset_form(current_user.id)


@router.get("/history", response_model=List[SemesterRegistration])
async def list_registrations(
    current_user: CurrentUser = Depends(require_student),
) -> List[SemesterRegistration]:
    return service.list_registrations(current_user.id)
