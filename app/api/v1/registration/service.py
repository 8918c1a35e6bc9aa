"""Semester registration flow: school -> courses -> form -> review -> confirmation."""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import status

from app.core.config import settings
from app.core.enums import CourseType, RegistrationStep, SemesterRegistrationStatus
from app.core.exceptions import NotFoundError, ServiceError
from app.core.logging_config import get_logger
from app.core.state import StateRegistry

from . import catalog
from .schemas import (
    Course,
    CourseRegistration,
    RegistrationForm,
    RegistrationFormUpdate,
    RegistrationSubmitResponse,
    School,
    SemesterRegistration,
    ValidationResult,
)
from .validation import build_validation_result, total_credits, validate_form

logger = get_logger(__name__)

LAST_STEP = max(RegistrationStep)


class RegistrationState:
    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        self.form = RegistrationForm()
        self.available_courses: List[Course] = []
        self.history: List[SemesterRegistration] = []


_states: StateRegistry[RegistrationState] = StateRegistry(RegistrationState)


# ----- Catalog -----
async def list_schools() -> List[School]:
    await asyncio.sleep(settings.mock_latency_seconds)
    return catalog.list_schools()


async def list_courses(school_id: int, course_type: Optional[CourseType] = None) -> List[Course]:
    if catalog.get_school(school_id) is None:
        raise NotFoundError("School not found")
    await asyncio.sleep(settings.mock_latency_seconds)
    courses = catalog.list_courses(school_id)
    if course_type is not None:
        courses = catalog.courses_by_type(courses, course_type)
    return courses


# ----- Form -----
def get_form(student_id: str) -> RegistrationForm:
    return _states.get(student_id).form


async def select_school(student_id: str, school_id: int) -> RegistrationForm:
    school = catalog.get_school(school_id)
    if school is None:
        raise NotFoundError("School not found")
    state = _states.get(student_id)
    state.available_courses = await list_courses(school_id)
    state.form.selected_school = school
    # Courses belong to a school; a new school starts a new selection
    state.form.selected_courses = []
    state.form.total_credits = 0.0
    state.form.current_step = RegistrationStep.COURSE_SELECTION
    return state.form


def toggle_course(student_id: str, course_id: str) -> RegistrationForm:
    state = _states.get(student_id)
    if state.form.selected_school is None:
        raise ServiceError("Please select a school first", status.HTTP_400_BAD_REQUEST)

    selected = state.form.selected_courses
    for index, course in enumerate(selected):
        if course.id == course_id:
            selected.pop(index)
            break
    else:
        course = next((c for c in state.available_courses if c.id == course_id), None)
        if course is None:
            raise NotFoundError("Course not found for the selected school")
        selected.append(course)

    state.form.total_credits = total_credits(selected)
    return state.form


def update_form(student_id: str, payload: RegistrationFormUpdate) -> RegistrationForm:
    form = _states.get(student_id).form
    if payload.academic_year is not None:
        form.academic_year = payload.academic_year.strip()
    if payload.registration_type is not None:
        form.registration_type = payload.registration_type
    if payload.additional_notes is not None:
        form.additional_notes = payload.additional_notes.strip()
    return form


# ----- Navigation -----
def next_step(student_id: str) -> RegistrationForm:
    form = _states.get(student_id).form
    if form.current_step < LAST_STEP:
        form.current_step = RegistrationStep(form.current_step + 1)
    return form


def previous_step(student_id: str) -> RegistrationForm:
    form = _states.get(student_id).form
    if form.current_step > RegistrationStep.SCHOOL_SELECTION:
        form.current_step = RegistrationStep(form.current_step - 1)
    return form


def go_to_step(student_id: str, step: RegistrationStep) -> RegistrationForm:
    form = _states.get(student_id).form
    form.current_step = step
    return form


# ----- Validation / submission -----
def validate(student_id: str) -> ValidationResult:
    form = _states.get(student_id).form
    return build_validation_result(form, settings.min_credits, settings.max_credits)


async def submit(student_id: str) -> RegistrationSubmitResponse:
    state = _states.get(student_id)
    # Register exactly what was validated; the live form may change during the delay
    form = state.form.model_copy(deep=True)
    if validate_form(form, settings.min_credits, settings.max_credits):
        raise ServiceError("Please fix validation errors before submitting", status.HTTP_400_BAD_REQUEST)

    await asyncio.sleep(settings.mock_latency_seconds)
    now = datetime.now(timezone.utc)
    course_registrations = [
        CourseRegistration(
            id=uuid.uuid4(),
            course_id=course.id,
            course_code=course.course_code,
            course_name=course.course_name,
            credits=course.total_credits,
            registration_date=now,
            additional_info={"notes": form.additional_notes},
        )
        for course in form.selected_courses
    ]
    registration = SemesterRegistration(
        id=uuid.uuid4(),
        student_id=student_id,
        school_id=form.selected_school.id,
        academic_year=form.academic_year,
        registration_type=form.registration_type,
        status=SemesterRegistrationStatus.PENDING,
        total_credits=form.total_credits,
        registration_date=now,
        course_registrations=course_registrations,
    )
    state.history.append(registration)
    form.current_step = RegistrationStep.CONFIRMATION
    state.form = form
    logger.info(
        "Student %s registered %d courses (%.1f credits) for %s",
        student_id, len(course_registrations), form.total_credits, form.academic_year,
    )
    return RegistrationSubmitResponse(
        success=True,
        message=f"Registration completed successfully! {len(course_registrations)} courses registered.",
        registration=registration,
        form=form,
    )


def reset_form(student_id: str) -> RegistrationForm:
    state = _states.get(student_id)
    state.form = RegistrationForm()
    state.available_courses = []
    return state.form


def list_registrations(student_id: str) -> List[SemesterRegistration]:
    state = _states.get(student_id)
    return sorted(state.history, key=lambda r: r.registration_date, reverse=True)
