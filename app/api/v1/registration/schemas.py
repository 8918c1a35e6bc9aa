from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from app.core.enums import (
    CourseRegistrationStatus,
    CourseType,
    CreditStatus,
    RegistrationStep,
    RegistrationType,
    SemesterRegistrationStatus,
)


# ----- Catalog -----
class School(BaseModel):
    id: int
    school_name: str
    school_code: str
    school_type: str
    establishment_year: str


class Course(BaseModel):
    id: str
    school_id: int
    course_code: str
    course_name: str
    course_type: CourseType
    theory_credits: int = Field(0, ge=0)
    practical_credits: int = Field(0, ge=0)
    total_credits: int = Field(..., ge=0)
    prerequisites: List[str] = Field(default_factory=list, description="Course codes that must also be selected")
    is_elective: bool = False
    capacity: Optional[int] = None
    enrolled_count: Optional[int] = None
    faculty_id: Optional[str] = None

    @computed_field
    @property
    def is_full(self) -> bool:
        if self.capacity is None or self.enrolled_count is None:
            return False
        return self.enrolled_count >= self.capacity

    @computed_field
    @property
    def available_seats(self) -> int:
        if self.capacity is None or self.enrolled_count is None:
            return 0
        return max(0, self.capacity - self.enrolled_count)


# ----- Form -----
class RegistrationForm(BaseModel):
    current_step: RegistrationStep = RegistrationStep.SCHOOL_SELECTION
    selected_school: Optional[School] = None
    selected_courses: List[Course] = Field(default_factory=list)
    total_credits: float = 0.0
    academic_year: str = ""
    registration_type: RegistrationType = RegistrationType.REGULAR
    additional_notes: str = ""

    @computed_field
    @property
    def step_title(self) -> str:
        return self.current_step.title


class RegistrationFormUpdate(BaseModel):
    academic_year: Optional[str] = Field(None, max_length=20)
    registration_type: Optional[RegistrationType] = None
    additional_notes: Optional[str] = Field(None, max_length=2000)


class SchoolSelect(BaseModel):
    school_id: int


class StepChange(BaseModel):
    step: RegistrationStep


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str]
    total_credits: float
    min_credits: int
    max_credits: int
    credit_status: CreditStatus


# ----- Submitted registrations -----
class CourseRegistration(BaseModel):
    id: UUID
    course_id: str
    course_code: str
    course_name: str
    credits: int
    registration_type: str = "regular"
    status: CourseRegistrationStatus = CourseRegistrationStatus.SELECTED
    registration_date: datetime
    additional_info: Dict[str, str] = Field(default_factory=dict)


class SemesterRegistration(BaseModel):
    id: UUID
    student_id: str
    school_id: int
    academic_year: str
    registration_type: RegistrationType
    status: SemesterRegistrationStatus = SemesterRegistrationStatus.PENDING
    total_credits: float
    registration_date: datetime
    course_registrations: List[CourseRegistration] = Field(default_factory=list)


class RegistrationSubmitResponse(BaseModel):
    success: bool
    message: str
    registration: SemesterRegistration
    form: RegistrationForm
