from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from app.core.enums import (
    AssignmentStatus,
    AttendanceStatus,
    GoalStatus,
    GoalType,
    NoticeCategory,
    Priority,
    ProficiencyLevel,
    SkillCategory,
    attendance_status,
)
from app.core.schemas import Address, GuardianInfo, StudentProfile, Subject


def _raw_percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part * 100 / whole


def _percentage(part: int, whole: int) -> float:
    return round(_raw_percentage(part, whole), 2)


# ----- Attendance -----
class SubjectAttendance(BaseModel):
    subject_name: str
    attended: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @computed_field
    @property
    def percentage(self) -> float:
        return _percentage(self.attended, self.total)

    @computed_field
    @property
    def status(self) -> AttendanceStatus:
        return attendance_status(_raw_percentage(self.attended, self.total))


class AttendanceOverview(BaseModel):
    """Overall figures are aggregated from the subject-wise counts."""

    subject_wise_attendance: List[SubjectAttendance] = Field(default_factory=list)

    @computed_field
    @property
    def total_classes(self) -> int:
        return sum(s.total for s in self.subject_wise_attendance)

    @computed_field
    @property
    def attended_classes(self) -> int:
        return sum(s.attended for s in self.subject_wise_attendance)

    @computed_field
    @property
    def overall_percentage(self) -> float:
        return _percentage(self.attended_classes, self.total_classes)

    @computed_field
    @property
    def status(self) -> AttendanceStatus:
        # Bucketed on the unrounded ratio
        return attendance_status(_raw_percentage(self.attended_classes, self.total_classes))


# ----- Assignments / notices -----
class Assignment(BaseModel):
    id: str
    title: str
    subject: str
    due_date: datetime
    status: AssignmentStatus
    priority: Priority


class Notice(BaseModel):
    id: str
    title: str
    content: str
    date: datetime
    priority: Priority
    category: NoticeCategory


class RegistrationStatus(BaseModel):
    is_registration_open: bool
    semester: int
    registration_deadline: datetime
    max_credits: int
    min_credits: int
    registered_credits: int
    available_subjects: List[Subject] = Field(default_factory=list)


# ----- Profile -----
class StudentProfileUpdate(BaseModel):
    """Contact details a student may edit. Omitted fields stay as they are."""

    phone_number: Optional[str] = Field(None, min_length=10, max_length=15)
    address: Optional[Address] = None
    guardian_info: Optional[GuardianInfo] = None


# ----- Goals -----
class AcademicGoal(BaseModel):
    id: str
    type: GoalType
    title: str
    description: str = ""
    target_date: date
    priority: Priority
    status: GoalStatus
    progress: float = Field(..., ge=0, le=1)
    created_date: datetime
    updated_date: datetime


class AcademicGoalCreate(BaseModel):
    type: GoalType
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=2000)
    target_date: date
    priority: Priority = Priority.MEDIUM


class GoalProgressUpdate(BaseModel):
    progress: float = Field(..., ge=0, le=1, description="Fraction complete, 0 to 1")


# ----- Skills -----
class Skill(BaseModel):
    id: str
    skill_name: str
    category: SkillCategory
    proficiency_level: ProficiencyLevel
    certifications: List[str] = Field(default_factory=list)
    last_updated: datetime
    endorsements: int = Field(0, ge=0)
    is_verified: bool = False


class SkillCreate(BaseModel):
    skill_name: str = Field(..., max_length=100)
    category: SkillCategory
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    certifications: List[str] = Field(default_factory=list)


class SkillProficiencyUpdate(BaseModel):
    proficiency_level: ProficiencyLevel


# ----- Dashboard -----
class StudentDashboardResponse(BaseModel):
    greeting: str
    student: StudentProfile
    attendance_overview: AttendanceOverview
    upcoming_assignments: List[Assignment]
    recent_notices: List[Notice]
    registration_status: Optional[RegistrationStatus] = None
    loaded_at: datetime
