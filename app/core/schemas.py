"""Domain records shared by the student, faculty and admin surfaces."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from app.core.enums import AdminRole, ActivityPriority


class Address(BaseModel):
    street: str
    city: str
    state: str
    pincode: str
    country: str


class GuardianInfo(BaseModel):
    name: str
    relationship: str
    phone_number: str
    email: Optional[str] = None
    occupation: Optional[str] = None


class AcademicInfo(BaseModel):
    cgpa: Optional[float] = None
    total_credits: int
    completed_credits: int
    backlogs: int
    attendance: float


class StudentProfile(BaseModel):
    id: str
    enrollment_number: str
    first_name: str
    last_name: str
    email: str
    course: str
    branch: str
    semester: int
    year: int
    section: Optional[str] = None
    roll_number: str
    admission_date: date
    date_of_birth: date
    phone_number: str
    address: Address
    guardian_info: GuardianInfo
    academic_info: AcademicInfo

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Subject(BaseModel):
    id: str
    code: str
    name: str
    credits: int
    semester: int


class FacultyProfile(BaseModel):
    id: str
    employee_id: str
    first_name: str
    last_name: str
    email: str
    department: str
    designation: str
    joining_date: date
    qualification: List[str] = Field(default_factory=list)
    specialization: List[str] = Field(default_factory=list)
    phone_number: str
    office_location: Optional[str] = None

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class AdminProfile(BaseModel):
    id: str
    employee_id: str
    first_name: str
    last_name: str
    email: str
    department: str
    role: AdminRole
    joining_date: date

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Department(BaseModel):
    id: str
    name: str
    code: str
    faculty_count: int
    student_count: int
    is_active: bool = True


class Activity(BaseModel):
    """Entry in a dashboard's recent-activity feed."""

    id: str
    title: str
    description: str
    timestamp: datetime
    priority: ActivityPriority = ActivityPriority.MEDIUM
