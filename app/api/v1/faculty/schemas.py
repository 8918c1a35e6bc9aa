from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from app.core.enums import AttendanceRecordStatus, ClassStatus, FacultyAssignmentStatus
from app.core.schemas import Activity, FacultyProfile, StudentProfile, Subject


class FacultyClass(BaseModel):
    id: str
    subject: Subject
    start_time: datetime
    end_time: datetime
    room: str
    year: int
    section: str
    status: ClassStatus = ClassStatus.UPCOMING


class FacultyAssignment(BaseModel):
    id: str
    title: str
    subject: Subject
    description: str
    due_date: datetime
    total_marks: int
    status: FacultyAssignmentStatus
    submission_count: int = 0
    graded_count: int = 0
    created_date: datetime
    target_year: int
    target_section: str
    late_submission_allowed: bool = False
    late_submission_penalty: float = 0.0


class StudentAttendanceItem(BaseModel):
    id: str
    student: StudentProfile
    status: AttendanceRecordStatus
    cgpa: float
    current_attendance: float
    remarks: Optional[str] = None
    is_marked: bool = False


class ClassAttendance(BaseModel):
    """Attendance sheet for one of today's classes."""

    id: str
    class_id: str
    subject_id: str
    date: datetime
    students: List[StudentAttendanceItem] = Field(default_factory=list)
    present_count: int = 0
    absent_count: int = 0
    late_count: int = 0
    excused_count: int = 0
    is_submitted: bool = False

    @computed_field
    @property
    def total_students(self) -> int:
        return len(self.students)

    @computed_field
    @property
    def attendance_percentage(self) -> float:
        # Late students count as attended
        if not self.students:
            return 0.0
        return round((self.present_count + self.late_count) / len(self.students) * 100, 2)

    def recount(self) -> None:
        statuses = [item.status for item in self.students]
        self.present_count = statuses.count(AttendanceRecordStatus.PRESENT)
        self.absent_count = statuses.count(AttendanceRecordStatus.ABSENT)
        self.late_count = statuses.count(AttendanceRecordStatus.LATE)
        self.excused_count = statuses.count(AttendanceRecordStatus.EXCUSED)


class AttendanceUpdate(BaseModel):
    status: AttendanceRecordStatus
    remarks: Optional[str] = Field(None, max_length=500)


class MarkAllRequest(BaseModel):
    status: AttendanceRecordStatus = AttendanceRecordStatus.PRESENT


class TodaysAttendanceStats(BaseModel):
    total: int
    marked: int
    percentage: float


class FacultyQuickStats(BaseModel):
    total_students: int
    pending_assignments: int
    todays_attendance: TodaysAttendanceStats


class FacultyDashboardResponse(BaseModel):
    faculty: FacultyProfile
    stats: FacultyQuickStats
    todays_classes: List[FacultyClass]
    subjects: List[Subject]
    assignments: List[FacultyAssignment]
    recent_activities: List[Activity]
    loaded_at: datetime
