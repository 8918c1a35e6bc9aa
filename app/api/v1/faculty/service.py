"""Faculty dashboard: today's classes, attendance sheets, assignments and activity feed."""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import status

from app.auth.directory import get_faculty_profile
from app.core.config import settings
from app.core.enums import ActivityPriority, AttendanceRecordStatus, ClassStatus, FacultyAssignmentStatus
from app.core.exceptions import NotFoundError, ServiceError
from app.core.logging_config import get_logger
from app.core.schemas import Activity, FacultyProfile, StudentProfile, Subject
from app.core.state import StateRegistry

from .mock_data import (
    create_assignments,
    create_class_attendances,
    create_recent_activities,
    create_students,
    create_subjects,
    create_todays_classes,
)
from .schemas import (
    ClassAttendance,
    FacultyAssignment,
    FacultyClass,
    FacultyDashboardResponse,
    FacultyQuickStats,
    TodaysAttendanceStats,
)

logger = get_logger(__name__)

MAX_RECENT_ACTIVITIES = 10


class FacultyDashboardState:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.lock = asyncio.Lock()
        self.faculty: Optional[FacultyProfile] = None
        self.subjects: List[Subject] = []
        self.todays_classes: List[FacultyClass] = []
        self.students: List[StudentProfile] = []
        self.assignments: List[FacultyAssignment] = []
        self.recent_activities: List[Activity] = []
        self.class_attendances: List[ClassAttendance] = []
        self.loaded_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def populate(self) -> None:
        now = datetime.now(timezone.utc)
        self.faculty = get_faculty_profile(self.user_id)
        self.subjects = create_subjects()
        self.todays_classes = create_todays_classes(self.subjects, now.date())
        self.students = create_students()
        self.assignments = create_assignments(self.subjects, now)
        self.recent_activities = create_recent_activities(now)
        self.class_attendances = create_class_attendances(self.todays_classes, self.students, now)
        self.loaded_at = now
        logger.debug("Generated faculty dashboard data for %s", self.user_id)

    # Quick stats
    @property
    def total_students(self) -> int:
        return len({s.id for s in self.students})

    @property
    def pending_assignments(self) -> int:
        return sum(1 for a in self.assignments if a.status == FacultyAssignmentStatus.NEEDS_GRADING)

    def todays_attendance_stats(self) -> TodaysAttendanceStats:
        total = len(self.todays_classes)
        class_ids = {c.id for c in self.todays_classes}
        marked = sum(1 for a in self.class_attendances if a.is_submitted and a.class_id in class_ids)
        percentage = round(marked / total * 100, 2) if total > 0 else 0.0
        return TodaysAttendanceStats(total=total, marked=marked, percentage=percentage)

    def push_activity(self, activity: Activity) -> None:
        self.recent_activities.insert(0, activity)
        del self.recent_activities[MAX_RECENT_ACTIVITIES:]

    def find_class(self, class_id: str) -> Optional[FacultyClass]:
        return next((c for c in self.todays_classes if c.id == class_id), None)

    def find_attendance(self, class_id: str) -> Optional[ClassAttendance]:
        return next((a for a in self.class_attendances if a.class_id == class_id), None)


_states: StateRegistry[FacultyDashboardState] = StateRegistry(FacultyDashboardState)


async def _ensure_loaded(user_id: str, refresh: bool = False) -> FacultyDashboardState:
    state = _states.get(user_id)
    if refresh or not state.is_loaded:
        async with state.lock:
            if refresh or not state.is_loaded:
                await asyncio.sleep(settings.mock_latency_seconds)
                state.populate()
    if state.faculty is None:
        raise ServiceError("Faculty profile not found", status.HTTP_404_NOT_FOUND)
    return state


def _attendance_or_404(state: FacultyDashboardState, class_id: str) -> ClassAttendance:
    attendance = state.find_attendance(class_id)
    if attendance is None:
        raise NotFoundError("Attendance data not found for class")
    return attendance


async def load_dashboard(user_id: str, refresh: bool = False) -> FacultyDashboardResponse:
    state = await _ensure_loaded(user_id, refresh=refresh)
    return FacultyDashboardResponse(
        faculty=state.faculty,
        stats=FacultyQuickStats(
            total_students=state.total_students,
            pending_assignments=state.pending_assignments,
            todays_attendance=state.todays_attendance_stats(),
        ),
        todays_classes=sorted(state.todays_classes, key=lambda c: c.start_time),
        subjects=state.subjects,
        assignments=state.assignments,
        recent_activities=state.recent_activities,
        loaded_at=state.loaded_at,
    )


async def list_todays_classes(user_id: str) -> List[FacultyClass]:
    state = await _ensure_loaded(user_id)
    return sorted(state.todays_classes, key=lambda c: c.start_time)


async def get_class_attendance(user_id: str, class_id: str) -> ClassAttendance:
    state = await _ensure_loaded(user_id)
    return _attendance_or_404(state, class_id)


async def update_attendance_status(
    user_id: str,
    class_id: str,
    student_id: str,
    new_status: AttendanceRecordStatus,
    remarks: Optional[str] = None,
) -> ClassAttendance:
    """Mark one student on a class sheet and record it in the activity feed."""
    state = await _ensure_loaded(user_id)
    attendance = _attendance_or_404(state, class_id)
    item = next((i for i in attendance.students if i.student.id == student_id), None)
    if item is None:
        raise NotFoundError("Student not found in this class")

    item.status = new_status
    item.remarks = remarks
    item.is_marked = True
    attendance.recount()

    state.push_activity(
        Activity(
            id=str(uuid.uuid4()),
            title="Attendance Marked",
            description=f"{item.student.full_name} marked as {new_status.display_name}",
            timestamp=datetime.now(timezone.utc),
            priority=ActivityPriority.LOW,
        )
    )
    return attendance


async def mark_all(user_id: str, class_id: str, new_status: AttendanceRecordStatus) -> ClassAttendance:
    state = await _ensure_loaded(user_id)
    attendance = _attendance_or_404(state, class_id)
    for item in attendance.students:
        item.status = new_status
        item.is_marked = True
    attendance.recount()
    return attendance


async def submit_attendance(user_id: str, class_id: str) -> ClassAttendance:
    """Finalise a class sheet: every student marked, class completed, summary activity logged."""
    state = await _ensure_loaded(user_id)
    attendance = _attendance_or_404(state, class_id)

    for item in attendance.students:
        item.is_marked = True
    attendance.recount()
    attendance.is_submitted = True

    class_item = state.find_class(class_id)
    if class_item is not None:
        class_item.status = ClassStatus.COMPLETED

    total = attendance.total_students
    present_percentage = int(attendance.present_count / total * 100) if total > 0 else 0
    subject_name = class_item.subject.name if class_item is not None else attendance.subject_id
    if present_percentage >= 80:
        priority = ActivityPriority.LOW
    elif present_percentage >= 60:
        priority = ActivityPriority.MEDIUM
    else:
        priority = ActivityPriority.HIGH
    state.push_activity(
        Activity(
            id=str(uuid.uuid4()),
            title="Attendance Submitted",
            description=(
                f"{subject_name} - {attendance.present_count} present, "
                f"{attendance.absent_count} absent ({present_percentage}%)"
            ),
            timestamp=datetime.now(timezone.utc),
            priority=priority,
        )
    )
    logger.info(
        "Attendance submitted for %s by %s: %d present, %d absent, %d late, %d excused",
        class_id,
        user_id,
        attendance.present_count,
        attendance.absent_count,
        attendance.late_count,
        attendance.excused_count,
    )
    return attendance


async def list_assignments(
    user_id: str,
    status_filter: Optional[FacultyAssignmentStatus] = None,
) -> List[FacultyAssignment]:
    state = await _ensure_loaded(user_id)
    assignments = state.assignments
    if status_filter is not None:
        assignments = [a for a in assignments if a.status == status_filter]
    return sorted(assignments, key=lambda a: a.due_date)


async def list_recent_activities(user_id: str) -> List[Activity]:
    state = await _ensure_loaded(user_id)
    return list(state.recent_activities)
