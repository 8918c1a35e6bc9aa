"""Student dashboard: profile, attendance, assignments, notices, registration status, goals and skills."""

import asyncio
import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Set

from fastapi import status

from app.auth.directory import get_student_profile
from app.core.config import settings
from app.core.enums import AssignmentStatus, GoalStatus, NoticeCategory, ProficiencyLevel, SkillCategory
from app.core.exceptions import NotFoundError, ServiceError
from app.core.logging_config import get_logger
from app.core.schemas import StudentProfile
from app.core.state import StateRegistry

from .mock_data import (
    create_mock_assignments,
    create_mock_attendance,
    create_mock_goals,
    create_mock_notices,
    create_mock_registration_status,
    create_mock_skills,
)
from .schemas import (
    AcademicGoal,
    AcademicGoalCreate,
    Assignment,
    AttendanceOverview,
    Notice,
    RegistrationStatus,
    Skill,
    SkillCreate,
    StudentDashboardResponse,
    StudentProfileUpdate,
)

logger = get_logger(__name__)


class StudentRecord:
    """What the student has changed. Survives dashboard refreshes."""

    def __init__(self, user_id: str) -> None:
        now = datetime.now(timezone.utc)
        self.user_id = user_id
        self.profile_changes: Dict[str, Any] = {}
        self.submitted_assignment_ids: Set[str] = set()
        self.goals: List[AcademicGoal] = create_mock_goals(now)
        self.skills: List[Skill] = create_mock_skills(now)


_records: StateRegistry[StudentRecord] = StateRegistry(StudentRecord)


class StudentDashboardState:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.lock = asyncio.Lock()
        self.student: Optional[StudentProfile] = None
        self.attendance_overview = AttendanceOverview()
        self.upcoming_assignments: List[Assignment] = []
        self.recent_notices: List[Notice] = []
        self.registration_status: Optional[RegistrationStatus] = None
        self.loaded_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def populate(self, record: StudentRecord) -> None:
        now = datetime.now(timezone.utc)
        student = get_student_profile(self.user_id)
        if student is not None and record.profile_changes:
            student = student.model_copy(update=record.profile_changes)
        self.student = student
        self.attendance_overview = create_mock_attendance()
        self.upcoming_assignments = create_mock_assignments(now)
        for assignment in self.upcoming_assignments:
            if assignment.id in record.submitted_assignment_ids:
                assignment.status = AssignmentStatus.SUBMITTED
        self.recent_notices = create_mock_notices(now)
        self.registration_status = create_mock_registration_status(
            now, settings.min_credits, settings.max_credits
        )
        self.loaded_at = now
        logger.debug("Generated student dashboard data for %s", self.user_id)


_states: StateRegistry[StudentDashboardState] = StateRegistry(StudentDashboardState)


def greeting_for(hour: int) -> str:
    if hour < 12:
        return "Good Morning"
    if hour < 17:
        return "Good Afternoon"
    return "Good Evening"


async def _ensure_loaded(user_id: str, refresh: bool = False) -> StudentDashboardState:
    state = _states.get(user_id)
    if refresh or not state.is_loaded:
        async with state.lock:
            # Another request may have finished the first load while this one waited
            if refresh or not state.is_loaded:
                await asyncio.sleep(settings.mock_latency_seconds)
                state.populate(_records.get(user_id))
    if state.student is None:
        raise ServiceError("Student profile not found", status.HTTP_404_NOT_FOUND)
    return state


async def get_state(user_id: str) -> StudentDashboardState:
    """Loaded dashboard state for a student (used by submissions)."""
    return await _ensure_loaded(user_id)


async def load_dashboard(user_id: str, refresh: bool = False) -> StudentDashboardResponse:
    state = await _ensure_loaded(user_id, refresh=refresh)
    return StudentDashboardResponse(
        greeting=greeting_for(datetime.now().hour),
        student=state.student,
        attendance_overview=state.attendance_overview,
        upcoming_assignments=sorted(state.upcoming_assignments, key=lambda a: a.due_date),
        recent_notices=sorted(state.recent_notices, key=lambda n: n.date, reverse=True),
        registration_status=state.registration_status,
        loaded_at=state.loaded_at,
    )


async def get_profile(user_id: str) -> StudentProfile:
    state = await _ensure_loaded(user_id)
    return state.student


async def update_profile(user_id: str, payload: StudentProfileUpdate) -> StudentProfile:
    """Apply contact detail edits. Fields left out or sent as null are unchanged."""
    state = await _ensure_loaded(user_id)
    changes = {}
    for name in payload.model_fields_set:
        value = getattr(payload, name)
        if value is not None:
            changes[name] = value
    if not changes:
        raise ServiceError("No profile fields to update", status.HTTP_400_BAD_REQUEST)
    record = _records.get(user_id)
    record.profile_changes.update(changes)
    state.student = state.student.model_copy(update=changes)
    logger.info("Profile of %s updated (%s)", user_id, ", ".join(sorted(changes)))
    return state.student


async def get_attendance(user_id: str) -> AttendanceOverview:
    state = await _ensure_loaded(user_id)
    return state.attendance_overview


async def list_assignments(user_id: str) -> List[Assignment]:
    state = await _ensure_loaded(user_id)
    return sorted(state.upcoming_assignments, key=lambda a: a.due_date)


async def find_assignment(user_id: str, assignment_id: str) -> Optional[Assignment]:
    state = await _ensure_loaded(user_id)
    for assignment in state.upcoming_assignments:
        if assignment.id == assignment_id:
            return assignment
    return None


async def mark_assignment_submitted(user_id: str, assignment_id: str) -> None:
    """Record a submission so the assignment stays submitted after a refresh."""
    _records.get(user_id).submitted_assignment_ids.add(assignment_id)
    assignment = await find_assignment(user_id, assignment_id)
    if assignment is not None:
        assignment.status = AssignmentStatus.SUBMITTED


async def list_notices(user_id: str, category: Optional[NoticeCategory] = None) -> List[Notice]:
    state = await _ensure_loaded(user_id)
    notices = state.recent_notices
    if category is not None:
        notices = [n for n in notices if n.category == category]
    return sorted(notices, key=lambda n: n.date, reverse=True)


# ----- Goals -----
async def list_goals(user_id: str, goal_status: Optional[GoalStatus] = None) -> List[AcademicGoal]:
    await _ensure_loaded(user_id)
    goals = _records.get(user_id).goals
    if goal_status is not None:
        goals = [g for g in goals if g.status == goal_status]
    return sorted(goals, key=lambda g: g.target_date)


async def create_goal(user_id: str, payload: AcademicGoalCreate) -> AcademicGoal:
    await _ensure_loaded(user_id)
    title = payload.title.strip()
    if not title:
        raise ServiceError("Goal title is required", status.HTTP_400_BAD_REQUEST)
    if payload.target_date < date.today():
        raise ServiceError("Target date cannot be in the past", status.HTTP_400_BAD_REQUEST)
    now = datetime.now(timezone.utc)
    goal = AcademicGoal(
        id=f"GOAL{uuid.uuid4().hex[:8].upper()}",
        type=payload.type,
        title=title,
        description=payload.description.strip(),
        target_date=payload.target_date,
        priority=payload.priority,
        status=GoalStatus.ACTIVE,
        progress=0.0,
        created_date=now,
        updated_date=now,
    )
    _records.get(user_id).goals.append(goal)
    logger.info("Goal %s created by %s", goal.id, user_id)
    return goal


async def update_goal_progress(user_id: str, goal_id: str, progress: float) -> AcademicGoal:
    """Set progress (0 to 1). Reaching 1 completes the goal; dropping below reopens it."""
    await _ensure_loaded(user_id)
    goal = next((g for g in _records.get(user_id).goals if g.id == goal_id), None)
    if goal is None:
        raise NotFoundError("Goal not found")
    goal.progress = progress
    if progress >= 1:
        goal.status = GoalStatus.COMPLETED
    elif goal.status == GoalStatus.COMPLETED:
        goal.status = GoalStatus.ACTIVE
    goal.updated_date = datetime.now(timezone.utc)
    return goal


# ----- Skills -----
async def list_skills(user_id: str, category: Optional[SkillCategory] = None) -> List[Skill]:
    await _ensure_loaded(user_id)
    skills = _records.get(user_id).skills
    if category is not None:
        skills = [s for s in skills if s.category == category]
    return sorted(skills, key=lambda s: s.proficiency_level.progress_value, reverse=True)


async def add_skill(user_id: str, payload: SkillCreate) -> Skill:
    await _ensure_loaded(user_id)
    name = payload.skill_name.strip()
    if not name:
        raise ServiceError("Skill name is required", status.HTTP_400_BAD_REQUEST)
    record = _records.get(user_id)
    if any(s.skill_name.lower() == name.lower() for s in record.skills):
        raise ServiceError("Skill already exists", status.HTTP_400_BAD_REQUEST)
    skill = Skill(
        id=f"SKL{uuid.uuid4().hex[:8].upper()}",
        skill_name=name,
        category=payload.category,
        proficiency_level=payload.proficiency_level,
        certifications=[c.strip() for c in payload.certifications if c.strip()],
        last_updated=datetime.now(timezone.utc),
    )
    record.skills.append(skill)
    logger.info("Skill %r added by %s", name, user_id)
    return skill


async def update_skill_proficiency(user_id: str, skill_id: str, level: ProficiencyLevel) -> Skill:
    await _ensure_loaded(user_id)
    skill = next((s for s in _records.get(user_id).skills if s.id == skill_id), None)
    if skill is None:
        raise NotFoundError("Skill not found")
    skill.proficiency_level = level
    skill.last_updated = datetime.now(timezone.utc)
    return skill
