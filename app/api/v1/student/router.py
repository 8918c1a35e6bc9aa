from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.auth.rbac import require_student
from app.auth.schemas import CurrentUser
from app.core.enums import GoalStatus, NoticeCategory, SkillCategory
from app.core.exceptions import ServiceError
from app.core.schemas import StudentProfile

from .schemas import (
    AcademicGoal,
    AcademicGoalCreate,
    Assignment,
    AttendanceOverview,
    GoalProgressUpdate,
    Notice,
    Skill,
    SkillCreate,
    SkillProficiencyUpdate,
    StudentDashboardResponse,
    StudentProfileUpdate,
)
from . import service

router = APIRouter(prefix="/api/v1/student", tags=["student"])


@router.get("/dashboard", response_model=StudentDashboardResponse)
async def get_dashboard(
    current_user: CurrentUser = Depends(require_student),
) -> StudentDashboardResponse:
    """Greeting, profile, attendance overview, upcoming assignments, notices and registration status."""
    try:
        return await service.load_dashboard(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/dashboard/refresh", response_model=StudentDashboardResponse)
async def refresh_dashboard(
    current_user: CurrentUser = Depends(require_student),
) -> StudentDashboardResponse:
    try:
        return await service.load_dashboard(current_user.id, refresh=True)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/profile", response_model=StudentProfile)
async def get_profile(
    current_user: CurrentUser = Depends(require_student),
) -> StudentProfile:
    try:
        return await service.get_profile(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/profile", response_model=StudentProfile)
async def update_profile(
    payload: StudentProfileUpdate,
    current_user: CurrentUser = Depends(require_student),
) -> StudentProfile:
    """Update phone number, address or guardian details."""
    try:
        return await service.update_profile(current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/attendance", response_model=AttendanceOverview)
async def get_attendance(
    current_user: CurrentUser = Depends(require_student),
) -> AttendanceOverview:
    """Subject-wise attendance with overall percentage and status bucket."""
    try:
        return await service.get_attendance(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/assignments", response_model=List[Assignment])
async def list_assignments(
    current_user: CurrentUser = Depends(require_student),
) -> List[Assignment]:
    try:
        return await service.list_assignments(current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/notices", response_model=List[Notice])
async def list_notices(
    category: Optional[NoticeCategory] = Query(None, description="Filter by notice category"),
    current_user: CurrentUser = Depends(require_student),
) -> List[Notice]:
    try:
        return await service.list_notices(current_user.id, category=category)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/goals", response_model=List[AcademicGoal])
async def list_goals(
    goal_status: Optional[GoalStatus] = Query(None, alias="status"),
    current_user: CurrentUser = Depends(require_student),
) -> List[AcademicGoal]:
    try:
        return await service.list_goals(current_user.id, goal_status=goal_status)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/goals", response_model=AcademicGoal, status_code=status.HTTP_201_CREATED)
async def create_goal(
    payload: AcademicGoalCreate,
    current_user: CurrentUser = Depends(require_student),
) -> AcademicGoal:
    try:
        return await service.create_goal(current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/goals/{goal_id}/progress", response_model=AcademicGoal)
async def update_goal_progress(
    goal_id: str,
    payload: GoalProgressUpdate,
    current_user: CurrentUser = Depends(require_student),
) -> AcademicGoal:
    try:
        return await service.update_goal_progress(current_user.id, goal_id, payload.progress)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/skills", response_model=List[Skill])
async def list_skills(
    category: Optional[SkillCategory] = Query(None),
    current_user: CurrentUser = Depends(require_student),
) -> List[Skill]:
    """Skills ordered from strongest to weakest."""
    try:
        return await service.list_skills(current_user.id, category=category)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/skills", response_model=Skill, status_code=status.HTTP_201_CREATED)
async def add_skill(
    payload: SkillCreate,
    current_user: CurrentUser = Depends(require_student),
) -> Skill:
    try:
        return await service.add_skill(current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/skills/{skill_id}/proficiency", response_model=Skill)
async def update_skill_proficiency(
    skill_id: str,
    payload: SkillProficiencyUpdate,
    current_user: CurrentUser = Depends(require_student),
) -> Skill:
    try:
        return await service.update_skill_proficiency(current_user.id, skill_id, payload.proficiency_level)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
