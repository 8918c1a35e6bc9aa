from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.core.schemas import Activity, AdminProfile, Department


class SystemStatistics(BaseModel):
    total_students: int = Field(..., ge=0)
    total_faculty: int = Field(..., ge=0)
    active_courses: int = Field(..., ge=0)
    average_attendance: float
    average_cgpa: float
    faculty_satisfaction: float


class AdminDashboardResponse(BaseModel):
    admin: AdminProfile
    statistics: SystemStatistics
    departments: List[Department]
    recent_activities: List[Activity]
    loaded_at: datetime
