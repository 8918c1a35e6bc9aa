"""Generated institution-wide figures for the admin dashboard."""

import random
from datetime import datetime, timedelta
from typing import List, Optional

from app.core.enums import ActivityPriority
from app.core.schemas import Activity, Department

from .schemas import SystemStatistics

STUDENT_RANGE = (2500, 3500)
FACULTY_RANGE = (180, 250)
COURSE_RANGE = (45, 65)
ATTENDANCE_RANGE = (78.0, 88.0)
CGPA_RANGE = (7.2, 8.4)
SATISFACTION_RANGE = (82.0, 92.0)


def create_system_statistics(rng: Optional[random.Random] = None) -> SystemStatistics:
    rng = rng or random.Random()
    return SystemStatistics(
        total_students=rng.randint(*STUDENT_RANGE),
        total_faculty=rng.randint(*FACULTY_RANGE),
        active_courses=rng.randint(*COURSE_RANGE),
        average_attendance=round(rng.uniform(*ATTENDANCE_RANGE), 1),
        average_cgpa=round(rng.uniform(*CGPA_RANGE), 2),
        faculty_satisfaction=round(rng.uniform(*SATISFACTION_RANGE), 1),
    )


def create_departments() -> List[Department]:
    rows = [
        ("DEPT001", "Computer Science & Engineering", "CSE", 42, 680),
        ("DEPT002", "Information Technology", "IT", 38, 620),
        ("DEPT003", "Electronics & Communication", "ECE", 35, 580),
        ("DEPT004", "Mechanical Engineering", "ME", 40, 640),
        ("DEPT005", "Civil Engineering", "CE", 32, 520),
        ("DEPT006", "Electrical Engineering", "EE", 36, 560),
        ("DEPT007", "Biotechnology", "BT", 28, 420),
        ("DEPT008", "Applied Sciences", "AS", 25, 380),
    ]
    return [
        Department(id=id_, name=name, code=code, faculty_count=faculty, student_count=students)
        for id_, name, code, faculty, students in rows
    ]


def create_recent_activities(now: datetime) -> List[Activity]:
    rows = [
        ("ACT001", "New Student Registration", "25 new students registered for admission",
         timedelta(hours=1), ActivityPriority.MEDIUM),
        ("ACT002", "Faculty Performance Review", "Monthly faculty evaluation completed for IT department",
         timedelta(hours=3), ActivityPriority.HIGH),
        ("ACT003", "System Backup Completed", "Daily system backup and data sync completed successfully",
         timedelta(hours=6), ActivityPriority.LOW),
        ("ACT004", "Course Curriculum Updated", "CSE department updated curriculum for semester 6",
         timedelta(days=1), ActivityPriority.MEDIUM),
        ("ACT005", "Security Alert Resolved", "Unauthorized access attempt detected and blocked",
         timedelta(days=1), ActivityPriority.HIGH),
        ("ACT006", "Financial Report Generated", "Monthly financial summary and budget analysis completed",
         timedelta(days=2), ActivityPriority.MEDIUM),
        ("ACT007", "Faculty Recruitment", "3 new faculty members joined the Mechanical Engineering department",
         timedelta(days=3), ActivityPriority.MEDIUM),
        ("ACT008", "Infrastructure Maintenance", "Annual maintenance of laboratory equipment scheduled",
         timedelta(days=4), ActivityPriority.LOW),
    ]
    return [
        Activity(id=id_, title=title, description=description, timestamp=now - ago, priority=priority)
        for id_, title, description, ago, priority in rows
    ]
