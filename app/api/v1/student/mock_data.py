"""Placeholder student records used until the academic service is wired in."""

from datetime import datetime, timedelta
from typing import List

from app.core.enums import (
    AssignmentStatus,
    GoalStatus,
    GoalType,
    NoticeCategory,
    Priority,
    ProficiencyLevel,
    SkillCategory,
)
from app.core.schemas import Subject

from .schemas import (
    AcademicGoal,
    Assignment,
    AttendanceOverview,
    Notice,
    RegistrationStatus,
    Skill,
    SubjectAttendance,
)


def create_mock_attendance() -> AttendanceOverview:
    return AttendanceOverview(
        subject_wise_attendance=[
            SubjectAttendance(subject_name="Data Structures", attended=18, total=20),
            SubjectAttendance(subject_name="Operating Systems", attended=16, total=20),
            SubjectAttendance(subject_name="Database Systems", attended=22, total=25),
            SubjectAttendance(subject_name="Computer Networks", attended=13, total=20),
        ]
    )


def create_mock_assignments(now: datetime) -> List[Assignment]:
    return [
        Assignment(
            id="ASG001",
            title="Data Structure Implementation",
            subject="Data Structures",
            due_date=now + timedelta(days=3),
            status=AssignmentStatus.PENDING,
            priority=Priority.HIGH,
        ),
        Assignment(
            id="ASG002",
            title="OS Process Scheduling",
            subject="Operating Systems",
            due_date=now + timedelta(days=7),
            status=AssignmentStatus.PENDING,
            priority=Priority.MEDIUM,
        ),
        Assignment(
            id="ASG003",
            title="Database Design Project",
            subject="Database Systems",
            due_date=now + timedelta(days=10),
            status=AssignmentStatus.PENDING,
            priority=Priority.LOW,
        ),
        Assignment(
            id="ASG004",
            title="Subnetting Worksheet",
            subject="Computer Networks",
            due_date=now - timedelta(days=2),
            status=AssignmentStatus.OVERDUE,
            priority=Priority.MEDIUM,
        ),
    ]


def create_mock_notices(now: datetime) -> List[Notice]:
    return [
        Notice(
            id="NOT001",
            title="Mid-Semester Exam Schedule",
            content="Mid-semester examinations will be conducted from March 15-25.",
            date=now,
            priority=Priority.HIGH,
            category=NoticeCategory.ACADEMIC,
        ),
        Notice(
            id="NOT002",
            title="Library Timing Update",
            content="Library will remain open till 10 PM during exam period.",
            date=now - timedelta(days=1),
            priority=Priority.MEDIUM,
            category=NoticeCategory.GENERAL,
        ),
        Notice(
            id="NOT003",
            title="Hostel Fee Payment",
            content="Hostel fee payment deadline is March 31.",
            date=now - timedelta(days=2),
            priority=Priority.HIGH,
            category=NoticeCategory.FINANCE,
        ),
        Notice(
            id="NOT004",
            title="Hostel Room Inspection",
            content="Room inspection for all blocks is scheduled for Saturday morning.",
            date=now - timedelta(days=4),
            priority=Priority.LOW,
            category=NoticeCategory.HOSTEL,
        ),
    ]


def create_mock_registration_status(now: datetime, min_credits: int, max_credits: int) -> RegistrationStatus:
    return RegistrationStatus(
        is_registration_open=True,
        semester=7,
        registration_deadline=now + timedelta(days=30),
        max_credits=max_credits,
        min_credits=min_credits,
        registered_credits=0,
        available_subjects=[
            Subject(id="SUB701", code="CS701", name="Machine Learning", credits=4, semester=7),
            Subject(id="SUB702", code="CS702", name="Cloud Computing", credits=3, semester=7),
            Subject(id="SUB703", code="CS703", name="Information Security", credits=4, semester=7),
        ],
    )


def create_mock_goals(now: datetime) -> List[AcademicGoal]:
    today = now.date()
    return [
        AcademicGoal(
            id="GOAL001",
            type=GoalType.ACADEMIC,
            title="Achieve 9.0+ CGPA",
            description="Maintain excellent academic performance throughout the semester",
            target_date=today + timedelta(days=180),
            priority=Priority.HIGH,
            status=GoalStatus.ACTIVE,
            progress=0.75,
            created_date=datetime(2024, 1, 15, tzinfo=now.tzinfo),
            updated_date=now,
        ),
        AcademicGoal(
            id="GOAL002",
            type=GoalType.CAREER,
            title="Secure Software Engineer Role",
            description="Get placed in a top-tier tech company with competitive package",
            target_date=today + timedelta(days=240),
            priority=Priority.HIGH,
            status=GoalStatus.ACTIVE,
            progress=0.45,
            created_date=datetime(2024, 2, 1, tzinfo=now.tzinfo),
            updated_date=now,
        ),
        AcademicGoal(
            id="GOAL003",
            type=GoalType.SKILL,
            title="Complete Advanced Data Structures",
            description="Master advanced algorithms and data structures for competitive programming",
            target_date=today + timedelta(days=90),
            priority=Priority.MEDIUM,
            status=GoalStatus.ACTIVE,
            progress=0.8,
            created_date=datetime(2024, 3, 10, tzinfo=now.tzinfo),
            updated_date=now,
        ),
    ]


def create_mock_skills(now: datetime) -> List[Skill]:
    return [
        Skill(
            id="SKL001",
            skill_name="Python Programming",
            category=SkillCategory.TECHNICAL,
            proficiency_level=ProficiencyLevel.ADVANCED,
            certifications=["PCAP Certified Associate"],
            last_updated=now,
            endorsements=15,
            is_verified=True,
        ),
        Skill(
            id="SKL002",
            skill_name="Problem Solving",
            category=SkillCategory.ANALYTICAL,
            proficiency_level=ProficiencyLevel.EXPERT,
            last_updated=now - timedelta(days=5),
            endorsements=22,
        ),
        Skill(
            id="SKL003",
            skill_name="Database Management",
            category=SkillCategory.TECHNICAL,
            proficiency_level=ProficiencyLevel.INTERMEDIATE,
            certifications=["MySQL Fundamentals", "PostgreSQL Basics"],
            last_updated=now - timedelta(days=10),
            endorsements=8,
            is_verified=True,
        ),
        Skill(
            id="SKL004",
            skill_name="Leadership",
            category=SkillCategory.SOFT,
            proficiency_level=ProficiencyLevel.ADVANCED,
            certifications=["Leadership Excellence Program"],
            last_updated=now - timedelta(days=3),
            endorsements=12,
        ),
        Skill(
            id="SKL005",
            skill_name="UI/UX Design",
            category=SkillCategory.CREATIVE,
            proficiency_level=ProficiencyLevel.INTERMEDIATE,
            certifications=["Google UX Design Certificate"],
            last_updated=now - timedelta(days=7),
            endorsements=6,
            is_verified=True,
        ),
    ]
