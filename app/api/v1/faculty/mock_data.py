"""Generated faculty-side records: subjects, today's classes, students, assignments, attendance sheets."""

import random
import uuid
from datetime import date, datetime, timedelta
from typing import List, Optional

from app.core.enums import ActivityPriority, AttendanceRecordStatus, ClassStatus, FacultyAssignmentStatus
from app.core.schemas import AcademicInfo, Activity, Address, GuardianInfo, StudentProfile, Subject

from .schemas import ClassAttendance, FacultyAssignment, FacultyClass, StudentAttendanceItem

STUDENT_COUNT = 45

FIRST_NAMES = [
    "Aarav", "Arjun", "Advait", "Aryan", "Dhruv", "Ishaan", "Krishna", "Lakshay", "Mihir", "Neel",
    "Pranav", "Reyansh", "Shaurya", "Vedant", "Yash", "Zain", "Aditya", "Bhavesh", "Chirag", "Devansh",
    "Esha", "Fatima", "Gauri", "Harshita", "Ishita", "Jiya", "Kavya", "Lakshmi", "Mira", "Nisha",
    "Priya", "Riya", "Saanvi", "Tara", "Uma", "Vanya", "Zara", "Ananya", "Bhavya", "Charvi",
    "Disha", "Eva", "Fiza", "Gayatri", "Himanshi", "Ira", "Jhanvi", "Kashvi", "Lavanya", "Mishka",
]

LAST_NAMES = [
    "Sharma", "Verma", "Patel", "Kumar", "Singh", "Gupta", "Malhotra", "Kapoor", "Joshi", "Chopra",
    "Reddy", "Mehra", "Tiwari", "Yadav", "Kaur", "Khan", "Ali", "Hussain", "Ahmed", "Rizvi",
    "Rajput", "Chauhan", "Tomar", "Rathore", "Solanki", "Parmar", "Bhatt", "Pandey", "Mishra", "Tripathi",
    "Dubey", "Trivedi", "Shukla", "Dwivedi", "Saxena", "Agarwal", "Jain", "Goyal", "Bansal", "Goel",
    "Khanna", "Sethi", "Soni", "Bhatia", "Chawla", "Gill", "Dhillon", "Sidhu", "Brar", "Sandhu",
]

ABSENT_REMARKS = ["Medical emergency", "Family function", "Transport issue", "Personal emergency"]
LATE_REMARKS = ["Traffic delay", "Missed bus", "Overslept", "Previous class ran late"]
EXCUSED_REMARKS = ["Official leave", "Sports event", "Cultural program", "Medical appointment"]


def create_subjects() -> List[Subject]:
    return [
        Subject(id="SUB001", code="CS301", name="Database Management Systems", credits=4, semester=6),
        Subject(id="SUB002", code="CS302", name="Computer Networks", credits=4, semester=6),
        Subject(id="SUB003", code="CS303", name="Software Engineering", credits=3, semester=6),
        Subject(id="SUB004", code="CS304", name="Operating Systems", credits=4, semester=6),
    ]


def _at(today: date, hour: int, minute: int = 0) -> datetime:
    return datetime(today.year, today.month, today.day, hour, minute)


def create_todays_classes(subjects: List[Subject], today: date) -> List[FacultyClass]:
    return [
        FacultyClass(
            id="CLASS001",
            subject=subjects[0],
            start_time=_at(today, 9),
            end_time=_at(today, 10, 30),
            room="Room 301",
            year=3,
            section="A",
            status=ClassStatus.UPCOMING,
        ),
        FacultyClass(
            id="CLASS002",
            subject=subjects[1],
            start_time=_at(today, 11),
            end_time=_at(today, 12, 30),
            room="Room 302",
            year=3,
            section="B",
            status=ClassStatus.ONGOING,
        ),
        FacultyClass(
            id="CLASS003",
            subject=subjects[2],
            start_time=_at(today, 14),
            end_time=_at(today, 15, 30),
            room="Room 303",
            year=3,
            section="A",
            status=ClassStatus.UPCOMING,
        ),
    ]


def create_students(rng: Optional[random.Random] = None) -> List[StudentProfile]:
    rng = rng or random.Random()
    students = []
    for index in range(1, STUDENT_COUNT + 1):
        first_name = FIRST_NAMES[index % len(FIRST_NAMES)]
        last_name = LAST_NAMES[index % len(LAST_NAMES)]
        enrollment = f"2024IT{index:03d}"
        students.append(
            StudentProfile(
                id=f"STU{index:03d}",
                enrollment_number=enrollment,
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name.lower()}.{last_name.lower()}@gbu.ac.in",
                course="B.Tech",
                branch="Information Technology",
                semester=6,
                year=3,
                section="A" if index % 2 else "B",
                roll_number=enrollment,
                admission_date=date(2022, 8, 15),
                date_of_birth=date(2005, rng.randint(1, 12), rng.randint(1, 28)),
                phone_number=f"+91 98765{43200 + index:05d}",
                address=Address(
                    street=f"Room {index % 20 + 101}, Block {'ABCDE'[index % 5]}",
                    city="Greater Noida",
                    state="Uttar Pradesh",
                    pincode="201310",
                    country="India",
                ),
                guardian_info=GuardianInfo(
                    name=f"{last_name} {first_name}",
                    relationship=rng.choice(["Father", "Mother", "Guardian"]),
                    phone_number=f"+91 98765{44200 + index:05d}",
                ),
                academic_info=AcademicInfo(
                    cgpa=round(rng.uniform(6.5, 9.8), 2),
                    total_credits=140,
                    completed_credits=rng.randint(85, 125),
                    backlogs=rng.randint(0, 2),
                    attendance=round(rng.uniform(75, 98), 1),
                ),
            )
        )
    return students


def create_assignments(subjects: List[Subject], now: datetime) -> List[FacultyAssignment]:
    return [
        FacultyAssignment(
            id="ASSIGN001",
            title="Database Design Project",
            subject=subjects[0],
            description="Design and implement a complete database for a library management system",
            due_date=now + timedelta(days=7),
            total_marks=100,
            status=FacultyAssignmentStatus.ACTIVE,
            submission_count=25,
            graded_count=10,
            created_date=now - timedelta(days=10),
            target_year=3,
            target_section="A",
        ),
        FacultyAssignment(
            id="ASSIGN002",
            title="Network Security Analysis",
            subject=subjects[1],
            description="Analyze different network security protocols and their implementations",
            due_date=now + timedelta(days=3),
            total_marks=50,
            status=FacultyAssignmentStatus.NEEDS_GRADING,
            submission_count=30,
            graded_count=5,
            created_date=now - timedelta(days=14),
            target_year=3,
            target_section="B",
            late_submission_allowed=True,
            late_submission_penalty=5.0,
        ),
        FacultyAssignment(
            id="ASSIGN003",
            title="Software Development Lifecycle",
            subject=subjects[2],
            description="Create a comprehensive report on SDLC methodologies",
            due_date=now - timedelta(days=2),
            total_marks=75,
            status=FacultyAssignmentStatus.GRADED,
            submission_count=28,
            graded_count=28,
            created_date=now - timedelta(days=20),
            target_year=3,
            target_section="A",
            late_submission_allowed=True,
            late_submission_penalty=10.0,
        ),
    ]


def create_recent_activities(now: datetime) -> List[Activity]:
    return [
        Activity(
            id="ACT001",
            title="Assignment Submitted",
            description="5 new submissions for Database Design Project",
            timestamp=now - timedelta(hours=2),
        ),
        Activity(
            id="ACT002",
            title="Class Completed",
            description="Computer Networks - Year 3 Section B",
            timestamp=now - timedelta(hours=4),
            priority=ActivityPriority.LOW,
        ),
        Activity(
            id="ACT003",
            title="Grades Published",
            description="Software Development Lifecycle assignment grades released",
            timestamp=now - timedelta(days=1),
        ),
        Activity(
            id="ACT004",
            title="Student Query",
            description="3 students asked questions about upcoming exam",
            timestamp=now - timedelta(days=2),
            priority=ActivityPriority.LOW,
        ),
    ]


def random_attendance_status(attendance: float, rng: random.Random) -> AttendanceRecordStatus:
    """Draw a status; students with a higher attendance history are more likely present."""
    probability = attendance / 100.0
    value = rng.random()
    if value < probability * 0.8:
        return AttendanceRecordStatus.PRESENT
    if value < probability * 0.9:
        return AttendanceRecordStatus.LATE
    if value < probability * 0.95:
        return AttendanceRecordStatus.EXCUSED
    return AttendanceRecordStatus.ABSENT


def _remarks_for(status: AttendanceRecordStatus, rng: random.Random) -> Optional[str]:
    if status == AttendanceRecordStatus.ABSENT:
        return rng.choice(ABSENT_REMARKS)
    if status == AttendanceRecordStatus.LATE:
        return rng.choice(LATE_REMARKS)
    if status == AttendanceRecordStatus.EXCUSED:
        return rng.choice(EXCUSED_REMARKS)
    return None


def create_class_attendances(
    classes: List[FacultyClass],
    students: List[StudentProfile],
    now: datetime,
    rng: Optional[random.Random] = None,
) -> List[ClassAttendance]:
    rng = rng or random.Random()
    sheets = []
    for class_item in classes:
        items = []
        for student in students:
            if student.year != class_item.year or student.section != class_item.section:
                continue
            status = random_attendance_status(student.academic_info.attendance, rng)
            items.append(
                StudentAttendanceItem(
                    id=str(uuid.uuid4()),
                    student=student,
                    status=status,
                    cgpa=student.academic_info.cgpa or 0.0,
                    current_attendance=student.academic_info.attendance,
                    remarks=_remarks_for(status, rng),
                )
            )
        sheet = ClassAttendance(
            id=str(uuid.uuid4()),
            class_id=class_item.id,
            subject_id=class_item.subject.id,
            date=now,
            students=items,
        )
        sheet.recount()
        sheets.append(sheet)
    return sheets
