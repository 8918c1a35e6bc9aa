"""Schools and their course offerings for semester registration."""

from typing import Dict, List, Optional

from app.core.enums import CourseType

from .schemas import Course, School

SCHOOLS: List[School] = [
    School(id=1, school_name="School of Information & Communication Technology", school_code="SOICT", school_type="Engineering", establishment_year="2008"),
    School(id=2, school_name="School of Engineering", school_code="SOE", school_type="Engineering", establishment_year="2008"),
    School(id=3, school_name="School of Management", school_code="SOM", school_type="Management", establishment_year="2009"),
]


def _course(id_, school_id, code, name, course_type, theory, practical, prerequisites=None, capacity=60, enrolled=40, faculty_id=None):
    return Course(
        id=id_,
        school_id=school_id,
        course_code=code,
        course_name=name,
        course_type=course_type,
        theory_credits=theory,
        practical_credits=practical,
        total_credits=theory + practical,
        prerequisites=prerequisites or [],
        is_elective=course_type == CourseType.ELECTIVE,
        capacity=capacity,
        enrolled_count=enrolled,
        faculty_id=faculty_id,
    )


COURSES: Dict[int, List[Course]] = {
    1: [
        _course("C101", 1, "CS601", "Compiler Design", CourseType.CORE, 3, 1, faculty_id="FAC1023"),
        _course("C102", 1, "CS602", "Computer Networks", CourseType.CORE, 3, 1, faculty_id="FAC1023"),
        _course("C103", 1, "CS603", "Software Engineering", CourseType.CORE, 3, 0),
        _course("C104", 1, "CS604", "Machine Learning", CourseType.ELECTIVE, 3, 1, prerequisites=["MA601"]),
        _course("C105", 1, "MA601", "Probability & Statistics", CourseType.CORE, 4, 0),
        _course("C106", 1, "CS605", "Network Security", CourseType.ELECTIVE, 3, 0, prerequisites=["CS602"]),
        _course("C107", 1, "CS691", "Networks Lab", CourseType.PRACTICAL, 0, 2, prerequisites=["CS602"]),
        _course("C108", 1, "CS699", "Minor Project", CourseType.PROJECT, 0, 4, capacity=30, enrolled=30),
        _course("C109", 1, "CS681", "Technical Seminar", CourseType.SEMINAR, 1, 0),
        # Second section of the same elective, shares its course code
        _course("C110", 1, "CS604", "Machine Learning (Section B)", CourseType.ELECTIVE, 3, 1, prerequisites=["MA601"]),
    ],
    2: [
        _course("E201", 2, "ME601", "Heat Transfer", CourseType.CORE, 3, 1),
        _course("E202", 2, "ME602", "Machine Design", CourseType.CORE, 4, 0),
        _course("E203", 2, "CE601", "Structural Analysis", CourseType.CORE, 4, 0),
        _course("E204", 2, "EE601", "Power Systems", CourseType.ELECTIVE, 3, 0),
        _course("E205", 2, "ME690", "Industrial Internship", CourseType.INTERNSHIP, 0, 6),
    ],
    3: [
        _course("M301", 3, "MB601", "Strategic Management", CourseType.CORE, 4, 0),
        _course("M302", 3, "MB602", "Financial Analytics", CourseType.ELECTIVE, 3, 0, prerequisites=["MB501"]),
        _course("M303", 3, "MB603", "Business Communication", CourseType.SEMINAR, 2, 0),
    ],
}


def list_schools() -> List[School]:
    return list(SCHOOLS)


def get_school(school_id: int) -> Optional[School]:
    for school in SCHOOLS:
        if school.id == school_id:
            return school
    return None


def list_courses(school_id: int) -> List[Course]:
    return [c.model_copy() for c in COURSES.get(school_id, [])]


def courses_by_type(courses: List[Course], course_type: CourseType) -> List[Course]:
    return [c for c in courses if c.course_type == course_type]
