"""
Demo account directory.
Students sign in with their enrollment number, faculty and admins with their employee id.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel

from app.auth.security import hash_password
from app.core.enums import AdminRole, UserType
from app.core.schemas import (
    AcademicInfo,
    Address,
    AdminProfile,
    FacultyProfile,
    GuardianInfo,
    StudentProfile,
)


class Account(BaseModel):
    user_id: str
    user_type: UserType
    identifier: str  # enrollment number (students) or employee id
    password_hash: str
    first_name: str
    last_name: str
    email: str
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


_STUDENT_PROFILES: Dict[str, StudentProfile] = {
    "STU245UAI130": StudentProfile(
        id="STU245UAI130",
        enrollment_number="245uai130",
        first_name="Yaduraj",
        last_name="Singh",
        email="yaduraj.singh@gbu.ac.in",
        course="B.Tech",
        branch="Information Technology",
        semester=6,
        year=3,
        section="A",
        roll_number="245UAI130",
        admission_date=date(2022, 8, 15),
        date_of_birth=date(2006, 8, 5),
        phone_number="+91 9876543210",
        address=Address(
            street="SOICT Campus",
            city="Greater Noida",
            state="UP",
            pincode="201310",
            country="India",
        ),
        guardian_info=GuardianInfo(
            name="Sujeet Kumar Singh",
            relationship="Father",
            phone_number="+91 9876543211",
            email="sujeet.singh@email.com",
            occupation="Professional",
        ),
        academic_info=AcademicInfo(
            cgpa=8.7,
            total_credits=180,
            completed_credits=120,
            backlogs=0,
            attendance=88.5,
        ),
    ),
}

_FACULTY_PROFILES: Dict[str, FacultyProfile] = {
    "FAC1023": FacultyProfile(
        id="FAC1023",
        employee_id="FAC1023",
        first_name="Anjali",
        last_name="Verma",
        email="anjali.verma@gbu.ac.in",
        department="Information Technology",
        designation="Associate Professor",
        joining_date=date(2015, 7, 1),
        qualification=["Ph.D (Computer Science)", "M.Tech"],
        specialization=["Databases", "Computer Networks"],
        phone_number="+91 9876500123",
        office_location="SOICT Block B, Room 214",
    ),
}

_ADMIN_PROFILES: Dict[str, AdminProfile] = {
    "ADM0001": AdminProfile(
        id="ADM0001",
        employee_id="ADM0001",
        first_name="Rakesh",
        last_name="Sharma",
        email="rakesh.sharma@gbu.ac.in",
        department="Administration",
        role=AdminRole.SUPER_ADMIN,
        joining_date=date(2012, 4, 2),
    ),
}


def _build_accounts() -> List[Account]:
    return [
        Account(
            user_id="STU245UAI130",
            user_type=UserType.STUDENT,
            identifier="245uai130",
            password_hash=hash_password("Yadu@1234"),
            first_name="Yaduraj",
            last_name="Singh",
            email="yaduraj.singh@gbu.ac.in",
        ),
        Account(
            user_id="FAC1023",
            user_type=UserType.FACULTY,
            identifier="FAC1023",
            password_hash=hash_password("Faculty@123"),
            first_name="Anjali",
            last_name="Verma",
            email="anjali.verma@gbu.ac.in",
        ),
        Account(
            user_id="ADM0001",
            user_type=UserType.ADMIN,
            identifier="ADM0001",
            password_hash=hash_password("Admin@123"),
            first_name="Rakesh",
            last_name="Sharma",
            email="rakesh.sharma@gbu.ac.in",
        ),
    ]


_accounts: Optional[List[Account]] = None


def list_accounts() -> List[Account]:
    # Built on first use
    global _accounts
    if _accounts is None:
        _accounts = _build_accounts()
    return _accounts


def find_account(identifier: str, user_type: UserType) -> Optional[Account]:
    needle = identifier.strip().lower()
    for account in list_accounts():
        if account.user_type == user_type and account.identifier.lower() == needle:
            return account
    return None


def get_account(user_id: str) -> Optional[Account]:
    for account in list_accounts():
        if account.user_id == user_id:
            return account
    return None


def get_student_profile(user_id: str) -> Optional[StudentProfile]:
    profile = _STUDENT_PROFILES.get(user_id)
    return profile.model_copy(deep=True) if profile else None


def get_faculty_profile(user_id: str) -> Optional[FacultyProfile]:
    profile = _FACULTY_PROFILES.get(user_id)
    return profile.model_copy(deep=True) if profile else None


def get_admin_profile(user_id: str) -> Optional[AdminProfile]:
    profile = _ADMIN_PROFILES.get(user_id)
    return profile.model_copy(deep=True) if profile else None
