from enum import Enum, IntEnum


class UserType(str, Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def dashboard(self) -> str:
        """Dashboard the client opens after login for this role."""
        return f"/api/v1/{self.value}/dashboard"


class AdminRole(str, Enum):
    SUPER_ADMIN = "super_admin"
    ACADEMIC_ADMIN = "academic_admin"
    FINANCE_ADMIN = "finance_admin"
    LIBRARY_ADMIN = "library_admin"
    HOSTEL_ADMIN = "hostel_admin"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# ----- Attendance -----
class AttendanceStatus(str, Enum):
    """Bucket for an attendance percentage."""

    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def attendance_status(percentage: float) -> AttendanceStatus:
    """Map a percentage to its bucket. Thresholds are inclusive lower bounds."""
    if percentage >= 85:
        return AttendanceStatus.EXCELLENT
    if percentage >= 75:
        return AttendanceStatus.GOOD
    if percentage >= 65:
        return AttendanceStatus.WARNING
    return AttendanceStatus.CRITICAL


class AttendanceRecordStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# ----- Assignments / notices / activities -----
class AssignmentStatus(str, Enum):
    PENDING = "pending"
    SUBMITTED = "submitted"
    OVERDUE = "overdue"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActivityPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class NoticeCategory(str, Enum):
    ACADEMIC = "academic"
    GENERAL = "general"
    FINANCE = "finance"
    HOSTEL = "hostel"


class ClassStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class FacultyAssignmentStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    NEEDS_GRADING = "needs_grading"
    GRADED = "graded"
    ARCHIVED = "archived"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# ----- Registration -----
class CourseType(str, Enum):
    CORE = "core"
    ELECTIVE = "elective"
    PRACTICAL = "practical"
    PROJECT = "project"
    INTERNSHIP = "internship"
    SEMINAR = "seminar"

    @property
    def display_name(self) -> str:
        if self in (CourseType.CORE, CourseType.ELECTIVE):
            return f"{self.value.capitalize()} Course"
        return self.value.capitalize()


class RegistrationStep(IntEnum):
    SCHOOL_SELECTION = 0
    COURSE_SELECTION = 1
    FORM_COMPLETION = 2
    REVIEW = 3
    CONFIRMATION = 4

    @property
    def title(self) -> str:
        return {
            RegistrationStep.SCHOOL_SELECTION: "Select School",
            RegistrationStep.COURSE_SELECTION: "Select Courses",
            RegistrationStep.FORM_COMPLETION: "Complete Form",
            RegistrationStep.REVIEW: "Review",
            RegistrationStep.CONFIRMATION: "Confirmation",
        }[self]


class RegistrationType(str, Enum):
    REGULAR = "regular"
    SUPPLEMENTARY = "supplementary"
    IMPROVEMENT = "improvement"
    REAPPEAR = "reappear"


class SemesterRegistrationStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class CourseRegistrationStatus(str, Enum):
    SELECTED = "selected"
    WAITLISTED = "waitlisted"
    CONFIRMED = "confirmed"
    DROPPED = "dropped"
    COMPLETED = "completed"


class CreditStatus(str, Enum):
    BELOW_MINIMUM = "below_minimum"
    VALID = "valid"
    ABOVE_MAXIMUM = "above_maximum"

    @property
    def display_name(self) -> str:
        return {
            CreditStatus.BELOW_MINIMUM: "Below Minimum Credits",
            CreditStatus.VALID: "Valid Credits",
            CreditStatus.ABOVE_MAXIMUM: "Above Maximum Credits",
        }[self]


# ----- Leave -----
class LeaveType(str, Enum):
    MEDICAL = "medical"
    PERSONAL = "personal"
    FAMILY = "family"
    ACADEMIC = "academic"
    OTHER = "other"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


# ----- Submissions -----
class SubmissionStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    GRADED = "graded"
    RETURNED = "returned"
    RESUBMITTED = "resubmitted"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# ----- Goals and skills -----
class GoalType(str, Enum):
    ACADEMIC = "academic"
    CAREER = "career"
    SKILL = "skill"
    PERSONAL = "personal"


class GoalStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class SkillCategory(str, Enum):
    TECHNICAL = "technical"
    ANALYTICAL = "analytical"
    SOFT = "soft"
    CREATIVE = "creative"
    LANGUAGE = "language"


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def progress_value(self) -> float:
        return {
            ProficiencyLevel.BEGINNER: 0.25,
            ProficiencyLevel.INTERMEDIATE: 0.5,
            ProficiencyLevel.ADVANCED: 0.75,
            ProficiencyLevel.EXPERT: 1.0,
        }[self]
