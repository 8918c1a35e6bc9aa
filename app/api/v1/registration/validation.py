"""
Registration form checks.
Each check is independent; every failing check contributes one message.
"""

from typing import List, Sequence

from app.core.enums import CreditStatus

from .schemas import Course, RegistrationForm, ValidationResult


def total_credits(courses: Sequence[Course]) -> float:
    return float(sum(c.total_credits for c in courses))


def credit_status(credits: float, min_credits: int, max_credits: int) -> CreditStatus:
    if credits < min_credits:
        return CreditStatus.BELOW_MINIMUM
    if credits > max_credits:
        return CreditStatus.ABOVE_MAXIMUM
    return CreditStatus.VALID


def has_duplicate_codes(courses: Sequence[Course]) -> bool:
    codes = [c.course_code for c in courses]
    return len(codes) != len(set(codes))


def missing_prerequisites(course: Course, selected_codes: set) -> List[str]:
    return [code for code in course.prerequisites if code not in selected_codes]


def validate_form(form: RegistrationForm, min_credits: int = 12, max_credits: int = 24) -> List[str]:
    errors: List[str] = []

    if form.selected_school is None:
        errors.append("Please select a school")

    if not form.selected_courses:
        errors.append("Please select at least one course")

    if form.total_credits < min_credits:
        errors.append(f"Minimum {min_credits} credits required")
    if form.total_credits > max_credits:
        errors.append(f"Maximum {max_credits} credits allowed")

    if not form.academic_year.strip():
        errors.append("Please enter academic year")

    if has_duplicate_codes(form.selected_courses):
        errors.append("Duplicate courses selected")

    selected_codes = {c.course_code for c in form.selected_courses}
    for course in form.selected_courses:
        missing = missing_prerequisites(course, selected_codes)
        if missing:
            errors.append(f"Missing prerequisites for {course.course_name}: {', '.join(missing)}")

    return errors


def build_validation_result(form: RegistrationForm, min_credits: int, max_credits: int) -> ValidationResult:
    errors = validate_form(form, min_credits, max_credits)
    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        total_credits=form.total_credits,
        min_credits=min_credits,
        max_credits=max_credits,
        credit_status=credit_status(form.total_credits, min_credits, max_credits),
    )
