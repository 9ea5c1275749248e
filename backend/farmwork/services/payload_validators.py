"""Validators for API payloads.

Unlike the form validators these collect every problem with a field, and they
enforce the payload salary ceiling (``PAYLOAD_SALARY_CEILING``) rather than
the form one.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from farmwork import constants as rules
from farmwork.models.application import ApplicationStatus
from farmwork.models.job import JobStatus, JobType, SalaryType
from farmwork.models.user import UserType
from farmwork.schemas.validation import FileInfo, PayloadResult
from farmwork.services.validators import parse_datetime


def _result(messages: list[str]) -> PayloadResult:
    return PayloadResult(is_valid=not messages, messages=messages)


def _combine(results: Iterable[PayloadResult]) -> PayloadResult:
    messages = []
    for result in results:
        messages.extend(result.messages)
    return _result(messages)


def _enum_check(value: Any, allowed: Iterable[str], label: str) -> PayloadResult:
    if not value:
        return _result([f"{label} is required"])
    allowed = list(allowed)
    if not isinstance(value, str) or value not in allowed:
        return _result([f"Invalid {label.lower()}. Must be one of: {', '.join(allowed)}"])
    return _result([])


def validate_email(email: Any) -> PayloadResult:
    if not email:
        return _result(["Email is required"])
    if not isinstance(email, str):
        return _result(["Email must be a string"])

    messages = []
    if not rules.EMAIL_PATTERN.match(email):
        messages.append("Invalid email format")
    if len(email) > rules.EMAIL_MAX_LENGTH:
        messages.append("Email is too long")
    return _result(messages)


def validate_name(name: Any, field_name: str = "Name") -> PayloadResult:
    if not name:
        return _result([f"{field_name} is required"])
    if not isinstance(name, str):
        return _result([f"{field_name} must be a string"])

    trimmed = name.strip()
    messages = []
    if len(trimmed) < rules.NAME_MIN_LENGTH:
        messages.append(f"{field_name} must be at least {rules.NAME_MIN_LENGTH} characters long")
    if len(trimmed) > rules.NAME_MAX_LENGTH:
        messages.append(f"{field_name} must be less than {rules.NAME_MAX_LENGTH} characters long")
    if not rules.NAME_PATTERN.match(trimmed):
        messages.append(f"{field_name} can only contain letters, spaces, hyphens, and apostrophes")
    return _result(messages)


def validate_phone_number(phone_number: Any) -> PayloadResult:
    if not phone_number:
        return _result(["Phone number is required"])
    if not isinstance(phone_number, str):
        return _result(["Phone number must be a string"])
    if not rules.PAYLOAD_PHONE_PATTERN.match(phone_number):
        return _result(["Invalid phone number format"])
    return _result([])


def validate_password(password: Any) -> PayloadResult:
    if not password:
        return _result(["Password is required"])
    if not isinstance(password, str):
        return _result(["Password must be a string"])

    messages = []
    if len(password) < rules.PASSWORD_MIN_LENGTH:
        messages.append(f"Password must be at least {rules.PASSWORD_MIN_LENGTH} characters long")
    if len(password) > rules.PASSWORD_MAX_LENGTH:
        messages.append(f"Password must be less than {rules.PASSWORD_MAX_LENGTH} characters long")
    return _result(messages)


def validate_user_type(user_type: Any) -> PayloadResult:
    return _enum_check(user_type, (t.value for t in UserType), "User type")


def validate_job_title(title: Any) -> PayloadResult:
    if not title:
        return _result(["Job title is required"])
    if not isinstance(title, str):
        return _result(["Job title must be a string"])

    trimmed = title.strip()
    messages = []
    if len(trimmed) < rules.JOB_TITLE_MIN_LENGTH:
        messages.append(f"Job title must be at least {rules.JOB_TITLE_MIN_LENGTH} characters long")
    if len(trimmed) > rules.JOB_TITLE_MAX_LENGTH:
        messages.append(f"Job title must be less than {rules.JOB_TITLE_MAX_LENGTH} characters long")
    return _result(messages)


def validate_job_description(description: Any) -> PayloadResult:
    if not description:
        return _result(["Job description is required"])
    if not isinstance(description, str):
        return _result(["Job description must be a string"])

    trimmed = description.strip()
    messages = []
    if len(trimmed) < rules.JOB_DESCRIPTION_MIN_LENGTH:
        messages.append(f"Job description must be at least {rules.JOB_DESCRIPTION_MIN_LENGTH} characters long")
    if len(trimmed) > rules.JOB_DESCRIPTION_MAX_LENGTH:
        messages.append(f"Job description must be less than {rules.JOB_DESCRIPTION_MAX_LENGTH} characters long")
    return _result(messages)


def validate_job_category(category: Any) -> PayloadResult:
    return _enum_check(category, rules.JOB_CATEGORIES, "Job category")


def validate_job_type(job_type: Any) -> PayloadResult:
    return _enum_check(job_type, (t.value for t in JobType), "Job type")


def validate_salary_type(salary_type: Any) -> PayloadResult:
    return _enum_check(salary_type, (t.value for t in SalaryType), "Salary type")


def validate_job_status(status: Any) -> PayloadResult:
    return _enum_check(status, (s.value for s in JobStatus), "Job status")


def validate_application_status(status: Any) -> PayloadResult:
    return _enum_check(status, (s.value for s in ApplicationStatus), "Application status")


def validate_salary(salary: Any) -> PayloadResult:
    if salary is None:
        return _result(["Salary is required"])
    if isinstance(salary, bool):
        return _result(["Salary must be a valid number"])
    try:
        amount = float(salary)
    except (TypeError, ValueError, OverflowError):
        return _result(["Salary must be a valid number"])
    if amount != amount:  # NaN
        return _result(["Salary must be a valid number"])

    messages = []
    if amount < 0:
        messages.append("Salary cannot be negative")
    if amount > rules.PAYLOAD_SALARY_CEILING:
        messages.append("Salary amount is too high")
    return _result(messages)


def validate_location(location: Any) -> PayloadResult:
    if not location:
        return _result(["Location is required"])
    if not isinstance(location, str):
        return _result(["Location must be a string"])

    trimmed = location.strip()
    messages = []
    if len(trimmed) < rules.LOCATION_MIN_LENGTH:
        messages.append(f"Location must be at least {rules.LOCATION_MIN_LENGTH} characters long")
    if len(trimmed) > rules.LOCATION_MAX_LENGTH:
        messages.append(f"Location must be less than {rules.LOCATION_MAX_LENGTH} characters long")
    return _result(messages)


def validate_bio(bio: Any) -> PayloadResult:
    if not bio:
        return _result([])
    if not isinstance(bio, str):
        return _result(["Bio must be a string"])
    if len(bio.strip()) > rules.BIO_MAX_LENGTH:
        return _result([f"Bio must be less than {rules.BIO_MAX_LENGTH} characters long"])
    return _result([])


def validate_cover_letter(cover_letter: Any) -> PayloadResult:
    if not cover_letter:
        return _result([])
    if not isinstance(cover_letter, str):
        return _result(["Cover letter must be a string"])
    if len(cover_letter.strip()) > rules.COVER_LETTER_MAX_LENGTH:
        return _result([f"Cover letter must be less than {rules.COVER_LETTER_MAX_LENGTH} characters long"])
    return _result([])


def validate_date(value: Any, field_name: str = "Date") -> PayloadResult:
    if not value:
        return _result([f"{field_name} is required"])
    if parse_datetime(value) is None:
        return _result([f"{field_name} must be a valid date"])
    return _result([])


def validate_workers_needed(workers_needed: Any) -> PayloadResult:
    if not workers_needed:
        return _result(["Number of workers needed is required"])
    if isinstance(workers_needed, bool):
        return _result(["Number of workers must be a valid integer"])
    try:
        number = float(workers_needed)
    except (TypeError, ValueError, OverflowError):
        return _result(["Number of workers must be a valid integer"])
    if not number.is_integer():
        return _result(["Number of workers must be a valid integer"])

    messages = []
    if number <= 0:
        messages.append("Number of workers must be greater than 0")
    if number > rules.MAX_WORKERS:
        messages.append(f"Number of workers cannot exceed {rules.MAX_WORKERS}")
    return _result(messages)


def validate_skills(skills: Any) -> PayloadResult:
    if not skills:
        return _result([])
    if not isinstance(skills, (list, tuple)):
        return _result(["Skills must be an array"])

    messages = []
    if len(skills) > rules.MAX_SKILLS:
        messages.append(f"Maximum of {rules.MAX_SKILLS} skills allowed")

    # Only the first offending skill is reported
    for skill in skills:
        if not isinstance(skill, str):
            messages.append("All skills must be strings")
            break
        if not skill.strip():
            messages.append("Skills cannot be empty")
            break
        if len(skill.strip()) > rules.SKILL_MAX_LENGTH:
            messages.append(f"Each skill must be less than {rules.SKILL_MAX_LENGTH} characters long")
            break
    return _result(messages)


def validate_file_upload(file: FileInfo | None, kind: str = "image") -> PayloadResult:
    if file is None:
        return _result(["File is required"])

    messages = []
    if file.size > rules.MAX_FILE_SIZE:
        messages.append(f"File size must be less than {rules.MAX_FILE_SIZE // 1024 // 1024}MB")

    allowed = rules.ALLOWED_IMAGE_TYPES if kind == "image" else rules.ALLOWED_DOCUMENT_TYPES
    if file.content_type not in allowed:
        messages.append(f"Invalid file type. Allowed types: {', '.join(allowed)}")
    return _result(messages)


def validate_user_registration(data: Mapping[str, Any]) -> PayloadResult:
    results = [
        validate_name(data.get("first_name"), "First name"),
        validate_name(data.get("last_name"), "Last name"),
        validate_email(data.get("email")),
        validate_password(data.get("password")),
        validate_phone_number(data.get("phone_number")),
        validate_user_type(data.get("user_type")),
        validate_location(data.get("location")),
    ]
    if data.get("bio"):
        results.append(validate_bio(data["bio"]))
    if data.get("skills"):
        results.append(validate_skills(data["skills"]))
    return _combine(results)


def validate_job_posting(data: Mapping[str, Any]) -> PayloadResult:
    results = [
        validate_job_title(data.get("title")),
        validate_job_description(data.get("description")),
        validate_job_category(data.get("category")),
        validate_location(data.get("location")),
        validate_salary(data.get("salary")),
        validate_salary_type(data.get("salary_type")),
        validate_job_type(data.get("job_type")),
        validate_workers_needed(data.get("workers_needed")),
    ]

    start_date, end_date = data.get("start_date"), data.get("end_date")
    if start_date:
        results.append(validate_date(start_date, "Start date"))
    if end_date:
        results.append(validate_date(end_date, "End date"))
        start, end = parse_datetime(start_date), parse_datetime(end_date)
        if start is not None and end is not None and end <= start:
            results.append(_result(["End date must be after start date"]))

    if data.get("skills"):
        results.append(validate_skills(data["skills"]))
    return _combine(results)


def validate_job_application(data: Mapping[str, Any]) -> PayloadResult:
    messages = []
    if not data.get("job_id"):
        messages.append("Job ID is required")
    if not data.get("applicant_id"):
        messages.append("Applicant ID is required")

    results = [_result(messages)]
    if data.get("cover_letter"):
        results.append(validate_cover_letter(data["cover_letter"]))
    if data.get("proposed_salary") is not None:
        results.append(validate_salary(data["proposed_salary"]))
    return _combine(results)
