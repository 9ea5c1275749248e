"""Field validators used by the FarmWork forms.

Each validator checks one field and returns a :class:`FieldResult` carrying
the first problem found. Validators never raise; bad input of any type is
reported as an invalid result.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import urlparse

from farmwork import constants as rules
from farmwork.schemas.validation import VALID, FieldResult, FileInfo, invalid


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO date/datetime string, ``date`` or ``datetime``.

    Aware values are converted to naive UTC so they compare with plain dates.
    Returns None when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def validate_email(email: Any) -> FieldResult:
    if _is_blank(email):
        return invalid("Email is required")
    if not isinstance(email, str) or not rules.EMAIL_PATTERN.match(email):
        return invalid("Please enter a valid email address")
    return VALID


def validate_password(password: Any) -> FieldResult:
    if not password:
        return invalid("Password is required")
    if not isinstance(password, str):
        return invalid("Password must be text")
    if len(password) < rules.PASSWORD_MIN_LENGTH:
        return invalid(f"Password must be at least {rules.PASSWORD_MIN_LENGTH} characters long")
    if len(password) > rules.PASSWORD_MAX_LENGTH:
        return invalid(f"Password must not exceed {rules.PASSWORD_MAX_LENGTH} characters")
    if not re.search(r"[A-Z]", password):
        return invalid("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        return invalid("Password must contain at least one lowercase letter")
    if not re.search(r"\d", password):
        return invalid("Password must contain at least one number")
    return VALID


def validate_password_confirmation(password: Any, confirm_password: Any) -> FieldResult:
    if not confirm_password:
        return invalid("Please confirm your password")
    if password != confirm_password:
        return invalid("Passwords do not match")
    return VALID


def validate_phone_number(phone_number: Any, country: str | None = None) -> FieldResult:
    """Validate an African phone number.

    With a known ``country`` code only that country's pattern is accepted,
    otherwise any country pattern or the generic one will do.
    """
    if _is_blank(phone_number):
        return invalid("Phone number is required")
    if not isinstance(phone_number, str):
        return invalid("Please enter a valid African phone number")

    clean_number = re.sub(r"[\s\-()]", "", phone_number)

    if country and country in rules.PHONE_PATTERNS:
        if not rules.PHONE_PATTERNS[country].match(clean_number):
            return invalid("Please enter a valid phone number for your country")
        return VALID

    if not any(pattern.match(clean_number) for pattern in rules.PHONE_PATTERNS.values()):
        return invalid("Please enter a valid African phone number")
    return VALID


def validate_name(name: Any, field_name: str = "Name") -> FieldResult:
    if _is_blank(name) or not isinstance(name, str):
        return invalid(f"{field_name} is required")

    trimmed = name.strip()
    if len(trimmed) < rules.NAME_MIN_LENGTH:
        return invalid(f"{field_name} must be at least {rules.NAME_MIN_LENGTH} characters long")
    if len(trimmed) > rules.NAME_MAX_LENGTH:
        return invalid(f"{field_name} must not exceed {rules.NAME_MAX_LENGTH} characters")
    if not rules.NAME_PATTERN.match(trimmed):
        return invalid(f"{field_name} can only contain letters, spaces, hyphens, and apostrophes")
    return VALID


def _validate_optional_text(value: Any, label: str, max_length: int) -> FieldResult:
    if _is_blank(value):
        return VALID
    if not isinstance(value, str):
        return invalid(f"{label} must be text")
    if len(value.strip()) > max_length:
        return invalid(f"{label} must not exceed {max_length} characters")
    return VALID


def validate_bio(bio: Any) -> FieldResult:
    return _validate_optional_text(bio, "Bio", rules.BIO_MAX_LENGTH)


def validate_cover_letter(cover_letter: Any) -> FieldResult:
    return _validate_optional_text(cover_letter, "Cover letter", rules.COVER_LETTER_MAX_LENGTH)


def validate_job_title(title: Any) -> FieldResult:
    if _is_blank(title) or not isinstance(title, str):
        return invalid("Job title is required")

    trimmed = title.strip()
    if len(trimmed) < rules.JOB_TITLE_MIN_LENGTH:
        return invalid(f"Job title must be at least {rules.JOB_TITLE_MIN_LENGTH} characters long")
    if len(trimmed) > rules.JOB_TITLE_MAX_LENGTH:
        return invalid(f"Job title must not exceed {rules.JOB_TITLE_MAX_LENGTH} characters")
    return VALID


def validate_job_description(description: Any, min_length: int = rules.JOB_DESCRIPTION_MIN_LENGTH) -> FieldResult:
    if _is_blank(description) or not isinstance(description, str):
        return invalid("Job description is required")

    trimmed = description.strip()
    if len(trimmed) < min_length:
        return invalid(f"Job description must be at least {min_length} characters long")
    if len(trimmed) > rules.JOB_DESCRIPTION_MAX_LENGTH:
        return invalid(f"Job description must not exceed {rules.JOB_DESCRIPTION_MAX_LENGTH} characters")
    return VALID


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_salary(salary: Any, ceiling: float = rules.FORM_SALARY_CEILING) -> FieldResult:
    if salary is None or (isinstance(salary, str) and not salary.strip()):
        return invalid("Salary is required")

    amount = _to_number(salary)
    if amount is None or amount <= 0:
        return invalid("Please enter a valid salary amount")
    if amount > ceiling:
        return invalid("Salary amount seems too high")
    return VALID


def validate_workers_needed(workers_needed: Any) -> FieldResult:
    if workers_needed is None or (isinstance(workers_needed, str) and not workers_needed.strip()):
        return invalid("Number of workers needed is required")

    number = _to_number(workers_needed)
    if number is None or not number.is_integer():
        return invalid("Number of workers must be a whole number")
    if number < rules.MIN_WORKERS:
        return invalid(f"Number of workers must be at least {rules.MIN_WORKERS}")
    if number > rules.MAX_WORKERS:
        return invalid(f"Number of workers cannot exceed {rules.MAX_WORKERS}")
    return VALID


def validate_date(value: Any, field_name: str = "Date") -> FieldResult:
    if _is_blank(value):
        return invalid(f"{field_name} is required")
    if parse_datetime(value) is None:
        return invalid(f"Please enter a valid {field_name.lower()}")
    return VALID


def validate_start_date(start_date: Any, today: date | None = None) -> FieldResult:
    """Start date must be today or later; time of day is ignored."""
    result = validate_date(start_date, "Start date")
    if not result.is_valid:
        return result

    today = today or date.today()
    if parse_datetime(start_date).date() < today:
        return invalid("Start date cannot be in the past")
    return VALID


def validate_end_date(end_date: Any, start_date: Any) -> FieldResult:
    result = validate_date(end_date, "End date")
    if not result.is_valid:
        return result

    start = parse_datetime(start_date)
    if start is not None and parse_datetime(end_date) <= start:
        return invalid("End date must be after start date")
    return VALID


def validate_location(location: Any) -> FieldResult:
    if _is_blank(location) or not isinstance(location, str):
        return invalid("Location is required")

    trimmed = location.strip()
    if len(trimmed) < rules.LOCATION_MIN_LENGTH:
        return invalid(f"Location must be at least {rules.LOCATION_MIN_LENGTH} characters long")
    if len(trimmed) > rules.LOCATION_MAX_LENGTH:
        return invalid(f"Location must not exceed {rules.LOCATION_MAX_LENGTH} characters")
    return VALID


def validate_skills(skills: Any, required: bool = False) -> FieldResult:
    if not skills:
        if required:
            return invalid("At least one skill is required")
        return VALID
    if not isinstance(skills, (list, tuple)):
        return invalid("Skills must be a list")
    if len(skills) > rules.MAX_SKILLS:
        return invalid(f"Maximum {rules.MAX_SKILLS} skills allowed")

    for skill in skills:
        if _is_blank(skill) or not isinstance(skill, str):
            return invalid("Skills cannot be empty")
        if len(skill.strip()) > rules.SKILL_MAX_LENGTH:
            return invalid(f"Each skill must not exceed {rules.SKILL_MAX_LENGTH} characters")
    return VALID


def validate_file(file: FileInfo | None, kind: str = "image") -> FieldResult:
    """Check an upload's size and MIME type; ``kind`` is "image" or "document"."""
    if file is None:
        return invalid("File is required")
    if file.size > rules.MAX_FILE_SIZE:
        return invalid("File size is too large. Maximum size is 5MB")

    if kind == "image":
        allowed, type_names = rules.ALLOWED_IMAGE_TYPES, "JPEG, PNG, or WebP"
    else:
        allowed, type_names = rules.ALLOWED_DOCUMENT_TYPES, "PDF, DOC, or DOCX"

    if file.content_type not in allowed:
        return invalid(f"Please select a valid {type_names} file")
    return VALID


def validate_url(url: Any) -> FieldResult:
    if _is_blank(url):
        return VALID
    parsed = urlparse(str(url).strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return invalid("Please enter a valid URL")
    return VALID


def validate_age(birth_date: Any, today: date | None = None) -> FieldResult:
    if _is_blank(birth_date):
        return invalid("Birth date is required")
    born = parse_datetime(birth_date)
    if born is None:
        return invalid("Please enter a valid birth date")

    today = today or date.today()
    age = today.year - born.year - ((today.month, today.day) < (born.month, born.day))
    if age < rules.MIN_AGE:
        return invalid(f"You must be at least {rules.MIN_AGE} years old to register")
    if age > rules.MAX_AGE:
        return invalid("Please enter a valid birth date")
    return VALID
