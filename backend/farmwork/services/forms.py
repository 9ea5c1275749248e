"""Whole-form validation built from the field validators.

Every field is checked; errors come back in field declaration order and
nothing short-circuits.
"""

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel

from farmwork import constants as rules
from farmwork.models.job import JobType, SalaryType
from farmwork.models.user import UserType
from farmwork.schemas.validation import VALID, FieldResult, ValidationResult, invalid
from farmwork.services import validators as v

FormData = Mapping[str, Any] | BaseModel


def _as_dict(data: FormData) -> Mapping[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def _collect(*results: FieldResult) -> ValidationResult:
    errors = [r.error for r in results if not r.is_valid and r.error]
    return ValidationResult(is_valid=not errors, errors=errors)


def _choice(value: Any, allowed: set[str], message: str) -> FieldResult:
    if not isinstance(value, str) or value not in allowed:
        return invalid(message)
    return VALID


def validate_login_form(data: FormData) -> ValidationResult:
    data = _as_dict(data)
    password_check = VALID if data.get("password") else invalid("Password is required")
    return _collect(v.validate_email(data.get("email")), password_check)


def validate_registration_form(data: FormData) -> ValidationResult:
    data = _as_dict(data)
    user_types = {UserType.WORKER.value, UserType.EMPLOYER.value}
    return _collect(
        v.validate_name(data.get("first_name"), "First name"),
        v.validate_name(data.get("last_name"), "Last name"),
        v.validate_email(data.get("email")),
        v.validate_phone_number(data.get("phone_number")),
        v.validate_password(data.get("password")),
        v.validate_password_confirmation(data.get("password"), data.get("confirm_password")),
        _choice(data.get("user_type"), user_types, "Please select a valid user type"),
        v.validate_location(data.get("location")),
        v.validate_bio(data.get("bio")),
        v.validate_skills(data.get("skills")),
    )


def validate_job_form(
    data: FormData,
    min_description_length: int = rules.JOB_DESCRIPTION_MIN_LENGTH,
    require_skills: bool = False,
    today: date | None = None,
) -> ValidationResult:
    data = _as_dict(data)
    category = data.get("category")
    category_check = VALID if isinstance(category, str) and category.strip() else invalid("Job category is required")

    end_date = data.get("end_date")
    end_check = v.validate_end_date(end_date, data.get("start_date")) if end_date else VALID

    return _collect(
        v.validate_job_title(data.get("title")),
        v.validate_job_description(data.get("description"), min_length=min_description_length),
        category_check,
        v.validate_location(data.get("location")),
        v.validate_salary(data.get("salary")),
        _choice(data.get("salary_type"), {t.value for t in SalaryType}, "Please select a valid salary type"),
        _choice(data.get("job_type"), {t.value for t in JobType}, "Please select a valid job type"),
        v.validate_start_date(data.get("start_date"), today=today),
        end_check,
        v.validate_workers_needed(data.get("workers_needed")),
        v.validate_skills(data.get("skills"), required=require_skills),
    )


def validate_job_posting_form(data: FormData, today: date | None = None) -> ValidationResult:
    """Employer "post a job" flow: longer description and at least one skill."""
    return validate_job_form(
        data,
        min_description_length=rules.JOB_POSTING_DESCRIPTION_MIN_LENGTH,
        require_skills=True,
        today=today,
    )


def validate_application_form(data: FormData) -> ValidationResult:
    data = _as_dict(data)
    proposed = data.get("proposed_salary")
    salary_check = VALID if proposed in (None, "") else v.validate_salary(proposed)
    return _collect(v.validate_cover_letter(data.get("cover_letter")), salary_check)


FORM_VALIDATORS: dict[str, Callable[[FormData], ValidationResult]] = {
    "login": validate_login_form,
    "registration": validate_registration_form,
    "job": validate_job_form,
    "job-posting": validate_job_posting_form,
    "application": validate_application_form,
}


def validate_form(form_type: str, data: FormData) -> ValidationResult:
    try:
        validator = FORM_VALIDATORS[form_type]
    except KeyError:
        raise ValueError(f"Unknown form type: {form_type}") from None
    return validator(data)
