from datetime import date

import pytest

from farmwork.schemas.auth import LoginCredentials, RegisterData
from farmwork.services.forms import (
    validate_application_form,
    validate_form,
    validate_job_form,
    validate_job_posting_form,
    validate_login_form,
    validate_registration_form,
)

TODAY = date(2025, 6, 1)

JOB_FORM = {
    "title": "Greenhouse Technician",
    "description": "Manage tomato and cucumber production in our greenhouses. Hydroponics a plus.",
    "category": "Greenhouse Management",
    "location": "Eldoret, Kenya",
    "salary": "35000",
    "salary_type": "monthly",
    "job_type": "permanent",
    "start_date": "2025-08-01",
    "workers_needed": "1",
    "skills": ["Hydroponics"],
}


@pytest.fixture
def registration():
    return RegisterData(
        first_name="Wanjiku",
        last_name="Kamau",
        email="wanjiku@example.com",
        password="Harvest2025",
        confirm_password="Harvest2025",
        phone_number="+254712345678",
        location="Nakuru, Kenya",
        user_type="worker",
    )


class TestLoginForm:
    def test_empty_form_reports_both_fields(self):
        result = validate_login_form({"email": "", "password": ""})
        assert result.is_valid is False
        assert result.errors == ["Email is required", "Password is required"]

    def test_accepts_model(self):
        result = validate_login_form(LoginCredentials(email="a@b.co", password="anything"))
        assert result.is_valid
        assert result.errors == []


class TestRegistrationForm:
    def test_valid(self, registration):
        assert validate_registration_form(registration).is_valid

    def test_does_not_short_circuit(self, registration):
        data = registration.model_dump() | {"first_name": "", "confirm_password": "nope", "user_type": "admin"}
        result = validate_registration_form(data)
        assert result.errors == [
            "First name is required",
            "Passwords do not match",
            "Please select a valid user type",
        ]


class TestJobForms:
    def test_valid_job(self):
        assert validate_job_form(JOB_FORM, today=TODAY).is_valid

    def test_errors_in_field_order(self):
        data = {**JOB_FORM, "title": "", "workers_needed": 0, "start_date": "2025-01-01"}
        result = validate_job_form(data, today=TODAY)
        assert result.errors == [
            "Job title is required",
            "Start date cannot be in the past",
            "Number of workers must be at least 1",
        ]

    def test_end_date_checked_only_when_present(self):
        assert validate_job_form({**JOB_FORM, "end_date": ""}, today=TODAY).is_valid
        result = validate_job_form({**JOB_FORM, "end_date": "2025-07-01"}, today=TODAY)
        assert result.errors == ["End date must be after start date"]

    def test_posting_needs_longer_description_and_skills(self):
        data = {**JOB_FORM, "description": "Short but over ten chars.", "skills": []}
        assert validate_job_form(data, today=TODAY).is_valid
        result = validate_job_posting_form(data, today=TODAY)
        assert result.errors == [
            "Job description must be at least 50 characters long",
            "At least one skill is required",
        ]


class TestApplicationForm:
    def test_empty_is_valid(self):
        assert validate_application_form({}).is_valid

    def test_bad_salary(self):
        assert validate_application_form({"proposed_salary": "free"}).errors == ["Please enter a valid salary amount"]


class TestValidateForm:
    def test_dispatches_by_type(self):
        assert validate_form("login", {}).errors == ["Email is required", "Password is required"]

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            validate_form("survey", {})
