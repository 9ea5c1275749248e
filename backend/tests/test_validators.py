from datetime import date

import pytest

from farmwork.schemas.validation import FileInfo
from farmwork.services import validators as v


class TestValidateEmail:
    def test_valid(self):
        assert v.validate_email("farmer@example.co.ke").is_valid

    def test_required(self):
        result = v.validate_email("   ")
        assert not result.is_valid
        assert result.error == "Email is required"

    @pytest.mark.parametrize("email", ["farmer", "farmer@", "farmer@example", "a b@example.com", 42])
    def test_invalid_format(self, email):
        assert v.validate_email(email).error == "Please enter a valid email address"


class TestValidatePassword:
    def test_valid(self):
        assert v.validate_password("Abcdefg1").is_valid

    def test_missing_uppercase(self):
        result = v.validate_password("abcdefg1")
        assert not result.is_valid
        assert result.error == "Password must contain at least one uppercase letter"

    def test_too_short(self):
        result = v.validate_password("short1A")
        assert result.error == "Password must be at least 8 characters long"

    def test_missing_number(self):
        assert v.validate_password("Abcdefgh").error == "Password must contain at least one number"

    def test_too_long(self):
        assert not v.validate_password("Aa1" + "x" * 130).is_valid

    def test_confirmation(self):
        assert v.validate_password_confirmation("Abcdefg1", "Abcdefg1").is_valid
        assert v.validate_password_confirmation("Abcdefg1", "").error == "Please confirm your password"
        assert v.validate_password_confirmation("Abcdefg1", "Abcdefg2").error == "Passwords do not match"


class TestValidatePhoneNumber:
    @pytest.mark.parametrize("phone", ["+254712345678", "0712 345 678", "+256 (772) 123-456", "+2348012345678"])
    def test_valid_african_numbers(self, phone):
        assert v.validate_phone_number(phone).is_valid

    def test_country_specific(self):
        assert v.validate_phone_number("+254712345678", country="KE").is_valid
        result = v.validate_phone_number("+254712345678", country="UG")
        assert result.error == "Please enter a valid phone number for your country"

    def test_invalid(self):
        assert v.validate_phone_number("12345").error == "Please enter a valid African phone number"

    def test_required(self):
        assert v.validate_phone_number("").error == "Phone number is required"


class TestValidateName:
    def test_valid(self):
        assert v.validate_name("Mary-Jane O'Neil").is_valid

    def test_uses_field_name(self):
        assert v.validate_name("", "First name").error == "First name is required"
        assert v.validate_name("A", "Last name").error == "Last name must be at least 2 characters long"

    def test_rejects_digits(self):
        assert not v.validate_name("Agent 47").is_valid


class TestValidateSalary:
    def test_valid(self):
        assert v.validate_salary(800).is_valid
        assert v.validate_salary("25000").is_valid

    def test_required(self):
        assert v.validate_salary(None).error == "Salary is required"
        assert v.validate_salary("  ").error == "Salary is required"

    @pytest.mark.parametrize("salary", [0, -5, "abc", True, float("nan")])
    def test_invalid_amount(self, salary):
        assert v.validate_salary(salary).error == "Please enter a valid salary amount"

    def test_ceiling(self):
        assert v.validate_salary(10_000_000).is_valid
        assert v.validate_salary(10_000_001).error == "Salary amount seems too high"

    def test_huge_integer(self):
        assert v.validate_salary(10**400).error == "Please enter a valid salary amount"


class TestValidateWorkersNeeded:
    def test_zero(self):
        assert not v.validate_workers_needed(0).is_valid

    def test_one(self):
        assert v.validate_workers_needed(1).is_valid

    def test_too_many(self):
        result = v.validate_workers_needed(1001)
        assert result.error == "Number of workers cannot exceed 1000"

    def test_fraction(self):
        assert v.validate_workers_needed(2.5).error == "Number of workers must be a whole number"

    def test_string_number(self):
        assert v.validate_workers_needed("15").is_valid

    def test_huge_integer(self):
        assert v.validate_workers_needed(10**400).error == "Number of workers must be a whole number"


class TestValidateDates:
    def test_end_before_start(self):
        result = v.validate_end_date("2025-01-01", "2025-01-02")
        assert not result.is_valid
        assert result.error == "End date must be after start date"

    def test_end_equal_to_start(self):
        assert not v.validate_end_date("2025-01-02", "2025-01-02").is_valid

    def test_end_after_start(self):
        assert v.validate_end_date("2025-01-03", "2025-01-02").is_valid

    def test_start_in_past(self):
        result = v.validate_start_date("2025-01-01", today=date(2025, 3, 1))
        assert result.error == "Start date cannot be in the past"

    def test_start_today_is_allowed(self):
        assert v.validate_start_date("2025-03-01T06:00:00", today=date(2025, 3, 1)).is_valid

    def test_invalid_date(self):
        assert v.validate_date("not-a-date", "Start date").error == "Please enter a valid start date"

    def test_parse_datetime_normalizes_timezones(self):
        parsed = v.parse_datetime("2025-01-01T03:00:00+03:00")
        assert parsed.tzinfo is None
        assert parsed.hour == 0


class TestValidateSkills:
    def test_optional_by_default(self):
        assert v.validate_skills([]).is_valid

    def test_required(self):
        assert v.validate_skills([], required=True).error == "At least one skill is required"

    def test_too_many(self):
        assert v.validate_skills([f"skill {i}" for i in range(21)]).error == "Maximum 20 skills allowed"

    def test_blank_skill(self):
        assert v.validate_skills(["Milking", " "]).error == "Skills cannot be empty"

    def test_long_skill(self):
        assert not v.validate_skills(["x" * 51]).is_valid


class TestOptionalText:
    def test_bio_optional(self):
        assert v.validate_bio(None).is_valid
        assert v.validate_bio("").is_valid

    def test_bio_too_long(self):
        assert v.validate_bio("x" * 501).error == "Bio must not exceed 500 characters"

    def test_cover_letter_too_long(self):
        assert not v.validate_cover_letter("x" * 1501).is_valid


class TestValidateFile:
    def test_valid_image(self):
        assert v.validate_file(FileInfo(filename="cow.png", content_type="image/png", size=1024)).is_valid

    def test_too_large(self):
        info = FileInfo(filename="cow.png", content_type="image/png", size=6 * 1024 * 1024)
        assert v.validate_file(info).error == "File size is too large. Maximum size is 5MB"

    def test_wrong_type_for_document(self):
        info = FileInfo(filename="cow.png", content_type="image/png", size=10)
        assert v.validate_file(info, kind="document").error == "Please select a valid PDF, DOC, or DOCX file"

    def test_missing(self):
        assert v.validate_file(None).error == "File is required"


class TestMisc:
    def test_url(self):
        assert v.validate_url("").is_valid
        assert v.validate_url("https://farmwork.example").is_valid
        assert not v.validate_url("ftp://farmwork.example").is_valid

    def test_age(self):
        today = date(2025, 6, 1)
        assert v.validate_age("2000-01-01", today=today).is_valid
        assert v.validate_age("2010-01-01", today=today).error == "You must be at least 16 years old to register"

    def test_job_title_and_location(self):
        assert v.validate_job_title("Cook").is_valid
        assert v.validate_job_title("Ox").error == "Job title must be at least 3 characters long"
        assert v.validate_location("K").error == "Location must be at least 2 characters long"
