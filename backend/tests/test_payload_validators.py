from farmwork.schemas.validation import FileInfo
from farmwork.services import payload_validators as pv

VALID_JOB = {
    "title": "Dairy Farm Assistant",
    "description": "Help with milking and feeding dairy cows.",
    "category": "Dairy Farming",
    "location": "Nakuru, Kenya",
    "salary": 25000,
    "salary_type": "monthly",
    "job_type": "permanent",
    "start_date": "2025-07-15",
    "workers_needed": 2,
    "skills": ["Milking"],
}


class TestFieldValidators:
    def test_email_collects_every_problem(self):
        result = pv.validate_email("x" * 260)
        assert result.messages == ["Invalid email format", "Email is too long"]

    def test_salary_ceiling_differs_from_form(self):
        assert pv.validate_salary(1_000_000).is_valid
        assert pv.validate_salary(1_000_001).messages == ["Salary amount is too high"]

    def test_salary_zero_allowed_negative_rejected(self):
        assert pv.validate_salary(0).is_valid
        assert pv.validate_salary(-1).messages == ["Salary cannot be negative"]

    def test_salary_not_a_number(self):
        assert pv.validate_salary("lots").messages == ["Salary must be a valid number"]
        assert pv.validate_salary(10**400).messages == ["Salary must be a valid number"]

    def test_workers_needed(self):
        assert pv.validate_workers_needed(0).messages == ["Number of workers needed is required"]
        assert pv.validate_workers_needed(-3).messages == ["Number of workers must be greater than 0"]
        assert pv.validate_workers_needed(1001).messages == ["Number of workers cannot exceed 1000"]
        assert pv.validate_workers_needed("1.5").messages == ["Number of workers must be a valid integer"]
        assert pv.validate_workers_needed(10**400).messages == ["Number of workers must be a valid integer"]

    def test_enum_checks(self):
        assert pv.validate_job_type("seasonal").is_valid
        assert pv.validate_job_status("paused").is_valid
        assert pv.validate_application_status("shortlisted").is_valid
        assert pv.validate_job_category("Beekeeping").is_valid
        result = pv.validate_salary_type("hourly")
        assert not result.is_valid
        assert result.messages[0].startswith("Invalid salary type. Must be one of:")

    def test_enum_check_ignores_unhashable_values(self):
        assert not pv.validate_user_type(["worker"]).is_valid

    def test_password_length_only(self):
        assert pv.validate_password("abcdefgh").is_valid
        assert pv.validate_password("abc").messages == ["Password must be at least 8 characters long"]

    def test_phone_loose_pattern(self):
        assert pv.validate_phone_number("+254 712 345 678").is_valid
        assert pv.validate_phone_number("12ab").messages == ["Invalid phone number format"]

    def test_skills(self):
        assert pv.validate_skills("Milking").messages == ["Skills must be an array"]
        assert pv.validate_skills(["Milking", 3]).messages == ["All skills must be strings"]

    def test_file_upload(self):
        info = FileInfo(filename="cv.exe", content_type="application/x-msdownload", size=6 * 1024 * 1024)
        result = pv.validate_file_upload(info, kind="document")
        assert len(result.messages) == 2
        assert result.messages[0] == "File size must be less than 5MB"


class TestCompoundValidators:
    def test_valid_job_posting(self):
        assert pv.validate_job_posting(VALID_JOB).is_valid

    def test_job_posting_reports_all_problems(self):
        result = pv.validate_job_posting({**VALID_JOB, "title": "", "salary": -5, "category": "Mining"})
        assert "Job title is required" in result.messages
        assert "Salary cannot be negative" in result.messages
        assert any(m.startswith("Invalid job category") for m in result.messages)

    def test_job_posting_end_after_start(self):
        result = pv.validate_job_posting({**VALID_JOB, "end_date": "2025-07-01"})
        assert result.messages == ["End date must be after start date"]

    def test_user_registration(self):
        data = {
            "first_name": "Wanjiku",
            "last_name": "Kamau",
            "email": "wanjiku@example.com",
            "password": "password1",
            "phone_number": "+254712345678",
            "user_type": "worker",
            "location": "Nakuru",
        }
        assert pv.validate_user_registration(data).is_valid
        result = pv.validate_user_registration({**data, "user_type": "farmer", "email": ""})
        assert "Email is required" in result.messages
        assert len(result.messages) == 2

    def test_job_application(self):
        result = pv.validate_job_application({})
        assert result.messages == ["Job ID is required", "Applicant ID is required"]

        result = pv.validate_job_application(
            {"job_id": "1", "applicant_id": "2", "cover_letter": "x" * 1501, "proposed_salary": -1}
        )
        assert result.messages == [
            "Cover letter must be less than 1500 characters long",
            "Salary cannot be negative",
        ]
