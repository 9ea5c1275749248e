import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from farmwork.models.job import JobRecord, JobType, SalaryType
from farmwork.models.user import User, UserType

BASE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_job(**overrides) -> JobRecord:
    data = {
        "title": "Farm Hand",
        "description": "General farm work including planting and weeding.",
        "category": "Crop Production",
        "location": "Nakuru, Kenya",
        "salary": 1000,
        "salary_type": SalaryType.DAILY,
        "job_type": JobType.TEMPORARY,
        "start_date": date(2025, 7, 1),
        "workers_needed": 3,
        "skills": ["Planting", "Weeding"],
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(overrides)
    return JobRecord(**data)


@pytest.fixture
def make_job():
    return build_job


@pytest.fixture
def sample_jobs():
    return [
        build_job(
            title="Dairy Farm Assistant",
            description="Help with milking and feeding dairy cows every morning.",
            category="Dairy Farming",
            location="Nakuru, Kenya",
            salary=25000,
            salary_type=SalaryType.MONTHLY,
            job_type=JobType.PERMANENT,
            skills=["Milking", "Animal Care"],
            created_at=BASE_TIME - timedelta(hours=1),
        ),
        build_job(
            title="Seasonal Maize Harvesters",
            description="Join our harvest team for the maize season.",
            category="Crop Production",
            location="Kitale, Kenya",
            salary=800,
            job_type=JobType.SEASONAL,
            skills=["Harvesting", "Equipment Operation"],
            is_boosted=True,
            created_at=BASE_TIME - timedelta(hours=3),
        ),
        build_job(
            title="Greenhouse Technician",
            description="Manage tomato production using hydroponic systems.",
            category="Greenhouse Management",
            location="Eldoret, Kenya",
            salary=35000,
            salary_type=SalaryType.MONTHLY,
            job_type=JobType.PERMANENT,
            skills=["Hydroponics", "Pest Control"],
            created_at=BASE_TIME,
        ),
        build_job(
            title="Weekend Farm Workers",
            description="Weekend weeding and light harvesting tasks.",
            location="Kiambu, Kenya",
            salary=600,
            skills=["Weeding", "Harvesting"],
            created_at=BASE_TIME - timedelta(hours=2),
        ),
    ]


@pytest.fixture
def sample_user():
    return User(
        id=str(uuid.uuid4()),
        email="wanjiku@example.com",
        first_name="Wanjiku",
        last_name="Kamau",
        phone_number="+254712345678",
        location="Nakuru, Kenya",
        user_type=UserType.WORKER,
        skills=["Harvesting", "Milking"],
    )
