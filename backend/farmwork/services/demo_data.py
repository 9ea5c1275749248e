"""Sample jobs used to seed the in-memory repositories in development."""

import uuid
from datetime import date, datetime, timedelta, timezone

from farmwork.models.job import JobRecord, JobType, SalaryType
from farmwork.services.repository import ApplicationRepository, JobRepository

EMPLOYER_IDS = (
    uuid.UUID("8f1c2a7e-4b8d-4a51-9d3e-1f0b6c2d9a01"),
    uuid.UUID("8f1c2a7e-4b8d-4a51-9d3e-1f0b6c2d9a02"),
    uuid.UUID("8f1c2a7e-4b8d-4a51-9d3e-1f0b6c2d9a03"),
)

DEMO_JOBS = [
    {
        "title": "Experienced Farm Manager Needed",
        "description": (
            "We are looking for an experienced farm manager to oversee our 100-acre mixed farm. "
            "Responsibilities include managing day-to-day operations, supervising workers, and "
            "ensuring optimal crop and livestock production."
        ),
        "category": "Farm Management",
        "location": "Nakuru, Kenya",
        "salary": 45000,
        "salary_type": SalaryType.MONTHLY,
        "job_type": JobType.PERMANENT,
        "start_date": date(2025, 8, 1),
        "workers_needed": 1,
        "skills": ["Farm Management", "Leadership", "Crop Production", "Livestock Management"],
        "requirements": "Minimum 5 years experience in farm management, diploma in agriculture or related field.",
        "employer_id": EMPLOYER_IDS[0],
    },
    {
        "title": "Seasonal Maize Harvesters",
        "description": (
            "Join our harvest team for the upcoming maize season. We need skilled harvesters who "
            "can work efficiently and handle harvesting equipment."
        ),
        "category": "Crop Production",
        "location": "Kitale, Kenya",
        "salary": 800,
        "salary_type": SalaryType.DAILY,
        "job_type": JobType.SEASONAL,
        "start_date": date(2025, 9, 15),
        "end_date": date(2025, 11, 30),
        "workers_needed": 15,
        "skills": ["Harvesting", "Equipment Operation", "Physical Fitness"],
        "requirements": "Previous harvesting experience preferred.",
        "employer_id": EMPLOYER_IDS[2],
        "is_boosted": True,
    },
    {
        "title": "Dairy Farm Assistant",
        "description": (
            "Looking for a reliable dairy farm assistant to help with milking, feeding, and general "
            "care of dairy cows. Early morning shifts required."
        ),
        "category": "Dairy Farming",
        "location": "Nakuru, Kenya",
        "salary": 25000,
        "salary_type": SalaryType.MONTHLY,
        "job_type": JobType.PERMANENT,
        "start_date": date(2025, 7, 15),
        "workers_needed": 2,
        "skills": ["Dairy Farming", "Animal Care", "Milking"],
        "requirements": "Experience with dairy cattle, available for early morning shifts.",
        "employer_id": EMPLOYER_IDS[0],
    },
    {
        "title": "Greenhouse Technician",
        "description": (
            "We need a skilled greenhouse technician to manage our tomato and cucumber production. "
            "Knowledge of hydroponic systems is a plus."
        ),
        "category": "Greenhouse Management",
        "location": "Eldoret, Kenya",
        "salary": 35000,
        "salary_type": SalaryType.MONTHLY,
        "job_type": JobType.PERMANENT,
        "start_date": date(2025, 8, 1),
        "workers_needed": 1,
        "skills": ["Greenhouse Management", "Hydroponics", "Pest Control", "Climate Control"],
        "requirements": "Certificate in horticulture or related field, 2+ years greenhouse experience.",
        "employer_id": EMPLOYER_IDS[1],
    },
    {
        "title": "Weekend Farm Workers",
        "description": "Part-time weekend work available for general farm maintenance, weeding, and light harvesting tasks.",
        "category": "Crop Production",
        "location": "Kiambu, Kenya",
        "salary": 600,
        "salary_type": SalaryType.DAILY,
        "job_type": JobType.TEMPORARY,
        "start_date": date(2025, 7, 12),
        "end_date": date(2025, 12, 31),
        "workers_needed": 5,
        "skills": ["General Farm Work", "Weeding", "Harvesting"],
        "requirements": "No previous experience required, available on weekends.",
        "employer_id": EMPLOYER_IDS[1],
    },
]


def build_demo_jobs(now: datetime | None = None) -> list[JobRecord]:
    """Demo jobs, newest first, one hour apart."""
    now = now or datetime.now(timezone.utc)
    jobs = []
    for i, data in enumerate(DEMO_JOBS):
        created_at = now - timedelta(hours=i)
        jobs.append(JobRecord(**data, created_at=created_at, updated_at=created_at))
    return jobs


def seed_repositories() -> tuple[JobRepository, ApplicationRepository]:
    jobs = JobRepository(build_demo_jobs())
    return jobs, ApplicationRepository(jobs)
