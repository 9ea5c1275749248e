import uuid
from datetime import date, datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SalaryType(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    FIXED = "fixed"
    SEASONAL = "seasonal"
    PIECE_RATE = "piece_rate"


class JobType(StrEnum):
    TEMPORARY = "temporary"
    SEASONAL = "seasonal"
    PERMANENT = "permanent"
    PART_TIME = "partTime"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    VOLUNTEER = "volunteer"


class JobStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    FILLED = "filled"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    PAUSED = "paused"


# Terminal statuses have no outgoing transitions
JOB_STATUS_TRANSITIONS: dict[JobStatus, frozenset[JobStatus]] = {
    JobStatus.DRAFT: frozenset({JobStatus.ACTIVE, JobStatus.CANCELLED}),
    JobStatus.ACTIVE: frozenset({JobStatus.FILLED, JobStatus.EXPIRED, JobStatus.CANCELLED, JobStatus.PAUSED}),
    JobStatus.PAUSED: frozenset({JobStatus.ACTIVE, JobStatus.CANCELLED, JobStatus.EXPIRED}),
    JobStatus.FILLED: frozenset(),
    JobStatus.EXPIRED: frozenset(),
    JobStatus.CANCELLED: frozenset(),
}


class JobRecord(BaseModel):
    model_config = {"frozen": True, "from_attributes": True}

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    description: str
    category: str
    location: str
    salary: float = Field(ge=0)
    salary_type: SalaryType
    job_type: JobType
    start_date: date
    end_date: date | None = None
    workers_needed: int = Field(default=1, ge=1, le=1000)
    skills: list[str] = Field(default_factory=list, max_length=20)
    requirements: str = ""
    employer_id: uuid.UUID | None = None
    status: JobStatus = JobStatus.ACTIVE
    is_boosted: bool = False
    applications_count: int = 0
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def _end_after_start(self) -> "JobRecord":
        if self.end_date is not None and self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    def can_transition_to(self, status: JobStatus) -> bool:
        return status in JOB_STATUS_TRANSITIONS[self.status]

    def __repr__(self) -> str:
        return f"<JobRecord {self.title} @ {self.location}>"
