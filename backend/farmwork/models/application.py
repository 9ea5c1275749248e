import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field


class ApplicationStatus(StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
    SHORTLISTED = "shortlisted"
    INTERVIEW_SCHEDULED = "interview_scheduled"


class JobApplication(BaseModel):
    model_config = {"frozen": True, "from_attributes": True}

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    job_id: uuid.UUID
    applicant_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    cover_letter: str = ""
    proposed_salary: float | None = None
    applied_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
