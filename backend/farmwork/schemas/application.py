import uuid
from datetime import datetime

from pydantic import BaseModel

from farmwork.models.application import ApplicationStatus


class ApplyJobData(BaseModel):
    applicant_id: str = ""
    cover_letter: str = ""
    proposed_salary: float | str | None = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: uuid.UUID
    job_id: uuid.UUID
    applicant_id: str
    status: str
    cover_letter: str
    proposed_salary: float | None
    applied_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ApplicationListResponse(BaseModel):
    applications: list[ApplicationResponse]
    total: int
