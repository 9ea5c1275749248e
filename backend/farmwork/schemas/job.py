import uuid
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from farmwork.constants import DEFAULT_PAGE_SIZE
from farmwork.models.job import JobStatus


class SortOption(StrEnum):
    NEWEST = "newest"
    OLDEST = "oldest"
    SALARY_HIGH = "salary-high"
    SALARY_LOW = "salary-low"
    LOCATION = "location"
    TITLE = "title"
    # Legacy keys that honour sort_order
    CREATED_AT = "createdAt"
    SALARY = "salary"


class SalaryRange(BaseModel):
    min: float | None = None
    max: float | None = None


class FilterSpec(BaseModel):
    search: str | None = None
    location: str | None = None
    category: str | None = None
    job_type: str | None = None
    salary_type: str | None = None
    min_salary: float | None = None
    max_salary: float | None = None
    salary_range: SalaryRange | None = None
    skills: list[str] = []
    sort_by: SortOption = SortOption.NEWEST
    sort_order: str = "desc"  # asc, desc; only used by the legacy sort keys
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)


class JobResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: str
    category: str
    location: str
    salary: float
    salary_type: str
    job_type: str
    start_date: date
    end_date: date | None
    workers_needed: int
    skills: list[str]
    requirements: str
    employer_id: uuid.UUID | None
    status: str
    is_boosted: bool
    applications_count: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool


class JobCreate(BaseModel):
    """Job posting payload.

    Fields are loosely typed so the payload validators, not pydantic, decide
    what is wrong and report every problem at once.
    """

    title: str = ""
    description: str = ""
    category: str = ""
    location: str = ""
    salary: float | str | None = None
    salary_type: str = ""
    job_type: str = ""
    start_date: str | None = None
    end_date: str | None = None
    workers_needed: int | str | None = None
    skills: list[str] = []
    requirements: str = ""
    employer_id: uuid.UUID | None = None


class JobStatusUpdate(BaseModel):
    status: JobStatus
