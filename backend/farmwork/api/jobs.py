import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from farmwork.config import settings
from farmwork.dependencies import get_application_repository, get_job_repository
from farmwork.errors import ApplicationRejected, InvalidStatusTransition, NotFoundError
from farmwork.models.job import JobRecord, JobStatus
from farmwork.schemas.application import ApplicationListResponse, ApplicationResponse, ApplyJobData
from farmwork.schemas.job import (
    FilterSpec,
    JobCreate,
    JobListResponse,
    JobResponse,
    JobStatusUpdate,
    SalaryRange,
    SortOption,
)
from farmwork.services.job_query import query_jobs
from farmwork.services.payload_validators import validate_job_application, validate_job_posting
from farmwork.services.repository import ApplicationRepository, JobRepository
from farmwork.services.validators import parse_datetime

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def _get_job_or_404(jobs: JobRepository, job_id: uuid.UUID) -> JobRecord:
    try:
        return jobs.get(job_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _build_job(data: JobCreate) -> JobRecord:
    payload = data.model_dump()
    result = validate_job_posting(payload)
    messages = list(result.messages)
    if not data.start_date:
        messages.append("Start date is required")
    if messages:
        raise HTTPException(status_code=422, detail=messages)

    end = parse_datetime(data.end_date) if data.end_date else None
    try:
        return JobRecord(
            title=data.title.strip(),
            description=data.description.strip(),
            category=data.category,
            location=data.location.strip(),
            salary=float(data.salary),
            salary_type=data.salary_type,
            job_type=data.job_type,
            start_date=parse_datetime(data.start_date).date(),
            end_date=end.date() if end else None,
            workers_needed=int(float(data.workers_needed)),
            skills=[skill.strip() for skill in data.skills],
            requirements=data.requirements,
            employer_id=data.employer_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=[err["msg"] for err in e.errors()])


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: str | None = None,
    location: str | None = None,
    category: str | None = None,
    job_type: str | None = None,
    salary_type: str | None = None,
    min_salary: float | None = None,
    max_salary: float | None = None,
    salary_min: float | None = None,
    salary_max: float | None = None,
    skills: list[str] = Query([]),
    sort_by: SortOption = SortOption.NEWEST,
    sort_order: str = "desc",
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    status: JobStatus = JobStatus.ACTIVE,
    jobs: JobRepository = Depends(get_job_repository),
):
    salary_range = None
    if salary_min is not None or salary_max is not None:
        salary_range = SalaryRange(min=salary_min, max=salary_max)

    filters = FilterSpec(
        search=search,
        location=location,
        category=category,
        job_type=job_type,
        salary_type=salary_type,
        min_salary=min_salary,
        max_salary=max_salary,
        salary_range=salary_range,
        skills=skills,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size,
    )
    visible = [job for job in jobs.all() if job.status == status]
    result = query_jobs(visible, filters)

    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in result.items],
        total=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        has_more=result.has_more,
    )


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(data: JobCreate, jobs: JobRepository = Depends(get_job_repository)):
    job = jobs.add(_build_job(data))
    return JobResponse.model_validate(job)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: uuid.UUID, jobs: JobRepository = Depends(get_job_repository)):
    return JobResponse.model_validate(_get_job_or_404(jobs, job_id))


@router.patch("/{job_id}/status", response_model=JobResponse)
async def update_job_status(
    job_id: uuid.UUID,
    data: JobStatusUpdate,
    jobs: JobRepository = Depends(get_job_repository),
):
    _get_job_or_404(jobs, job_id)
    try:
        job = jobs.update_status(job_id, data.status)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return JobResponse.model_validate(job)


@router.patch("/{job_id}/boost", response_model=JobResponse)
async def toggle_boost_job(job_id: uuid.UUID, jobs: JobRepository = Depends(get_job_repository)):
    job = _get_job_or_404(jobs, job_id)
    job = jobs.set_boosted(job_id, not job.is_boosted)
    return JobResponse.model_validate(job)


@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=201)
async def apply_to_job(
    job_id: uuid.UUID,
    data: ApplyJobData,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    _get_job_or_404(applications.jobs, job_id)

    result = validate_job_application({"job_id": str(job_id), **data.model_dump()})
    if not result.is_valid:
        raise HTTPException(status_code=422, detail=result.messages)

    proposed_salary = float(data.proposed_salary) if data.proposed_salary is not None else None
    try:
        application = applications.apply(
            job_id,
            data.applicant_id,
            cover_letter=data.cover_letter.strip(),
            proposed_salary=proposed_salary,
        )
    except ApplicationRejected as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ApplicationResponse.model_validate(application)


@router.get("/{job_id}/applications", response_model=ApplicationListResponse)
async def list_job_applications(
    job_id: uuid.UUID,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    _get_job_or_404(applications.jobs, job_id)
    items = applications.list_for_job(job_id)
    return ApplicationListResponse(
        applications=[ApplicationResponse.model_validate(a) for a in items],
        total=len(items),
    )
