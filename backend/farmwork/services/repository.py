"""In-memory job and application repositories.

Records are frozen pydantic models kept in a tuple. Every write builds a new
tuple holding new record copies, so a list handed out earlier never changes
under its reader.
"""

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone

from farmwork.errors import ApplicationRejected, InvalidStatusTransition, NotFoundError
from farmwork.models.application import ApplicationStatus, JobApplication
from farmwork.models.job import JobRecord, JobStatus

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobRepository:
    def __init__(self, jobs: Iterable[JobRecord] = ()):
        self._jobs: tuple[JobRecord, ...] = tuple(jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def all(self) -> tuple[JobRecord, ...]:
        return self._jobs

    def get(self, job_id: uuid.UUID) -> JobRecord:
        for job in self._jobs:
            if job.id == job_id:
                return job
        raise NotFoundError("Job not found")

    def add(self, job: JobRecord) -> JobRecord:
        self._jobs = self._jobs + (job,)
        logger.info("Added job %s (%s)", job.id, job.title)
        return job

    def _replace(self, job_id: uuid.UUID, **changes) -> JobRecord:
        current = self.get(job_id)
        updated = current.model_copy(update={**changes, "updated_at": _utcnow()})
        self._jobs = tuple(updated if job.id == job_id else job for job in self._jobs)
        return updated

    def update_status(self, job_id: uuid.UUID, status: JobStatus) -> JobRecord:
        job = self.get(job_id)
        if not job.can_transition_to(status):
            raise InvalidStatusTransition(job.status, status)
        logger.info("Job %s status %s -> %s", job_id, job.status, status)
        return self._replace(job_id, status=status)

    def set_boosted(self, job_id: uuid.UUID, boosted: bool = True) -> JobRecord:
        return self._replace(job_id, is_boosted=boosted)

    def increment_applications(self, job_id: uuid.UUID) -> JobRecord:
        job = self.get(job_id)
        return self._replace(job_id, applications_count=job.applications_count + 1)

    def decrement_applications(self, job_id: uuid.UUID) -> JobRecord:
        job = self.get(job_id)
        return self._replace(job_id, applications_count=max(job.applications_count - 1, 0))

    def snapshot(self) -> "JobRepository":
        return JobRepository(self._jobs)


class ApplicationRepository:
    """Applications for the jobs held by ``jobs``."""

    def __init__(self, jobs: JobRepository, applications: Iterable[JobApplication] = ()):
        self.jobs = jobs
        self._applications: tuple[JobApplication, ...] = tuple(applications)

    def __len__(self) -> int:
        return len(self._applications)

    def all(self) -> tuple[JobApplication, ...]:
        return self._applications

    def get(self, application_id: uuid.UUID) -> JobApplication:
        for application in self._applications:
            if application.id == application_id:
                return application
        raise NotFoundError("Application not found")

    def list_for_job(self, job_id: uuid.UUID) -> list[JobApplication]:
        self.jobs.get(job_id)
        return [a for a in self._applications if a.job_id == job_id]

    def apply(
        self,
        job_id: uuid.UUID,
        applicant_id: str,
        cover_letter: str = "",
        proposed_salary: float | None = None,
    ) -> JobApplication:
        job = self.jobs.get(job_id)
        if job.status != JobStatus.ACTIVE:
            raise ApplicationRejected("Job is not accepting applications")
        for existing in self._applications:
            if (
                existing.job_id == job_id
                and existing.applicant_id == applicant_id
                and existing.status != ApplicationStatus.WITHDRAWN
            ):
                raise ApplicationRejected("You have already applied for this job")

        application = JobApplication(
            job_id=job_id,
            applicant_id=applicant_id,
            cover_letter=cover_letter,
            proposed_salary=proposed_salary,
        )
        self._applications = self._applications + (application,)
        self.jobs.increment_applications(job_id)
        logger.info("Applicant %s applied to job %s", applicant_id, job_id)
        return application

    def update_status(self, application_id: uuid.UUID, status: ApplicationStatus) -> JobApplication:
        current = self.get(application_id)
        if current.status == ApplicationStatus.WITHDRAWN:
            raise InvalidStatusTransition(current.status, status)
        updated = current.model_copy(update={"status": status, "updated_at": _utcnow()})
        self._applications = tuple(
            updated if a.id == application_id else a for a in self._applications
        )
        if status == ApplicationStatus.WITHDRAWN:
            self.jobs.decrement_applications(current.job_id)
        return updated

    def withdraw(self, application_id: uuid.UUID) -> JobApplication:
        return self.update_status(application_id, ApplicationStatus.WITHDRAWN)

    def snapshot(self, jobs: JobRepository | None = None) -> "ApplicationRepository":
        if jobs is None:
            jobs = self.jobs.snapshot()
        return ApplicationRepository(jobs, self._applications)
