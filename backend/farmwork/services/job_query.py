import logging
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from pydantic import BaseModel

from farmwork.models.job import JobRecord
from farmwork.schemas.job import FilterSpec, SortOption

logger = logging.getLogger(__name__)


class JobQueryResult(BaseModel):
    model_config = {"frozen": True}

    items: list[JobRecord]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_more(self) -> bool:
        return self.page * self.page_size < self.total_count


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def matches_search(job: JobRecord, term: str) -> bool:
    """Case-insensitive substring match on title, description or any skill."""
    return (
        _contains(job.title, term)
        or _contains(job.description, term)
        or any(_contains(skill, term) for skill in job.skills)
    )


def matches_skills(job: JobRecord, skills: Sequence[str]) -> bool:
    """True when any requested skill appears inside any of the job's skills."""
    return any(_contains(job_skill, wanted) for wanted in skills for job_skill in job.skills)


def _salary_bounds(filters: FilterSpec) -> tuple[list[float], list[float]]:
    lows = [v for v in (filters.min_salary,) if v is not None]
    highs = [v for v in (filters.max_salary,) if v is not None]
    if filters.salary_range:
        if filters.salary_range.min is not None:
            lows.append(filters.salary_range.min)
        if filters.salary_range.max is not None:
            highs.append(filters.salary_range.max)
    return lows, highs


def filter_jobs(jobs: Iterable[JobRecord], filters: FilterSpec) -> list[JobRecord]:
    """Apply every filter present in ``filters``; a job must pass all of them."""
    lows, highs = _salary_bounds(filters)
    filtered = []
    for job in jobs:
        if filters.location and not _contains(job.location, filters.location):
            continue
        if filters.category and job.category != filters.category:
            continue
        if filters.job_type and job.job_type != filters.job_type:
            continue
        if filters.salary_type and job.salary_type != filters.salary_type:
            continue
        if any(job.salary < low for low in lows) or any(job.salary > high for high in highs):
            continue
        if filters.search and not matches_search(job, filters.search):
            continue
        if filters.skills and not matches_skills(job, filters.skills):
            continue
        filtered.append(job)
    return filtered


def _sort_key(sort_by: SortOption, sort_order: str) -> Callable[[JobRecord], Any]:
    ascending = sort_order == "asc"

    if sort_by == SortOption.OLDEST:
        return lambda job: job.created_at.timestamp()
    if sort_by == SortOption.SALARY_HIGH:
        return lambda job: -job.salary
    if sort_by == SortOption.SALARY_LOW:
        return lambda job: job.salary
    if sort_by == SortOption.LOCATION:
        return lambda job: job.location.casefold()
    if sort_by == SortOption.TITLE:
        return lambda job: job.title.casefold()
    if sort_by == SortOption.SALARY:
        return lambda job: job.salary if ascending else -job.salary
    if sort_by == SortOption.CREATED_AT:
        return lambda job: job.created_at.timestamp() if ascending else -job.created_at.timestamp()
    return lambda job: -job.created_at.timestamp()


def sort_jobs(jobs: Iterable[JobRecord], sort_by: SortOption = SortOption.NEWEST, sort_order: str = "desc") -> list[JobRecord]:
    """Boosted jobs first, then by the requested key.

    ``sorted`` is stable, so jobs comparing equal keep their input order.
    """
    key = _sort_key(sort_by, sort_order)
    return sorted(jobs, key=lambda job: (not job.is_boosted, key(job)))


def paginate(jobs: Sequence[JobRecord], page: int, page_size: int) -> list[JobRecord]:
    start = (page - 1) * page_size
    return list(jobs[start:start + page_size])


def query_jobs(jobs: Sequence[JobRecord], filters: FilterSpec | None = None) -> JobQueryResult:
    """Filter, sort and paginate ``jobs`` according to ``filters``.

    ``total_count`` is the number of jobs that passed the filters, before
    pagination. A page past the end yields no items.
    """
    filters = filters or FilterSpec()
    filtered = filter_jobs(jobs, filters)
    ordered = sort_jobs(filtered, filters.sort_by, filters.sort_order)
    items = paginate(ordered, filters.page, filters.page_size)
    logger.debug(
        "Job query matched %d of %d jobs, returning page %d (%d items)",
        len(filtered), len(jobs), filters.page, len(items),
    )
    return JobQueryResult(items=items, total_count=len(filtered), page=filters.page, page_size=filters.page_size)
