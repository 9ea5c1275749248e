from farmwork.models.application import ApplicationStatus, JobApplication
from farmwork.models.job import JobRecord, JobStatus, JobType, SalaryType
from farmwork.models.user import User, UserType

__all__ = [
    "ApplicationStatus",
    "JobApplication",
    "JobRecord",
    "JobStatus",
    "JobType",
    "SalaryType",
    "User",
    "UserType",
]
