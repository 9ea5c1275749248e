from fastapi import Request

from farmwork.services.repository import ApplicationRepository, JobRepository


def get_job_repository(request: Request) -> JobRepository:
    return request.app.state.jobs


def get_application_repository(request: Request) -> ApplicationRepository:
    return request.app.state.applications
