import uuid

from fastapi import APIRouter, Depends, HTTPException

from farmwork.dependencies import get_application_repository
from farmwork.errors import InvalidStatusTransition, NotFoundError
from farmwork.schemas.application import ApplicationResponse, ApplicationStatusUpdate
from farmwork.services.repository import ApplicationRepository

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: uuid.UUID,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    try:
        return ApplicationResponse.model_validate(applications.get(application_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: uuid.UUID,
    data: ApplicationStatusUpdate,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    try:
        application = applications.update_status(application_id, data.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}", response_model=ApplicationResponse)
async def withdraw_application(
    application_id: uuid.UUID,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    try:
        application = applications.withdraw(application_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ApplicationResponse.model_validate(application)
