# portfolio/routes/services.py
from typing import List

from fastapi import APIRouter, Depends, status

from portfolio.core.error_messages import SuccessMessages
from portfolio.core.exceptions import NotFoundError
from portfolio.crud.resource_crud import ResourceRepository
from portfolio.dependencies import get_service_repository
from portfolio.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse, update_fields
from portfolio.schemas.service import ServiceCreate, ServiceOut, ServiceUpdate

service_router = APIRouter(prefix="/services", tags=["Services"], responses=SERVER_ERROR)


@service_router.get("", response_model=List[ServiceOut], summary="List active services")
async def list_services(repo: ResourceRepository = Depends(get_service_repository)):
    return await repo.find_many({"isActive": True})


@service_router.get("/{service_id}", response_model=ServiceOut, responses=NOT_FOUND)
async def get_service(service_id: str, repo: ResourceRepository = Depends(get_service_repository)):
    service = await repo.find_by_id(service_id)
    if not service:
        raise NotFoundError("Service")
    return service


@service_router.post("", response_model=ServiceOut, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
async def create_service(data: ServiceCreate, repo: ResourceRepository = Depends(get_service_repository)):
    return await repo.create(data.model_dump())


@service_router.put("/{service_id}", response_model=ServiceOut, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    repo: ResourceRepository = Depends(get_service_repository),
):
    service = await repo.update_by_id(service_id, update_fields(data))
    if not service:
        raise NotFoundError("Service")
    return service


@service_router.delete("/{service_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_service(service_id: str, repo: ResourceRepository = Depends(get_service_repository)):
    if not await repo.delete_by_id(service_id):
        raise NotFoundError("Service")
    return {"message": SuccessMessages.DELETED.format(resource="Service")}
