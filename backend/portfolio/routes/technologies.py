# portfolio/routes/technologies.py
from typing import List

from fastapi import APIRouter, Depends, status

from portfolio.core.error_messages import SuccessMessages
from portfolio.core.exceptions import NotFoundError
from portfolio.crud.resource_crud import ResourceRepository
from portfolio.dependencies import get_technology_repository
from portfolio.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse, update_fields
from portfolio.schemas.technology import TechnologyCreate, TechnologyOut, TechnologyUpdate

technology_router = APIRouter(prefix="/technologies", tags=["Technologies"], responses=SERVER_ERROR)


@technology_router.get("", response_model=List[TechnologyOut], summary="List active technologies")
async def list_technologies(repo: ResourceRepository = Depends(get_technology_repository)):
    return await repo.find_many({"isActive": True})


# Unknown categories are not rejected; they just match nothing.
@technology_router.get(
    "/category/{category}",
    response_model=List[TechnologyOut],
    summary="List active technologies in a category",
)
async def list_technologies_by_category(
    category: str,
    repo: ResourceRepository = Depends(get_technology_repository),
):
    return await repo.find_many({"category": category, "isActive": True})


@technology_router.get("/{technology_id}", response_model=TechnologyOut, responses=NOT_FOUND)
async def get_technology(technology_id: str, repo: ResourceRepository = Depends(get_technology_repository)):
    technology = await repo.find_by_id(technology_id)
    if not technology:
        raise NotFoundError("Technology")
    return technology


@technology_router.post(
    "",
    response_model=TechnologyOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_technology(data: TechnologyCreate, repo: ResourceRepository = Depends(get_technology_repository)):
    return await repo.create(data.model_dump())


@technology_router.put("/{technology_id}", response_model=TechnologyOut, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_technology(
    technology_id: str,
    data: TechnologyUpdate,
    repo: ResourceRepository = Depends(get_technology_repository),
):
    technology = await repo.update_by_id(technology_id, update_fields(data))
    if not technology:
        raise NotFoundError("Technology")
    return technology


@technology_router.delete("/{technology_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_technology(technology_id: str, repo: ResourceRepository = Depends(get_technology_repository)):
    if not await repo.delete_by_id(technology_id):
        raise NotFoundError("Technology")
    return {"message": SuccessMessages.DELETED.format(resource="Technology")}
