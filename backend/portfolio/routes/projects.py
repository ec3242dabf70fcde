# portfolio/routes/projects.py
from typing import List

from fastapi import APIRouter, Depends, status

from portfolio.core.error_messages import SuccessMessages
from portfolio.core.exceptions import NotFoundError
from portfolio.crud.resource_crud import ResourceRepository
from portfolio.dependencies import get_project_repository
from portfolio.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse, update_fields
from portfolio.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate

project_router = APIRouter(prefix="/projects", tags=["Projects"], responses=SERVER_ERROR)


@project_router.get("", response_model=List[ProjectOut], summary="List active projects")
async def list_projects(repo: ResourceRepository = Depends(get_project_repository)):
    return await repo.find_many({"isActive": True})


@project_router.get(
    "/category/{category}",
    response_model=List[ProjectOut],
    summary="List active projects in a category",
)
async def list_projects_by_category(category: str, repo: ResourceRepository = Depends(get_project_repository)):
    return await repo.find_many({"category": category, "isActive": True})


@project_router.get("/{project_id}", response_model=ProjectOut, responses=NOT_FOUND)
async def get_project(project_id: str, repo: ResourceRepository = Depends(get_project_repository)):
    project = await repo.find_by_id(project_id)
    if not project:
        raise NotFoundError("Project")
    return project


@project_router.post(
    "",
    response_model=ProjectOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_project(data: ProjectCreate, repo: ResourceRepository = Depends(get_project_repository)):
    return await repo.create(data.model_dump())


@project_router.put("/{project_id}", response_model=ProjectOut, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    repo: ResourceRepository = Depends(get_project_repository),
):
    project = await repo.update_by_id(project_id, update_fields(data))
    if not project:
        raise NotFoundError("Project")
    return project


@project_router.delete("/{project_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_project(project_id: str, repo: ResourceRepository = Depends(get_project_repository)):
    if not await repo.delete_by_id(project_id):
        raise NotFoundError("Project")
    return {"message": SuccessMessages.DELETED.format(resource="Project")}
