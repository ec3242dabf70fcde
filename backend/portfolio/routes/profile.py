# portfolio/routes/profile.py
from fastapi import APIRouter, Depends, Response, status

from portfolio.core.error_messages import SuccessMessages
from portfolio.core.exceptions import NotFoundError
from portfolio.crud.profile_crud import ProfileRepository
from portfolio.dependencies import get_profile_repository
from portfolio.schemas.common import BAD_REQUEST, NOT_FOUND, SERVER_ERROR, MessageResponse, update_fields
from portfolio.schemas.profile import ProfileCreate, ProfileOut, ProfileUpdate

profile_router = APIRouter(prefix="/profile", tags=["Profile"], responses=SERVER_ERROR)


@profile_router.get("", response_model=ProfileOut, responses=NOT_FOUND)
async def get_profile(repo: ProfileRepository = Depends(get_profile_repository)):
    profile = await repo.get()
    if not profile:
        raise NotFoundError("Profile")
    return profile


# ------------------------
# Create or update (singleton)
# ------------------------
@profile_router.post(
    "",
    response_model=ProfileOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": ProfileOut, "description": "Existing profile updated"},
        **BAD_REQUEST,
    },
    summary="Create the profile, or update it when one already exists",
)
async def create_or_update_profile(
    data: ProfileCreate,
    response: Response,
    repo: ProfileRepository = Depends(get_profile_repository),
):
    profile, created = await repo.upsert(data.model_dump(exclude_none=True))
    if not created:
        response.status_code = status.HTTP_200_OK
    return profile


@profile_router.put("", response_model=ProfileOut, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_profile(data: ProfileUpdate, repo: ProfileRepository = Depends(get_profile_repository)):
    profile = await repo.update(update_fields(data))
    if not profile:
        raise NotFoundError("Profile")
    return profile


@profile_router.delete("", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_profile(repo: ProfileRepository = Depends(get_profile_repository)):
    if not await repo.delete():
        raise NotFoundError("Profile")
    return {"message": SuccessMessages.DELETED.format(resource="Profile")}
