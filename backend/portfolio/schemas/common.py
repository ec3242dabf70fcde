from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Required text: present and not just whitespace
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class DocumentOut(BaseModel):
    id: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    message: str
    kind: str
    errors: Optional[List[FieldError]] = None


def update_fields(payload: BaseModel) -> dict:
    """Fields the client actually sent, ready for a ``$set``."""
    return payload.model_dump(exclude_unset=True, exclude_none=True)


# OpenAPI error declarations shared by the routers
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Missing or invalid fields"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Resource not found"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Server error"}}
