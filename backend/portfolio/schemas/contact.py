import re
from typing import Optional

from pydantic import BaseModel, field_validator

from portfolio.core.error_messages import ErrorMessages
from portfolio.schemas.common import DocumentOut, NonBlankStr

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactCreate(BaseModel):
    name: NonBlankStr
    email: str
    subject: Optional[str] = None
    message: NonBlankStr

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if not EMAIL_RE.fullmatch(v):
            raise ValueError(ErrorMessages.INVALID_EMAIL)
        return v


class ContactOut(DocumentOut):
    name: str
    email: str
    subject: Optional[str] = None
    message: str


class ContactResponse(BaseModel):
    message: str
    notified: bool
    contact: ContactOut


class SmsRequest(BaseModel):
    phone: Optional[str] = None
    message: Optional[str] = None
