from typing import Optional

from pydantic import BaseModel

from portfolio.schemas.common import DocumentOut, NonBlankStr


class ServiceCreate(BaseModel):
    title: NonBlankStr
    description: NonBlankStr
    price: str = "Custom Quote"
    icon: str = "bi-gear"                      # Bootstrap icon class
    link: str = "#"
    isActive: bool = True


class ServiceUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[NonBlankStr] = None
    price: Optional[str] = None
    icon: Optional[str] = None
    link: Optional[str] = None
    isActive: Optional[bool] = None


class ServiceOut(DocumentOut):
    title: str
    description: str
    price: str = "Custom Quote"
    icon: str = "bi-gear"
    link: str = "#"
    isActive: bool = True
