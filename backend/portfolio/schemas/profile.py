from typing import Optional

from pydantic import BaseModel, Field

from portfolio.schemas.common import DocumentOut, NonBlankStr


# ------------------------
# Profile (singleton)
# ------------------------
class ProfileCreate(BaseModel):
    name: NonBlankStr
    title: NonBlankStr
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    yearsOfExperience: Optional[int] = Field(None, ge=0)
    projectsCompleted: Optional[int] = Field(None, ge=0)
    certifications: Optional[int] = Field(None, ge=0)
    awards: Optional[int] = Field(None, ge=0)


class ProfileUpdate(BaseModel):
    name: Optional[NonBlankStr] = None
    title: Optional[NonBlankStr] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    yearsOfExperience: Optional[int] = Field(None, ge=0)
    projectsCompleted: Optional[int] = Field(None, ge=0)
    certifications: Optional[int] = Field(None, ge=0)
    awards: Optional[int] = Field(None, ge=0)


class ProfileOut(DocumentOut):
    name: str
    title: str
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    yearsOfExperience: Optional[int] = None
    projectsCompleted: Optional[int] = None
    certifications: Optional[int] = None
    awards: Optional[int] = None
