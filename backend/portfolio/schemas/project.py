from typing import List, Optional

from pydantic import BaseModel, Field

from portfolio.schemas.common import DocumentOut, NonBlankStr


class ProjectCreate(BaseModel):
    title: NonBlankStr
    description: NonBlankStr
    category: NonBlankStr
    image: NonBlankStr                         # cover image URL
    technologies: List[str] = Field(default_factory=list)
    githubUrl: Optional[str] = None
    liveUrl: Optional[str] = None
    projectUrl: Optional[str] = None
    isActive: bool = True


class ProjectUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[NonBlankStr] = None
    category: Optional[NonBlankStr] = None
    image: Optional[NonBlankStr] = None
    technologies: Optional[List[str]] = None
    githubUrl: Optional[str] = None
    liveUrl: Optional[str] = None
    projectUrl: Optional[str] = None
    isActive: Optional[bool] = None


class ProjectOut(DocumentOut):
    title: str
    description: str
    category: str
    image: Optional[str] = None
    technologies: List[str] = []
    githubUrl: Optional[str] = None
    liveUrl: Optional[str] = None
    projectUrl: Optional[str] = None
    isActive: bool = True
