from typing import Literal, Optional

from pydantic import BaseModel

from portfolio.schemas.common import DocumentOut, NonBlankStr

TechnologyCategory = Literal["Frontend", "Backend", "Database", "DevOps", "Mobile", "Other"]
ProficiencyLevel = Literal["Beginner", "Intermediate", "Advanced", "Expert"]


class TechnologyCreate(BaseModel):
    name: NonBlankStr
    category: TechnologyCategory
    logo: Optional[str] = None
    proficiencyLevel: ProficiencyLevel = "Intermediate"
    isActive: bool = True


class TechnologyUpdate(BaseModel):
    name: Optional[NonBlankStr] = None
    category: Optional[TechnologyCategory] = None
    logo: Optional[str] = None
    proficiencyLevel: Optional[ProficiencyLevel] = None
    isActive: Optional[bool] = None


class TechnologyOut(DocumentOut):
    name: str
    category: str
    logo: Optional[str] = None
    proficiencyLevel: str = "Intermediate"
    isActive: bool = True
