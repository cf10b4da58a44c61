from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.enums import EducationSystem, InstitutionType


class InstitutionCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    type: InstitutionType
    education_system: EducationSystem
    location: Optional[str] = None
    size: Optional[str] = Field(None, max_length=50)
    academic_calendar: Optional[Any] = None
    structure: Optional[Any] = None


class InstitutionUpdate(BaseModel):
    """Partial settings update. ``isConfigured`` only changes through configure()."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[InstitutionType] = None
    education_system: Optional[EducationSystem] = None
    location: Optional[str] = None
    size: Optional[str] = Field(None, max_length=50)
    academic_calendar: Optional[Any] = None
    structure: Optional[Any] = None
