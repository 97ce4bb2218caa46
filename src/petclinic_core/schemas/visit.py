"""
Visit Pydantic schemas for form validation and serialization.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.visit import Visit
from ..utils.validation import validate_required_text


class VisitCreate(BaseModel):
    """Schema for recording a new visit."""

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    date: datetime.date = Field(
        default_factory=datetime.date.today, description="Date of the visit"
    )
    description: str = Field(..., description="What happened during the visit")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate visit description."""
        return validate_required_text(v, "description").raise_for_errors()

    def to_model(self) -> Visit:
        """Build a new, unsaved visit from the validated data."""
        return Visit(date=self.date, description=self.description)


class VisitResponse(BaseModel):
    """Schema for visit response data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Visit identifier, unset when new")
    date: Optional[datetime.date] = Field(None, description="Date of the visit")
    description: Optional[str] = Field(None, description="Visit description")

    def to_model(self) -> Visit:
        """Rebuild the visit, identifier included."""
        return Visit(id=self.id, date=self.date, description=self.description)
