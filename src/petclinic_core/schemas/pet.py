"""
Pet Pydantic schemas for form validation and serialization.

This module contains the schemas for pets and pet types. Pet forms carry
the pet type as its display name; ``PetCreate.to_model`` resolves it through
a ``PetTypeFormatter``.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..formatting import PetTypeFormatter
from ..models.pet import Pet
from ..models.pet_type import PetType
from ..utils.validation import validate_not_future, validate_required_text
from .visit import VisitResponse


class PetTypeResponse(BaseModel):
    """Schema for pet type data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Pet type identifier")
    name: Optional[str] = Field(None, description="Pet type name")

    def to_model(self) -> PetType:
        return PetType(id=self.id, name=self.name)


class PetCreate(BaseModel):
    """Schema for adding a new pet to an owner."""

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    name: str = Field(..., description="Pet's name", max_length=30)
    birth_date: Optional[date] = Field(None, description="Pet's birth date")
    type: str = Field(..., description="Name of the pet type, e.g. 'dog'")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate pet name."""
        return validate_required_text(v, "name", "Pet name").raise_for_errors()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: Optional[date]) -> Optional[date]:
        """Validate birth date."""
        return validate_not_future(v, "birth_date").raise_for_errors()

    def to_model(self, formatter: PetTypeFormatter) -> Pet:
        """
        Build a new, unsaved pet from the validated data.

        Args:
            formatter: Formatter used to resolve the pet type name

        Raises:
            PetTypeParseException: If the type name is not a known pet type
        """
        return Pet(
            name=self.name,
            birth_date=self.birth_date,
            type=formatter.parse(self.type),
        )


class PetResponse(BaseModel):
    """Schema for pet response data, visits included."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Pet identifier, unset when new")
    is_new: bool = Field(..., description="Whether the pet has not been stored")
    name: Optional[str] = Field(None, description="Pet's name")
    birth_date: Optional[date] = Field(None, description="Pet's birth date")
    type: Optional[PetTypeResponse] = Field(None, description="Pet's type")
    visits: List[VisitResponse] = Field(
        default_factory=list, description="Visits of the pet"
    )

    def to_model(self) -> Pet:
        """Rebuild the pet with its type and visits."""
        return Pet(
            id=self.id,
            name=self.name,
            birth_date=self.birth_date,
            type=self.type.to_model() if self.type else None,
            visits=[visit.to_model() for visit in self.visits],
        )
