"""
Veterinarian Pydantic schemas for serialization.
"""

from collections.abc import Set as AbstractSet
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpecialtyResponse(BaseModel):
    """Schema for specialty data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Specialty identifier")
    name: Optional[str] = Field(None, description="Specialty name")


class VetResponse(BaseModel):
    """Schema for veterinarian response data."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Vet identifier")
    first_name: Optional[str] = Field(None, description="Vet's first name")
    last_name: Optional[str] = Field(None, description="Vet's last name")
    specialties: List[SpecialtyResponse] = Field(
        default_factory=list, description="Specialties sorted by name"
    )
    nr_of_specialties: int = Field(0, description="Number of specialties")

    @field_validator("specialties", mode="before")
    @classmethod
    def sort_specialties(cls, v: Any) -> Any:
        """Order a set of specialties by name."""
        if isinstance(v, AbstractSet):
            return sorted(v, key=lambda specialty: getattr(specialty, "name", None) or "")
        return v


class VetListResponse(BaseModel):
    """Schema for the list of veterinarians."""

    model_config = ConfigDict(from_attributes=True)

    vet_list: List[VetResponse] = Field(
        default_factory=list, description="All veterinarians"
    )
