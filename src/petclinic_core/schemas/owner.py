"""
Owner Pydantic schemas for form validation and serialization.

This module contains create, update and response schemas for owners. The
create and update schemas enforce the owner's field rules: non-blank
names, address and city, and a telephone number of exactly 10 digits.
"""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from ..exceptions import SchemaValidationException, format_validation_errors
from ..models.owner import Owner
from ..utils.validation import validate_required_text, validate_telephone
from .pet import PetResponse


class OwnerBase(BaseModel):
    """Base Owner schema with common fields."""

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    first_name: str = Field(..., description="Owner's first name", max_length=30)
    last_name: str = Field(..., description="Owner's last name", max_length=30)
    address: str = Field(..., description="Street address", max_length=255)
    city: str = Field(..., description="City", max_length=80)
    telephone: str = Field(..., description="Telephone number, 10 digits")

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def validate_required_fields(cls, v: str, info: ValidationInfo) -> str:
        """Validate required string fields."""
        return validate_required_text(v, info.field_name).raise_for_errors()

    @field_validator("telephone")
    @classmethod
    def check_telephone(cls, v: str) -> str:
        """Validate telephone number."""
        return validate_telephone(v).raise_for_errors()


class OwnerCreate(OwnerBase):
    """Schema for registering a new owner."""

    def to_model(self) -> Owner:
        """Build a new, unsaved owner from the validated data."""
        return Owner(**self.model_dump())


class OwnerUpdate(BaseModel):
    """Schema for updating an existing owner. Only the fields given are applied."""

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    first_name: Optional[str] = Field(None, max_length=30)
    last_name: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=80)
    telephone: Optional[str] = Field(None)

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def validate_required_fields(
        cls, v: Optional[str], info: ValidationInfo
    ) -> Optional[str]:
        """Validate fields that are given, a given field may not be blank."""
        if v is None:
            return v
        return validate_required_text(v, info.field_name).raise_for_errors()

    @field_validator("telephone")
    @classmethod
    def check_telephone(cls, v: Optional[str]) -> Optional[str]:
        """Validate telephone number if given."""
        if v is None:
            return v
        return validate_telephone(v).raise_for_errors()

    def apply_to(self, owner: Owner) -> Owner:
        """
        Copy the fields that were set onto an existing owner.

        The owner's identifier and pets are left untouched.

        Args:
            owner: The owner to update

        Returns:
            The same owner instance
        """
        owner.update_fields(**self.model_dump(exclude_unset=True, exclude_none=True))
        return owner


class OwnerResponse(BaseModel):
    """Schema for owner response data, pets and visits included."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Owner identifier, unset when new")
    is_new: bool = Field(..., description="Whether the owner has not been stored")
    first_name: Optional[str] = Field(None, description="Owner's first name")
    last_name: Optional[str] = Field(None, description="Owner's last name")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    telephone: Optional[str] = Field(None, description="Telephone number")
    pets: List[PetResponse] = Field(default_factory=list, description="Owner's pets")

    def to_model(self) -> Owner:
        """Rebuild the owner aggregate, identifiers included."""
        return Owner(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            address=self.address,
            city=self.city,
            telephone=self.telephone,
            pets=[pet.to_model() for pet in self.pets],
        )


def parse_owner_form(data: Dict[str, Any]) -> OwnerCreate:
    """
    Validate raw owner form data.

    Args:
        data: Submitted form fields

    Returns:
        The validated schema

    Raises:
        SchemaValidationException: With the errors grouped per field
    """
    try:
        return OwnerCreate.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationException(
            message="Owner form is invalid",
            schema_name=OwnerCreate.__name__,
            validation_errors=format_validation_errors(e.errors()),
        ) from e
