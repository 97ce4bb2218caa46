"""
Pydantic schemas for data validation and serialization.

This module contains Pydantic schemas used to validate submitted forms and
to serialize the owner aggregate and the vet list.
"""

from .owner import (
    OwnerBase,
    OwnerCreate,
    OwnerResponse,
    OwnerUpdate,
    parse_owner_form,
)
from .pet import PetCreate, PetResponse, PetTypeResponse
from .vet import SpecialtyResponse, VetListResponse, VetResponse
from .visit import VisitCreate, VisitResponse

__all__ = [
    # Owner schemas
    "OwnerBase",
    "OwnerCreate",
    "OwnerUpdate",
    "OwnerResponse",
    "parse_owner_form",
    # Pet schemas
    "PetCreate",
    "PetResponse",
    "PetTypeResponse",
    # Visit schemas
    "VisitCreate",
    "VisitResponse",
    # Vet schemas
    "SpecialtyResponse",
    "VetResponse",
    "VetListResponse",
]
