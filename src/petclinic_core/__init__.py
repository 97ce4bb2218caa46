"""
PetClinic Core Package

Domain model for veterinary clinic record keeping: owners, their pets,
pet types, visit history, and veterinarians with their specialties.

The package is centred on the owner aggregate. An ``Owner`` holds its pets,
each ``Pet`` holds its visits, and all changes go through the owner:

- SQLAlchemy models for the entities (Owner, Pet, PetType, Visit, Vet, Specialty)
- Pydantic schemas for form validation and serialization
- A pet type formatter resolving type names against the known types
- An exception hierarchy with machine-readable error codes
- Configuration and logging helpers driven by environment variables

Quick Start:
    >>> from petclinic_core import Owner, Pet, Visit
    >>> owner = Owner(first_name="George", last_name="Franklin")
    >>> bella = Pet(id=2, name="Bella")
    >>> owner.pets.append(bella)
    >>> owner.add_visit(2, Visit(description="Checkup"))
    >>> len(owner.get_pet("bella").visits)
    1

Requirements:
    - Python 3.11+
    - SQLAlchemy 2.0+
    - Pydantic 2.5+
"""

__version__ = "0.1.0"
__author__ = "PetClinic Team"
__license__ = "MIT"

# Import implemented modules
from . import exceptions
from . import models
from . import formatting
from . import schemas
from . import utils

# Convenience imports for common usage patterns
from .exceptions import (
    InvalidArgumentException,
    PetClinicException,
    PetTypeParseException,
    ValidationException,
)
from .formatting import PetTypeFormatter, PetTypeLookup, StaticPetTypeLookup
from .models import Owner, Pet, PetType, Specialty, Vet, Vets, Visit

__all__ = [
    # Version and metadata
    "__version__",
    "__author__",
    "__license__",
    # Core modules
    "exceptions",
    "models",
    "formatting",
    "schemas",
    "utils",
    # Convenience imports
    "PetClinicException",
    "ValidationException",
    "InvalidArgumentException",
    "PetTypeParseException",
    "PetTypeFormatter",
    "PetTypeLookup",
    "StaticPetTypeLookup",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Vets",
    "Specialty",
]
