"""
Database models for the petclinic-core package.

This module contains SQLAlchemy models for the entities of the veterinary
clinic: owners, pets, pet types, visits, vets and specialties.
"""

# Base classes will be imported by all other models
from .base import Base, BaseEntity, Identity, NamedEntity, Person, Saved, Unsaved

# Core entity models
from .owner import Owner
from .pet import Pet
from .pet_type import PetType
from .vet import Specialty, Vet, Vets, vet_specialties
from .visit import Visit

__all__ = [
    "Base",
    "BaseEntity",
    "NamedEntity",
    "Person",
    "Identity",
    "Saved",
    "Unsaved",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Vets",
    "Specialty",
    "vet_specialties",
]
