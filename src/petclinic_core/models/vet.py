"""
Veterinarian models for the petclinic-core package.

This module contains the Vet and Specialty SQLAlchemy models and the
``Vets`` list wrapper used when rendering the list of veterinarians.
"""

from dataclasses import dataclass, field
from typing import List, Set

from sqlalchemy import Column, ForeignKey, Table
from sqlalchemy.orm import Mapped, relationship

from .base import Base, NamedEntity, Person

vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", ForeignKey("vets.id"), primary_key=True),
    Column("specialty_id", ForeignKey("specialties.id"), primary_key=True),
)


class Specialty(NamedEntity):
    """A named skill category of a veterinarian, e.g. ``radiology``."""

    __tablename__ = "specialties"


class Vet(Person):
    """
    Veterinarian with an unordered set of specialties.

    Specialties are shared reference data; a vet only references them.
    """

    __tablename__ = "vets"

    specialties: Mapped[Set[Specialty]] = relationship(
        secondary=vet_specialties,
        collection_class=set,
    )

    def get_specialties(self) -> List[Specialty]:
        """Specialties sorted by name."""
        return sorted(self.specialties, key=lambda specialty: specialty.name or "")

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        """Add a specialty; adding one that is already present has no effect."""
        self.specialties.add(specialty)


@dataclass
class Vets:
    """Simple wrapper around a list of vets."""

    vet_list: List[Vet] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vet_list)
