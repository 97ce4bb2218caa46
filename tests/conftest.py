"""
Pytest configuration and fixtures for petclinic-core tests.

This module provides common fixtures for all tests in the petclinic-core
package: an owner, a dog pet type, a new pet and a stored pet.
"""

from datetime import date

import pytest

from petclinic_core.formatting import PetTypeFormatter, StaticPetTypeLookup
from petclinic_core.models import Owner, Pet, PetType, Visit


@pytest.fixture
def dog() -> PetType:
    """The dog pet type, as loaded from storage."""
    return PetType(id=1, name="dog")


@pytest.fixture
def owner() -> Owner:
    """A stored owner without pets."""
    return Owner(
        id=1,
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )


@pytest.fixture
def max_pet(dog: PetType) -> Pet:
    """A new pet named Max, not stored yet."""
    return Pet(name="Max", type=dog, birth_date=date(2020, 1, 1))


@pytest.fixture
def bella(dog: PetType) -> Pet:
    """A stored pet named Bella with identifier 2."""
    return Pet(id=2, name="Bella", type=dog, birth_date=date(2019, 6, 15))


@pytest.fixture
def owner_with_pets(owner: Owner, max_pet: Pet, bella: Pet) -> Owner:
    """Owner holding Max (new) followed by Bella (stored, id=2)."""
    owner.add_pet(max_pet)
    # Bella is already stored, so she is attached the way a loaded owner holds her
    owner.pets.append(bella)
    return owner


@pytest.fixture
def checkup() -> Visit:
    """A checkup visit dated today."""
    return Visit(date=date.today(), description="Checkup")


@pytest.fixture
def pet_type_lookup() -> StaticPetTypeLookup:
    """Lookup knowing cat, dog and hamster (ids 1, 2, 3)."""
    return StaticPetTypeLookup.from_names(["cat", "dog", "hamster"])


@pytest.fixture
def formatter(pet_type_lookup: StaticPetTypeLookup) -> PetTypeFormatter:
    """Pet type formatter over the test lookup."""
    return PetTypeFormatter(pet_type_lookup)
