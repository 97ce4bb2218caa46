"""
Owner model for the petclinic-core package.

The owner is the entry point of the aggregate made of the owner, its pets
and their visits. Pets are added and looked up, and visits attached to a
pet, only through the methods of this class.
"""

import logging
from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..exceptions import InvalidArgumentException
from .base import Person
from .pet import Pet
from .visit import Visit

logger = logging.getLogger(__name__)


class Owner(Person):
    """
    Owner model holding contact details and the owner's pets.

    Address, city and telephone are required by the input schemas
    (``petclinic_core.schemas.owner``); the model itself accepts any value so
    that it can be created empty and populated field by field.

    Example:
        >>> owner = Owner(first_name="George", last_name="Franklin")
        >>> owner.add_pet(Pet(name="Max"))
        >>> owner.get_pet("max").name
        'Max'
    """

    __tablename__ = "owners"

    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    city: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    telephone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    pets: Mapped[List[Pet]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by=Pet.name,
    )

    def add_pet(self, pet: Pet) -> None:
        """
        Add a pet to this owner.

        Only new pets are appended. A pet that already has an identifier is
        ignored without error, so re-submitting known pets never duplicates
        them.

        Args:
            pet: The pet to add
        """
        if pet.is_new:
            self.pets.append(pet)
        else:
            logger.debug("Ignoring already persisted pet %s for %r", pet.id, self)

    def get_pet(self, name: Optional[str], ignore_new: bool = False) -> Optional[Pet]:
        """
        Return the first pet with the given name, compared case-insensitively.

        Args:
            name: Name to look for
            ignore_new: Skip pets that have not been stored yet

        Returns:
            The matching pet, or None when no pet matches
        """
        if name is None:
            return None

        wanted = name.lower()
        for pet in self.pets:
            if pet.name is not None and pet.name.lower() == wanted:
                if not ignore_new or not pet.is_new:
                    return pet
        return None

    def get_pet_by_id(self, pet_id: Optional[int]) -> Optional[Pet]:
        """
        Return the stored pet with the given identifier.

        New pets are never returned, whatever the identifier asked for.

        Args:
            pet_id: Identifier to look for

        Returns:
            The matching pet, or None when no stored pet matches
        """
        for pet in self.pets:
            if not pet.is_new and pet.id == pet_id:
                return pet
        return None

    def add_visit(self, pet_id: Optional[int], visit: Optional[Visit]) -> None:
        """
        Attach a visit to one of this owner's stored pets.

        Args:
            pet_id: Identifier of the pet, required
            visit: The visit to add, required

        Raises:
            InvalidArgumentException: If ``pet_id`` or ``visit`` is None, or if
                no stored pet of this owner has that identifier
        """
        if pet_id is None:
            raise InvalidArgumentException(
                "Pet identifier must not be None", argument="pet_id"
            )
        if visit is None:
            raise InvalidArgumentException("Visit must not be None", argument="visit")

        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise InvalidArgumentException(
                "Invalid Pet identifier", argument="pet_id", value=pet_id
            )

        pet.add_visit(visit)

    def __str__(self) -> str:
        fields = (
            ("id", self.id),
            ("new", self.is_new),
            ("last_name", self.last_name),
            ("first_name", self.first_name),
            ("address", self.address),
            ("city", self.city),
            ("telephone", self.telephone),
        )
        rendered = ", ".join(f"{key} = {value!r}" for key, value in fields)
        return f"{self.__class__.__name__} [{rendered}]"
