"""
Pet type formatting.

Translates between the display name of a pet type and its record. The set
of known types comes from a ``PetTypeLookup`` supplied by the surrounding
application; it is assumed small and already loaded.

Example:
    >>> lookup = StaticPetTypeLookup.from_names(["cat", "dog"])
    >>> formatter = PetTypeFormatter(lookup)
    >>> formatter.parse("dog").id
    2
    >>> formatter.print(formatter.parse("cat"))
    'cat'
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from .exceptions import PetTypeParseException
from .models import PetType

if TYPE_CHECKING:
    from .utils.config import ClinicConfig

logger = logging.getLogger(__name__)

NULL_PLACEHOLDER = "<null>"


class PetTypeLookup(ABC):
    """Source of the known pet types."""

    @abstractmethod
    def find_pet_types(self) -> List[PetType]:
        """
        Return all known pet types.

        Returns:
            List of pet types, in display order
        """


class StaticPetTypeLookup(PetTypeLookup):
    """Pet type lookup backed by a fixed in-memory list."""

    def __init__(self, pet_types: Iterable[PetType]):
        self._pet_types = list(pet_types)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "StaticPetTypeLookup":
        """Build the lookup from type names, numbering them from 1."""
        return cls(
            PetType(id=index, name=name) for index, name in enumerate(names, start=1)
        )

    @classmethod
    def from_config(cls, config: "ClinicConfig") -> "StaticPetTypeLookup":
        """Build the lookup from the pet types listed in the clinic configuration."""
        return cls.from_names(config.pet_types)

    def find_pet_types(self) -> List[PetType]:
        return list(self._pet_types)


class PetTypeFormatter:
    """Prints pet types as their name and parses names back into pet types."""

    def __init__(self, lookup: PetTypeLookup):
        self.lookup = lookup

    def print(self, pet_type: PetType) -> str:
        """
        Return the display name of a pet type.

        Args:
            pet_type: The pet type to print

        Returns:
            The type name, or ``"<null>"`` when the type has no name
        """
        name = pet_type.name
        return name if name is not None else NULL_PLACEHOLDER

    def parse(self, text: str) -> PetType:
        """
        Resolve a type name to a known pet type.

        The name must match exactly, case included.

        Args:
            text: The type name to resolve

        Returns:
            The first known pet type with that name

        Raises:
            PetTypeParseException: If no known type has that name
        """
        for pet_type in self.lookup.find_pet_types():
            if pet_type.name == text:
                return pet_type

        logger.debug("No pet type named %r", text)
        raise PetTypeParseException(text)
