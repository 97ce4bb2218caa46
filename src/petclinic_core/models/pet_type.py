"""
Pet type model for the petclinic-core package.
"""

from .base import NamedEntity


class PetType(NamedEntity):
    """A named category of pet, e.g. ``dog`` or ``cat``. Shared reference data."""

    __tablename__ = "types"
