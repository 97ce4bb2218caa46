"""
Base entity classes for all SQLAlchemy models in the petclinic-core package.

This module provides the declarative base and the small hierarchy every
clinic entity inherits from:

- ``BaseEntity``: optional integer identifier and the new/persisted predicate
- ``NamedEntity``: adds a ``name`` column (pet types, specialties, pets)
- ``Person``: adds ``first_name`` and ``last_name`` (owners, vets)

An entity without an identifier has never been stored. The persistence
layer assigns identifiers on save; nothing in this package does.

Example:
    >>> from petclinic_core.models import PetType
    >>> dog = PetType(name="dog")
    >>> dog.is_new
    True
    >>> dog.id = 1
    >>> dog.identity
    Saved(id=1)
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from sqlalchemy import Integer, String, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


@dataclass(frozen=True)
class Unsaved:
    """Identity state of an entity that has not been stored yet."""


@dataclass(frozen=True)
class Saved:
    """Identity state of a stored entity, carrying its identifier."""

    id: int


Identity = Union[Unsaved, Saved]


class Base(DeclarativeBase):
    """Declarative base class shared by all petclinic models."""


class BaseEntity(Base):
    """
    Abstract base class providing the identifier shared by all entities.

    The identifier is optional: ``None`` means the entity is new. The
    predicate is recomputed from ``id`` on every access so that a caller
    assigning an identifier (typically the persistence layer after a flush)
    is immediately reflected.

    Attributes:
        id (int, optional): Primary key, unset until the entity is stored

    Note:
        This is an abstract base class. Concrete models must define a
        ``__tablename__`` attribute.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    @property
    def is_new(self) -> bool:
        """True when the entity has no identifier yet."""
        return self.id is None

    @property
    def identity(self) -> Identity:
        """
        Tagged identity state of the entity.

        Returns:
            ``Unsaved()`` for a new entity, ``Saved(id)`` otherwise.

        Example:
            >>> match pet.identity:
            ...     case Unsaved():
            ...         print("draft")
            ...     case Saved(id=pet_id):
            ...         print(f"stored as {pet_id}")
        """
        if self.id is None:
            return Unsaved()
        return Saved(self.id)

    def __repr__(self) -> str:
        """
        Return string representation of the entity.

        Returns:
            String in format: <ModelName(id=...)>
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the column values of the entity to a dictionary.

        Dates are converted to ISO format strings; relationships are not
        included.

        Returns:
            Dictionary with column names as keys.
        """
        result = {}
        for attr in inspect(self.__class__).column_attrs:
            value = getattr(self, attr.key)
            if isinstance(value, date):
                result[attr.key] = value.isoformat()
            else:
                result[attr.key] = value
        return result

    def update_fields(self, **kwargs: Any) -> None:
        """
        Update multiple fields on the entity in a single operation.

        Args:
            **kwargs: Field names as keys and new values as values.

        Raises:
            AttributeError: If any field name doesn't exist on the entity.
        """
        for field, value in kwargs.items():
            if hasattr(self, field):
                setattr(self, field, value)
            else:
                raise AttributeError(
                    f"'{self.__class__.__name__}' has no attribute '{field}'"
                )

    @classmethod
    def get_table_name(cls) -> str:
        """Get the database table name for this model."""
        return cls.__tablename__


class NamedEntity(BaseEntity):
    """Abstract entity with a ``name`` attribute."""

    __abstract__ = True

    name: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    def __str__(self) -> str:
        return str(self.name)


class Person(BaseEntity):
    """Abstract entity representing a person."""

    __abstract__ = True

    first_name: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    last_name: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    @property
    def full_name(self) -> str:
        """First and last name joined by a space, skipping missing parts."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
