"""
Pet model for the petclinic-core package.

This module contains the Pet SQLAlchemy model: a named, typed animal with
a birth date and the history of its visits.
"""

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import NamedEntity
from .pet_type import PetType
from .visit import Visit

if TYPE_CHECKING:
    from .owner import Owner


class Pet(NamedEntity):
    """
    Pet model with its type and visit history.

    A pet belongs to exactly one owner and exclusively owns its visits.
    The pet type is shared reference data and is never owned by the pet.
    Visits are loaded ordered by date; in memory they keep insertion order.
    """

    __tablename__ = "pets"

    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    type_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("types.id"), nullable=True
    )

    owner_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("owners.id"), nullable=True, index=True
    )

    type: Mapped[Optional[PetType]] = relationship()

    owner: Mapped[Optional["Owner"]] = relationship(back_populates="pets")

    visits: Mapped[List[Visit]] = relationship(
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by=Visit.date,
    )

    def add_visit(self, visit: Visit) -> None:
        """
        Append a visit to this pet's history.

        A visit already recorded for this pet is not added again. Used
        directly when the caller has already resolved the pet; otherwise go
        through ``Owner.add_visit`` so the pet identifier is checked.

        Args:
            visit: The visit to record
        """
        if visit not in self.visits:
            self.visits.append(visit)

    def get_visits(self) -> List[Visit]:
        """Visits sorted by date, keeping insertion order for equal dates."""
        return sorted(
            self.visits, key=lambda visit: (visit.date is None, visit.date or date.min)
        )
