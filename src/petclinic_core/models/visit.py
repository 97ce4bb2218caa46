"""
Visit model for the petclinic-core package.

A visit is a dated note attached to exactly one pet.
"""

import datetime
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseEntity

if TYPE_CHECKING:
    from .pet import Pet


class Visit(BaseEntity):
    """
    Visit model recording a dated description for a pet.

    The visit date defaults to today when the visit is constructed without
    one.
    """

    __tablename__ = "visits"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Visit, defaulting the date to today."""
        if "date" not in kwargs:
            kwargs["date"] = datetime.date.today()

        super().__init__(**kwargs)

    pet_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("pets.id"), nullable=True, index=True
    )

    date: Mapped[Optional[datetime.date]] = mapped_column(
        "visit_date", Date, nullable=True
    )

    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    pet: Mapped[Optional["Pet"]] = relationship(back_populates="visits")
