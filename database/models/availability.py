"""Availability model - an open (date, caregiver) slot."""
import datetime

from sqlalchemy import String, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Availability(Base):
    """Availability model."""

    __tablename__ = "availabilities"

    # Composite primary key: a caregiver publishes a date at most once
    date: Mapped[datetime.date] = mapped_column(Date, primary_key=True)
    caregiver_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("accounts.username", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<Availability(date={self.date}, caregiver='{self.caregiver_username}')>"
