"""Appointment model - a reserved vaccination."""
import datetime

from sqlalchemy import Integer, String, Date, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from database.base import Base


class Appointment(Base):
    """Appointment model."""

    __tablename__ = "appointments"

    # Primary key, assigned as max(id) + 1 by the booking engine
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    # Participants
    caregiver_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("accounts.username"),
        nullable=False,
        index=True
    )
    patient_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("accounts.username"),
        nullable=False,
        index=True
    )

    # Appointment details
    vaccine_name: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("vaccines.name"),
        nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("caregiver_username", "date", name="uq_appointments_caregiver_date"),
        CheckConstraint("id > 0", name="ck_appointments_id_positive"),
    )

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, caregiver='{self.caregiver_username}', "
            f"patient='{self.patient_username}', vaccine='{self.vaccine_name}', date={self.date})>"
        )
