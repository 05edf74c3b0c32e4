"""Vaccine model - a named pool of available doses."""
from sqlalchemy import String, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Vaccine(Base):
    """Vaccine model."""

    __tablename__ = "vaccines"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    doses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("doses >= 0", name="ck_vaccines_doses_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Vaccine(name='{self.name}', doses={self.doses})>"
