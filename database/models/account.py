"""Account model - represents a patient or caregiver login."""
from datetime import datetime

from sqlalchemy import String, LargeBinary, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from database.base import Base


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    # Primary key (case-sensitive, unique across roles)
    username: Mapped[str] = mapped_column(String(255), primary_key=True)

    # Credentials: bcrypt salt ("$2b$<cost>$" + 22 chars) and the 60-byte hash
    salt: Mapped[bytes] = mapped_column(LargeBinary(32), nullable=False)
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(64), nullable=False)

    # Role: patient / caregiver
    role: Mapped[str] = mapped_column(String(20), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_accounts_role", "role"),
    )

    def __repr__(self) -> str:
        return f"<Account(username='{self.username}', role='{self.role}')>"
