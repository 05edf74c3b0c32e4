"""Account repository for database operations."""
from typing import Optional

from sqlalchemy import select, func

from database.models import Account
from database.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for Account model operations."""

    model_class = Account

    async def get_by_username(self, username: str, role: Optional[str] = None) -> Optional[Account]:
        """Get account by username, optionally requiring a role."""
        query = select(Account).where(Account.username == username)
        if role is not None:
            query = query.where(Account.role == role)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists(self, username: str) -> bool:
        """Check if a username is registered (any role)."""
        result = await self.session.execute(
            select(func.count()).select_from(Account).where(Account.username == username)
        )
        return (result.scalar() or 0) > 0

    async def create(
        self,
        username: str,
        salt: bytes,
        password_hash: bytes,
        role: str,
    ) -> Account:
        """Create new account."""
        account = Account(
            username=username,
            salt=salt,
            password_hash=password_hash,
            role=role,
        )

        self.add(account)
        await self.flush()
        return account
