"""
Account store: registration and credential checks.

Usernames are unique across both roles. Login failures never reveal whether
the username exists, has another role, or the password was wrong.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateUsernameError, InvalidCredentialsError
from core.security import generate_salt, hash_password, verify_password
from core.session import Role
from database.models import Account
from database.repositories import AccountRepository

logger = logging.getLogger(__name__)


class AccountStore:
    """Create and verify patient/caregiver accounts."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.accounts = AccountRepository(session)

    async def exists(self, username: str) -> bool:
        return await self.accounts.exists(username)

    async def create(self, username: str, password: str, role: Role) -> Account:
        """
        Register a new account with a fresh salt.

        Raises:
            DuplicateUsernameError: If the username is taken by any role
        """
        if await self.accounts.exists(username):
            raise DuplicateUsernameError(username)

        salt = generate_salt()
        try:
            async with self.session.begin_nested():
                account = await self.accounts.create(
                    username=username,
                    salt=salt,
                    password_hash=hash_password(password, salt),
                    role=Role(role).value,
                )
        except IntegrityError as e:
            raise DuplicateUsernameError(username) from e

        logger.info(
            f"Account {username} created",
            extra={"username": username, "role": Role(role).value}
        )
        return account

    async def verify(self, username: str, password: str, role: Role) -> Account:
        """
        Check credentials for an account of the given role.

        Raises:
            InvalidCredentialsError: On unknown username, wrong role or wrong password
        """
        account = await self.accounts.get_by_username(username, role=Role(role).value)
        if account is None or not verify_password(password, account.password_hash):
            logger.info(
                f"Login failed for {username}",
                extra={"username": username, "role": Role(role).value}
            )
            raise InvalidCredentialsError()
        return account
