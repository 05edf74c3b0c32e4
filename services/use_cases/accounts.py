"""
Account use cases: registration and login.
"""
from core.session import Role, SessionContext
from services.use_cases.base import BaseUseCase


class RegisterAccountUseCase(BaseUseCase[str]):
    """Register a patient or caregiver; returns the username."""

    async def execute(self, username: str, password: str, role: Role) -> str:
        account = await self.accounts.create(username, password, role)
        return account.username


class LoginUseCase(BaseUseCase[SessionContext]):
    """Check credentials and build the session for the account."""

    async def execute(self, username: str, password: str, role: Role) -> SessionContext:
        account = await self.accounts.verify(username, password, role)
        return SessionContext.for_account(account.username, Role(account.role))
