import sys
import os
from typing import AsyncGenerator

# Cheap password hashing for the whole test run; read when settings load
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure project root is on sys.path so `import console` works
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from database.base import create_engine, create_session_maker, init_db
from database.models import Account
from database.repositories import AccountRepository
from core.session import Role, SessionContext
from services.booking import BookingEngine


PASSWORD = "Secret#123"


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    """Create async engine on a throwaway SQLite file."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(async_engine):
    return create_session_maker(async_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def booking(async_engine, session_maker) -> BookingEngine:
    """Booking engine bound to the test database."""
    return BookingEngine(session_maker=session_maker, engine=async_engine)


async def _make_account(session: AsyncSession, username: str, role: Role) -> Account:
    return await AccountRepository(session).create(
        username=username,
        salt=b"\x00" * 16,
        password_hash=b"\x00" * 32,
        role=role.value,
    )


@pytest_asyncio.fixture
async def sample_accounts(db_session: AsyncSession):
    """Caregivers alice, bob and patients pat, quinn created directly in db_session."""
    accounts = {
        "alice": await _make_account(db_session, "alice", Role.CAREGIVER),
        "bob": await _make_account(db_session, "bob", Role.CAREGIVER),
        "pat": await _make_account(db_session, "pat", Role.PATIENT),
        "quinn": await _make_account(db_session, "quinn", Role.PATIENT),
    }
    return accounts


@pytest_asyncio.fixture
async def registered(booking: BookingEngine):
    """Caregivers alice, bob and patients pat, quinn registered through the engine."""
    for username in ("alice", "bob"):
        await booking.register(username, PASSWORD, Role.CAREGIVER)
    for username in ("pat", "quinn"):
        await booking.register(username, PASSWORD, Role.PATIENT)


async def _login(booking: BookingEngine, username: str, role: Role) -> SessionContext:
    return await booking.login(SessionContext.anonymous(), username, PASSWORD, role)


@pytest_asyncio.fixture
async def alice(booking, registered) -> SessionContext:
    return await _login(booking, "alice", Role.CAREGIVER)


@pytest_asyncio.fixture
async def bob(booking, registered) -> SessionContext:
    return await _login(booking, "bob", Role.CAREGIVER)


@pytest_asyncio.fixture
async def pat(booking, registered) -> SessionContext:
    return await _login(booking, "pat", Role.PATIENT)


@pytest_asyncio.fixture
async def quinn(booking, registered) -> SessionContext:
    return await _login(booking, "quinn", Role.PATIENT)
