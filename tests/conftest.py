"""Pytest configuration for async testing.

This configuration ensures:
1. Settings load without a .env file (SQLite in-memory database)
2. Database fixtures are isolated (fresh in-memory database per test)
3. Entity factories are shared by unit and integration tests
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

from datetime import UTC, datetime  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from schoolvault.domain.entities import Account, Membership, Student  # noqa: E402
from schoolvault.domain.enums import GlobalRole, MembershipRole  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# =============================================================================
# Entity factories
# =============================================================================


def create_test_account(
    account_id: UUID | None = None,
    email: str | None = None,
    global_role: GlobalRole = GlobalRole.PROFESSOR,
    institution_id: UUID | None = None,
    is_active: bool = True,
    deleted_at: datetime | None = None,
    deleted_by: UUID | None = None,
    created_at: datetime | None = None,
) -> Account:
    """Helper to create an Account for testing.

    Email defaults to a unique address derived from the id.
    """
    account_id = account_id or uuid7()
    now = created_at or datetime.now(UTC)
    return Account(
        id=account_id,
        email=email or f"user_{account_id.hex}@school.example",
        name="Test User",
        global_role=global_role,
        institution_id=institution_id,
        is_active=is_active,
        deleted_at=deleted_at,
        deleted_by=deleted_by,
        created_at=now,
        updated_at=now,
    )


def create_test_student(
    institution_id: UUID,
    student_id: UUID | None = None,
    registration_number: str | None = None,
    is_active: bool = True,
    deleted_at: datetime | None = None,
    deleted_by: UUID | None = None,
    created_at: datetime | None = None,
) -> Student:
    """Helper to create a Student for testing."""
    now = created_at or datetime.now(UTC)
    return Student(
        id=student_id or uuid7(),
        institution_id=institution_id,
        name="Test Student",
        registration_number=registration_number,
        is_active=is_active,
        deleted_at=deleted_at,
        deleted_by=deleted_by,
        created_at=now,
        updated_at=now,
    )


def create_test_membership(
    account_id: UUID,
    institution_id: UUID,
    role: MembershipRole = MembershipRole.PROFESSOR,
) -> Membership:
    """Helper to create a Membership for testing."""
    return Membership(
        id=uuid7(),
        account_id=account_id,
        institution_id=institution_id,
        role=role,
        created_at=datetime.now(UTC),
    )


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory SQLite database with all tables.

    Each test gets its own engine (StaticPool keeps the single in-memory
    connection alive), so no data persists between tests.
    """
    from schoolvault.infrastructure.persistence.database import Database

    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()

    yield db

    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide a session on the test database."""
    async with test_database.get_session() as session:
        yield session


async def create_institution(session, name: str = "Escola Municipal Norte") -> UUID:
    """Insert an institution row and return its id."""
    from schoolvault.infrastructure.persistence.models import InstitutionModel

    institution = InstitutionModel(id=uuid7(), name=name)
    session.add(institution)
    await session.commit()
    return institution.id
