"""
Test Configuration and Fixtures

This module provides:
- Environment setup (in-memory storage, test log directory) before app imports
- Unit/integration markers derived from the test path
- Store fixtures over in-memory adapters (unit) and a throwaway SQLite file (integration)
- FastAPI TestClient with a fresh store per test

Architecture:
- Unit tests (test/**/unit/): pure in-memory, deterministic clock
- Integration tests (test/**/integration/): real SQLite file or the HTTP app
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # The HTTP app under test runs on in-memory adapters; SQLite tests build their own Database
    os.environ['STORAGE_BACKEND'] = 'memory'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.database.orm_db_setting import Database  # noqa: E402
from src.service.concert_ticket.app.id_allocator import IdAllocator  # noqa: E402
from src.service.concert_ticket.app.ticket_store import TicketStore  # noqa: E402
from src.service.concert_ticket.domain.value_object.ticket_payload import (  # noqa: E402
    TicketPayload,
)
from src.service.concert_ticket.driven_adapter.memory.in_memory_counter_cell import (  # noqa: E402
    InMemoryCounterCell,
)
from src.service.concert_ticket.driven_adapter.memory.in_memory_ticket_map import (  # noqa: E402
    InMemoryTicketMap,
)
from src.service.concert_ticket.driven_adapter.repo.counter_cell_sqlalchemy_impl import (  # noqa: E402
    CounterCellSqlAlchemyImpl,
)
from src.service.concert_ticket.driven_adapter.repo.ticket_map_sqlalchemy_impl import (  # noqa: E402
    TicketMapSqlAlchemyImpl,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = str(item.path)
        if f'{os.sep}unit{os.sep}' in path:
            item.add_marker(pytest.mark.unit)
        elif f'{os.sep}integration{os.sep}' in path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Shared helpers
# =============================================================================
class FakeClock:
    """Deterministic clock: every call returns a time one step after the previous one."""

    def __init__(
        self,
        start: datetime = datetime(2026, 1, 1, 20, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


@pytest.fixture
def rock_night_payload() -> TicketPayload:
    return TicketPayload(concert_name='Rock Night', seat_number='A1', price=50.0)


@pytest.fixture
def jazz_night_payload() -> TicketPayload:
    return TicketPayload(concert_name='Jazz Night', seat_number='A1', price=60.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# In-memory store (unit tests)
# =============================================================================
@pytest.fixture
def counter_cell() -> InMemoryCounterCell:
    return InMemoryCounterCell()


@pytest.fixture
def ticket_map() -> InMemoryTicketMap:
    return InMemoryTicketMap()


@pytest.fixture
def ticket_store(
    counter_cell: InMemoryCounterCell, ticket_map: InMemoryTicketMap, clock: FakeClock
) -> TicketStore:
    return TicketStore(
        id_allocator=IdAllocator(counter_cell),
        ticket_map=ticket_map,
        clock=clock,
    )


# =============================================================================
# SQLite store (integration tests)
# =============================================================================
@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f'sqlite:///{tmp_path / "concert_ticket_test.sqlite3"}'


@pytest.fixture
def sqlite_database(sqlite_url: str) -> Generator[Database, None, None]:
    database = Database(sqlite_url)
    database.create_db_and_tables()
    yield database
    database.dispose()


def build_sqlite_store(database: Database, clock: FakeClock) -> TicketStore:
    return TicketStore(
        id_allocator=IdAllocator(CounterCellSqlAlchemyImpl(database)),
        ticket_map=TicketMapSqlAlchemyImpl(database),
        clock=clock,
    )


@pytest.fixture
def sqlite_store(sqlite_database: Database, clock: FakeClock) -> TicketStore:
    return build_sqlite_store(sqlite_database, clock)


@pytest.fixture
def sqlite_store_factory(
    sqlite_url: str, clock: FakeClock
) -> Generator[Callable[[], TicketStore], None, None]:
    """Build a fresh store (new engine) over the same SQLite file, simulating a process restart"""
    databases: list[Database] = []

    def _factory() -> TicketStore:
        database = Database(sqlite_url)
        database.create_db_and_tables()
        databases.append(database)
        return build_sqlite_store(database, clock)

    yield _factory
    for database in databases:
        database.dispose()


# =============================================================================
# HTTP app (integration tests)
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient whose lifespan wires DI; cleanup resets singletons so each test gets a fresh store"""
    from src.service.concert_ticket.main import app

    with TestClient(app) as test_client:
        yield test_client
