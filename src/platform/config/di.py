"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.concert_ticket.app.id_allocator import U64_MAX, IdAllocator
from src.service.concert_ticket.app.ticket_store import TicketStore
from src.service.concert_ticket.driven_adapter.memory.in_memory_counter_cell import (
    InMemoryCounterCell,
)
from src.service.concert_ticket.driven_adapter.memory.in_memory_ticket_map import (
    InMemoryTicketMap,
)
from src.service.concert_ticket.driven_adapter.repo.counter_cell_sqlalchemy_impl import (
    SQL_BIGINT_MAX,
    CounterCellSqlAlchemyImpl,
)
from src.service.concert_ticket.driven_adapter.repo.ticket_map_sqlalchemy_impl import (
    TicketMapSqlAlchemyImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (only touched when STORAGE_BACKEND == 'sqlite')
    database = providers.Singleton(
        Database,
        db_url=config_service.provided.DATABASE_URL,
        echo=config_service.provided.DB_ECHO,
    )

    # Persistence ports, selected by STORAGE_BACKEND
    counter_cell = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        sqlite=providers.Singleton(CounterCellSqlAlchemyImpl, database=database),
        memory=providers.Singleton(InMemoryCounterCell),
    )
    ticket_map = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        sqlite=providers.Singleton(TicketMapSqlAlchemyImpl, database=database),
        memory=providers.Singleton(InMemoryTicketMap),
    )
    max_ticket_id = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        sqlite=providers.Object(SQL_BIGINT_MAX),
        memory=providers.Object(U64_MAX),
    )

    # Core: one allocator + one store per process
    id_allocator = providers.Singleton(IdAllocator, counter_cell=counter_cell, max_id=max_ticket_id)
    ticket_store = providers.Singleton(
        TicketStore,
        id_allocator=id_allocator,
        ticket_map=ticket_map,
    )


container = Container()


def setup() -> None:
    container.config_service()
    if container.config_service().STORAGE_BACKEND == 'sqlite':
        container.database().create_db_and_tables()


def cleanup() -> None:
    if container.config_service().STORAGE_BACKEND == 'sqlite':
        container.database().dispose()
    container.reset_singletons()
