from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.app.interface.i_counter_cell import ICounterCell
from src.service.concert_ticket.driven_adapter.model.id_counter_model import IdCounterModel


TICKET_ID_COUNTER = 'ticket_id'

# SQLite INTEGER (and Postgres BIGINT) are signed 64-bit
SQL_BIGINT_MAX = 2**63 - 1


class CounterCellSqlAlchemyImpl(ICounterCell):
    """Counter stored as one row of the id_counter table."""

    def __init__(self, database: Database, *, name: str = TICKET_ID_COUNTER) -> None:
        self.database = database
        self.name = name

    @Logger.io
    def load(self) -> int:
        with self.database.session() as session:
            row = session.get(IdCounterModel, self.name)
            return row.value if row is not None else 0

    @Logger.io
    def save(self, value: int) -> None:
        with self.database.session() as session:
            row = session.get(IdCounterModel, self.name)
            if row is None:
                session.add(IdCounterModel(name=self.name, value=value))
            else:
                row.value = value
