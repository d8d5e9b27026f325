from datetime import datetime, timezone
from typing import Optional

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.app.interface.i_ticket_map import ITicketMap
from src.service.concert_ticket.domain.entity.ticket_entity import TicketEntity
from src.service.concert_ticket.domain.enum.booking_status import BookingStatus
from src.service.concert_ticket.driven_adapter.model.ticket_model import TicketModel
from src.service.concert_ticket.driven_adapter.repo.counter_cell_sqlalchemy_impl import (
    SQL_BIGINT_MAX,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; stored values are always UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _storable(ticket_id: int) -> bool:
    # Ids above the signed 64-bit range are never allocated here and overflow the sqlite3 driver
    return 0 <= ticket_id <= SQL_BIGINT_MAX


class TicketMapSqlAlchemyImpl(ITicketMap):
    def __init__(self, database: Database) -> None:
        self.database = database

    @Logger.io
    def get(self, ticket_id: int) -> Optional[TicketEntity]:
        if not _storable(ticket_id):
            return None
        with self.database.session() as session:
            ticket_model = session.get(TicketModel, ticket_id)
            return self._model_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    def insert(self, ticket: TicketEntity) -> None:
        with self.database.session() as session:
            session.merge(self._entity_to_model(ticket))

    @Logger.io
    def remove(self, ticket_id: int) -> Optional[TicketEntity]:
        if not _storable(ticket_id):
            return None
        with self.database.session() as session:
            ticket_model = session.get(TicketModel, ticket_id)
            if ticket_model is None:
                return None
            removed = self._model_to_entity(ticket_model)
            session.delete(ticket_model)
            return removed

    def _entity_to_model(self, ticket: TicketEntity) -> TicketModel:
        return TicketModel(
            id=ticket.id,
            concert_name=ticket.concert_name,
            seat_number=ticket.seat_number,
            price=ticket.price,
            booking_status=ticket.booking_status.value,
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )

    def _model_to_entity(self, ticket_model: TicketModel) -> TicketEntity:
        return TicketEntity(
            id=ticket_model.id,
            concert_name=ticket_model.concert_name,
            seat_number=ticket_model.seat_number,
            price=ticket_model.price,
            booking_status=BookingStatus(ticket_model.booking_status),
            created_at=_as_utc(ticket_model.created_at),  # type: ignore[arg-type]
            updated_at=_as_utc(ticket_model.updated_at),
        )
