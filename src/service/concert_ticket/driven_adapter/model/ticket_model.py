from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TicketModel(Base):
    __tablename__ = 'concert_ticket'

    # Ids come from IdAllocator, never from the database
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    concert_name: Mapped[str] = mapped_column(Text, nullable=False)
    seat_number: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    booking_status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
