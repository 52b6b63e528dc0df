from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('account.id'), nullable=False, index=True
    )
    flight_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('flight.id'), nullable=False, index=True
    )
    passenger_name: Mapped[str] = mapped_column(String(255), nullable=False)
    passenger_email: Mapped[str] = mapped_column(String(255), nullable=False)
    passenger_phone: Mapped[str] = mapped_column(String(32), nullable=False)
    seat_numbers: Mapped[List[str]] = mapped_column(JSON, nullable=False)
    total_price: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='confirmed')
    pnr: Mapped[str] = mapped_column(String(6), nullable=False, unique=True, index=True)
    booked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f'<BookingModel(id={self.id}, pnr={self.pnr}, status={self.status})>'
