from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class FlightModel(Base):
    __tablename__ = 'flight'
    __table_args__ = (
        CheckConstraint('total_seats > 0', name='ck_flight_total_seats_positive'),
        CheckConstraint(
            'available_seats >= 0 AND available_seats <= total_seats',
            name='ck_flight_available_seats_range',
        ),
        CheckConstraint('price >= 0', name='ck_flight_price_non_negative'),
        CheckConstraint(
            "status IN ('active', 'cancelled', 'delayed')", name='ck_flight_status_valid'
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[str] = mapped_column(String(16), nullable=False, unique=True, index=True)
    airline: Mapped[str] = mapped_column(String(100), nullable=False)
    origin: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    destination: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    departure_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    arrival_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    aircraft: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='active')
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (
            f'<FlightModel(id={self.id}, flight_number={self.flight_number}, '
            f'available_seats={self.available_seats}/{self.total_seats})>'
        )
