from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.flight_booking.domain.entity.flight_entity import (
    MAX_PRICE,
    MAX_TOTAL_SEATS,
    FlightStatus,
)


class FlightCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'flight_number': 'AI101',
                'airline': 'Air India',
                'origin': 'Delhi',
                'destination': 'Mumbai',
                'departure_time': '2024-03-20T06:00:00Z',
                'arrival_time': '2024-03-20T08:15:00Z',
                'price': 5500,
                'total_seats': 180,
                'available_seats': 150,
                'aircraft': 'Boeing 737',
            }
        }
    )

    flight_number: str = Field(..., min_length=2, max_length=16)
    airline: str = Field(..., min_length=1, max_length=100)
    origin: str = Field(..., min_length=1, max_length=100)
    destination: str = Field(..., min_length=1, max_length=100)
    departure_time: datetime
    arrival_time: datetime
    price: int = Field(..., ge=0, le=MAX_PRICE)
    total_seats: int = Field(..., gt=0, le=MAX_TOTAL_SEATS)
    available_seats: Optional[int] = Field(
        None, ge=0, le=MAX_TOTAL_SEATS, description='Opening inventory; defaults to total_seats'
    )
    aircraft: str = Field(..., min_length=1, max_length=100)
    duration: Optional[str] = Field(
        None, max_length=20, description='Derived from the timestamps when omitted'
    )
    status: FlightStatus = FlightStatus.ACTIVE


class FlightStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'status': 'delayed'}})

    status: FlightStatus


class FlightResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    flight_number: str
    airline: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    duration: str
    price: int
    total_seats: int
    available_seats: int
    aircraft: str
    status: FlightStatus
    created_at: Optional[datetime] = None
