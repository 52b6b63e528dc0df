"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.flight_booking.driven_adapter.model.account_model import AccountModel
from src.service.flight_booking.driven_adapter.model.booking_model import BookingModel
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel

__all__ = [
    'AccountModel',
    'BookingModel',
    'FlightModel',
]
