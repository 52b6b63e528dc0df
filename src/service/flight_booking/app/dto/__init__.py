from src.service.flight_booking.app.dto.admin_stats import AdminStats
from src.service.flight_booking.app.dto.booking_detail import AccountSummary, BookingDetail


__all__ = ['AccountSummary', 'AdminStats', 'BookingDetail']
