import attrs


@attrs.frozen
class AdminStats:
    total_flights: int
    total_bookings: int
    total_users: int
    total_revenue: int
