from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Booking engine business metrics

    Tracks reservation/cancellation outcomes and per-flight seat availability.
    """

    def __init__(self) -> None:
        self.seat_reservation_requests = Counter(
            'seat_reservation_requests_total',
            'Total seat reservation requests',
            ['result'],  # result: success or the error kind
        )

        self.seat_reservation_duration = Histogram(
            'seat_reservation_duration_seconds',
            'Seat reservation processing time',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.seats_reserved = Counter(
            'seats_reserved_total',
            'Seats taken by confirmed bookings',
        )

        self.booking_cancellations = Counter(
            'booking_cancellations_total',
            'Total booking cancellation requests',
            ['result'],
        )

        self.seat_availability = Gauge(
            'seat_availability_ratio',
            'Available seats ratio per flight',
            ['flight_number'],
        )

    def record_seat_reservation(self, *, result: str, duration: float, seat_count: int = 0) -> None:
        self.seat_reservation_requests.labels(result=result).inc()
        self.seat_reservation_duration.observe(duration)
        if seat_count:
            self.seats_reserved.inc(seat_count)

    def record_cancellation(self, *, result: str) -> None:
        self.booking_cancellations.labels(result=result).inc()

    def update_seat_availability(
        self, *, flight_number: str, available_seats: int, total_seats: int
    ) -> None:
        ratio = available_seats / total_seats if total_seats else 0.0
        self.seat_availability.labels(flight_number=flight_number).set(ratio)


# Global metrics instance
metrics = BookingMetrics()
