from typing import List, Sequence

from src.platform.exception.exceptions import DomainError


class SeatAllocator:
    """Deterministic six-abreast labels (1A..1F, 2A..) counted from the flight's sold seats."""

    seat_letters: Sequence[str] = tuple('ABCDEF')

    @classmethod
    def label_for(cls, seat_index: int) -> str:
        row, column = divmod(seat_index, len(cls.seat_letters))
        return f'{row + 1}{cls.seat_letters[column]}'

    @classmethod
    def allocate(cls, *, first_seat_index: int, seat_count: int) -> List[str]:
        if first_seat_index < 0:
            raise DomainError('Seat index must not be negative')
        if seat_count <= 0:
            raise DomainError('Seat count must be positive')
        return [cls.label_for(first_seat_index + offset) for offset in range(seat_count)]

    @classmethod
    def allocate_after_decrement(
        cls, *, total_seats: int, available_after: int, seat_count: int
    ) -> List[str]:
        # Seats already sold before this reservation took its share
        return cls.allocate(
            first_seat_index=total_seats - available_after - seat_count, seat_count=seat_count
        )
