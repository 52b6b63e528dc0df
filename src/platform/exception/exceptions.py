class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    error_kind: str = 'internal_failure'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    error_kind = 'validation_error'

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    error_kind = 'forbidden'

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    error_kind = 'not_found'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    error_kind = 'conflict'

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    error_kind = 'unauthenticated'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class InvalidSessionError(AuthenticationError):
    error_kind = 'invalid_session'


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidCredentialsError(LoginError):
    error_kind = 'invalid_credentials'


class DuplicateAccountError(DomainError):
    error_kind = 'duplicate_account'


class DuplicateFlightError(ConflictError):
    error_kind = 'duplicate_flight'


class InsufficientInventoryError(DomainError):
    error_kind = 'insufficient_inventory'


class FlightNotBookableError(DomainError):
    error_kind = 'flight_not_bookable'


class BookingNotCancellableError(DomainError):
    error_kind = 'booking_not_cancellable'


class InternalFailureError(CustomBaseError):
    error_kind = 'internal_failure'

    def __init__(self, message: str = 'Internal server error') -> None:
        super().__init__(message, 500)
