import attrs

from src.platform.exception.exceptions import DomainError


@attrs.frozen
class PassengerInfo:
    name: str
    email: str
    phone: str

    @classmethod
    def create(cls, *, name: str, email: str, phone: str) -> 'PassengerInfo':
        name, email, phone = name.strip(), email.strip().lower(), phone.strip()
        if not name or not email or not phone:
            raise DomainError('Passenger name, email and phone are required')
        return cls(name=name, email=email, phone=phone)
