"""
Account / session API schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr


class RegisterAccountRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Asha Rao',
                'email': 'asha@flights.com',
                'password': 'P@ssw0rd',
                'phone': '+919876543210',
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=72,
        description='Password must be 8-72 characters (bcrypt limit)',
    )
    phone: str = Field(..., min_length=1, max_length=32)


class LoginRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'asha@flights.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    is_admin: bool
    created_at: Optional[datetime] = None


class SessionResponse(BaseModel):
    """Issued bearer token plus the account it resolves to"""

    token: str
    token_type: str = 'bearer'
    account: AccountResponse
