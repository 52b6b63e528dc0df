from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import ENV_EXAMPLE_FILE, ENV_FILE


_ENV_FILE = ENV_FILE if ENV_FILE.exists() else ENV_EXAMPLE_FILE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Flight Booking Engine'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    # Session lifetime in minutes; unset issues tokens without an exp claim
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
    BCRYPT_ROUNDS: int = 12

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'flight_booking'

    # Full async URL override, e.g. sqlite+aiosqlite:///./flight_booking.db
    DATABASE_URL: Optional[str] = None

    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False
    # Skip create_all at startup when Alembic owns the schema
    SKIP_DB_INIT: bool = False

    # Reserve / cancel retry on transient storage faults
    DB_TRANSIENT_RETRY_ATTEMPTS: int = 5
    DB_TRANSIENT_RETRY_BACKOFF_SECONDS: float = 0.05

    # Catalog
    CATALOG_TIMEZONE: str = 'UTC'

    # Bootstrap
    BOOTSTRAP_ADMIN: bool = True
    SEED_SAMPLE_FLIGHTS: bool = True
    ADMIN_EMAIL: str = 'admin@flights.com'
    ADMIN_PASSWORD: SecretStr = SecretStr('change_me_admin')
    ADMIN_NAME: str = 'Admin'
    ADMIN_PHONE: str = '+1234567890'

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@{self.POSTGRES_SERVER}:'
            f'{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL_ASYNC.startswith('sqlite')


settings = Settings()  # type: ignore
