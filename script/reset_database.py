#!/usr/bin/env python3
"""
Database Reset Script
Reset the flight booking database

Features:
1. Drop & Recreate Database - PostgreSQL database dropped and created, SQLite file removed
2. Run Alembic Migrations - create the latest schema
3. Bootstrap - administrator account and sample catalog (unless disabled in settings)

Notes:
- Never run this against a database that is serving traffic
"""

import asyncio
import os
from pathlib import Path
import subprocess
import time

from sqlalchemy import create_engine, make_url, text

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.flight_booking.app.command.bootstrap_use_case import BootstrapUseCase
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)

DB_WAIT_SECONDS = 1


def _get_sync_url(async_url: str) -> str:
    """Convert async database URL to sync URL"""
    if async_url.startswith('postgresql+asyncpg://'):
        return async_url.replace('postgresql+asyncpg://', 'postgresql://')
    return async_url


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Parse database URL and return (server_url, db_name)"""
    sync_url = _get_sync_url(database_url)
    db_name = sync_url.split('/')[-1]
    server_url = sync_url.rsplit('/', 1)[0]
    return server_url, db_name


def _terminate_connections(conn, db_name: str) -> None:
    """Terminate all connections to the specified database"""
    conn.execute(
        text("""
        SELECT pg_terminate_backend(pid)
        FROM pg_stat_activity
        WHERE datname = :db_name AND pid <> pg_backend_pid();
        """),
        {'db_name': db_name},
    )


def _drop_and_create_postgres(database_url: str) -> None:
    server_url, db_name = _parse_db_connection(database_url)
    admin_engine = create_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')

    try:
        with admin_engine.connect() as conn:
            _terminate_connections(conn, db_name)

            conn.execute(text(f'DROP DATABASE IF EXISTS {db_name};'))
            print(f"   ✅ Database '{db_name}' dropped")

            time.sleep(DB_WAIT_SECONDS)

            conn.execute(text(f'CREATE DATABASE {db_name};'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        admin_engine.dispose()


def _remove_sqlite_file(database_url: str) -> None:
    database = make_url(database_url).database
    if not database or database == ':memory:':
        return
    path = Path(database)
    if path.exists():
        path.unlink()
        print(f"   ✅ SQLite file '{path}' removed")


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


def drop_and_recreate_database() -> None:
    database_url = settings.DATABASE_URL_ASYNC
    print(f'Database URL: {make_url(database_url).render_as_string()}')

    print('🗑️ Dropping database...')
    if settings.IS_SQLITE:
        _remove_sqlite_file(database_url)
    else:
        _drop_and_create_postgres(database_url)

    print('🏗️ Running database migrations...')
    _run_alembic_migrations()


async def bootstrap() -> None:
    database = Database(settings=settings)
    try:
        await BootstrapUseCase(
            uow_factory=lambda: SqlAlchemyUnitOfWork(session_maker=database.session_maker),
            password_hasher=BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            settings=settings,
        ).run()
    finally:
        await database.dispose()


def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        drop_and_recreate_database()
        print()

        print('🌱 Bootstrapping admin and sample catalog...')
        asyncio.run(bootstrap())
        print()

        print('=' * 50)
        print('✅ Database reset completed!')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1) from e


if __name__ == '__main__':
    main()
