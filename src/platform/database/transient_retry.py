"""
Retry of an atomic unit after transient storage faults.

Only storage-level faults are retried (lock timeouts, serialization failures,
dropped connections, a unique-index race on a generated key). Integrity errors
on anything else (foreign keys, checks, natural keys) are definitive and
propagate on the first attempt, as do business errors raised by the unit.
"""

from typing import Awaitable, Callable, Tuple, TypeVar

import anyio
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from src.platform.exception.exceptions import InternalFailureError
from src.platform.logging.loguru_io import Logger


_T = TypeVar('_T')


def is_transient_fault(exc: BaseException, *, generated_keys: Tuple[str, ...] = ()) -> bool:
    """
    `generated_keys` names unique columns whose values the unit draws itself;
    a collision on one of them succeeds on a fresh draw.
    """
    if isinstance(exc, IntegrityError):
        message = str(exc.orig).lower()
        is_unique_violation = 'unique' in message or 'duplicate' in message
        return is_unique_violation and any(key in message for key in generated_keys)
    if isinstance(exc, OperationalError):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


async def run_with_transient_retry(
    operation: Callable[[], Awaitable[_T]],
    *,
    label: str,
    max_attempts: int,
    backoff_seconds: float,
    generated_keys: Tuple[str, ...] = (),
) -> _T:
    attempt = 1
    while True:
        try:
            return await operation()
        except DBAPIError as e:
            if not is_transient_fault(e, generated_keys=generated_keys):
                raise
            if attempt >= max_attempts:
                Logger.base.error(
                    f'❌ [RETRY] {label} failed after {attempt} attempts: {type(e).__name__}'
                )
                raise InternalFailureError(f'{label} could not be completed') from e
            Logger.base.warning(
                f'🔁 [RETRY] {label} attempt {attempt}/{max_attempts} hit {type(e).__name__}, retrying'
            )
            await anyio.sleep(backoff_seconds * attempt)
            attempt += 1
