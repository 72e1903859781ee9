"""
Error Types

Two failure kinds exist in the service:
- ConfigurationError: missing/invalid settings or an unreachable database at
  startup. Fatal, the process does not start.
- StorageError: a create or list statement failed. Recovered per request and
  returned to the client as a plain-text 500.
"""

import asyncio

import asyncpg


# Driver failures treated as storage errors. Anything else propagates.
STORAGE_EXCEPTIONS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncpg.InternalClientError,
    OSError,
    asyncio.TimeoutError,
)


class ConfigurationError(Exception):
    """Service cannot start with the current configuration"""


class StorageError(Exception):
    """A statement issued through the pool failed"""

    def __init__(self, action: str, cause: BaseException):
        self.action = action
        self.cause = cause
        super().__init__(format_storage_error(action, cause))


def format_storage_error(action: str, cause: BaseException) -> str:
    """
    Build the client-facing text for a storage failure.

    The driver's message is passed through unchanged, e.g.
    "Failed to create Node: insert or update on table ... violates foreign key constraint".
    """
    return f"Failed to {action}: {cause}"
