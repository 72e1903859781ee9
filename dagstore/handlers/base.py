"""
Table Handler Base

Shared statement execution for the entity handlers: one borrowed connection,
one statement, driver and row-decoding failures converted to StorageError.
"""

import logging
from typing import Any, Callable, List, Mapping, TypeVar

from dagstore.adapters.postgres_pool import PostgresPool
from dagstore.errors import STORAGE_EXCEPTIONS, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Rows that do not fit the record type (NULL or mistyped columns)
DECODE_EXCEPTIONS = (ValueError, TypeError, KeyError)


class TableHandler:
    """Base for handlers that own a single table"""

    def __init__(self, pool: PostgresPool):
        self.pool = pool

    def _fail(self, action: str, cause: BaseException) -> StorageError:
        error = StorageError(action, cause)
        logger.error(str(error))
        return error

    async def _insert(self, action: str, query: str, *args: Any) -> None:
        try:
            async with self.pool.acquire() as conn:
                await conn.execute(query, *args)
        except STORAGE_EXCEPTIONS as e:
            raise self._fail(action, e) from e

    async def _select(
        self,
        action: str,
        query: str,
        from_record: Callable[[Mapping[str, Any]], T],
    ) -> List[T]:
        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(query)
        except STORAGE_EXCEPTIONS as e:
            raise self._fail(action, e) from e

        try:
            return [from_record(row) for row in rows]
        except DECODE_EXCEPTIONS as e:
            raise self._fail(action, e) from e
