"""
PostgreSQL Pool Adapter

Holds the asyncpg connection pool shared by every request handler.
Created once at startup and closed on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from dagstore.config import PoolConfig
from dagstore.errors import ConfigurationError

logger = logging.getLogger(__name__)


class PostgresPool:
    """
    Async PostgreSQL pool wrapper for the DAG store.

    Handlers borrow one connection per statement through acquire(); they never
    close or reconfigure the pool.

    Example usage:
        pool = PostgresPool(PoolConfig.from_env())
        await pool.connect()

        async with pool.acquire() as conn:
            rows = await conn.fetch("SELECT id, name FROM dags")

        await pool.close()
    """

    def __init__(self, config: PoolConfig):
        self.config = config
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        """Check if the pool has been created and not closed"""
        return self._pool is not None

    async def connect(self) -> None:
        """
        Create the connection pool.

        No retry is attempted: a failed first connection is fatal.

        Raises:
            ConfigurationError: If the database cannot be reached with the DSN
        """
        if self._pool is not None:
            return

        logger.info(f"Connecting to PostgreSQL at {self.config.redacted_dsn}...")

        try:
            self._pool = await asyncpg.create_pool(
                self.config.dsn,
                min_size=self.config.min_size,
                max_size=self.config.max_size,
                command_timeout=self.config.command_timeout,
            )
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise ConfigurationError(f"Failed to connect to database: {e}") from e

        logger.info(
            f"Database connection pool created "
            f"(min_size={self.config.min_size}, max_size={self.config.max_size})"
        )

    async def close(self) -> None:
        """Close the connection pool"""
        if self._pool is None:
            return

        pool = self._pool
        self._pool = None
        await pool.close()
        logger.info("Database connection pool closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Borrow a connection for a single statement.

        Waits at most acquire_timeout seconds for a free connection.

        Raises:
            asyncpg.InterfaceError: If the pool is not connected
            asyncio.TimeoutError: If no connection frees up in time
        """
        if self._pool is None:
            raise asyncpg.InterfaceError("connection pool is not initialized")

        async with self._pool.acquire(timeout=self.config.acquire_timeout) as conn:
            yield conn
