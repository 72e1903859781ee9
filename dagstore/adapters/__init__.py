"""
Database Adapters

Provides the PostgreSQL connection pool shared by the handlers.
"""

from dagstore.adapters.postgres_pool import PostgresPool

__all__ = ["PostgresPool"]
