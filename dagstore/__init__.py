"""
DAG Store

HTTP service for creating and listing DAGs, their nodes and their edges in
PostgreSQL. Contains:
- adapters: asyncpg connection pool
- handlers: per-table create/list operations
- api: FastAPI application and entry point
"""

__version__ = "0.1.0"
