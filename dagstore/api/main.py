"""
DAG Store API

FastAPI service for creating and listing DAGs, nodes and edges in PostgreSQL.

HTTP Endpoints:
- POST /dags    - Create a DAG
- GET  /dags    - List all DAGs
- POST /nodes   - Create a node
- GET  /nodes   - List all nodes
- POST /edges   - Create an edge
- GET  /edges   - List all edges
- GET  /health  - Service and database status
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List

import asyncpg
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from dagstore import __version__
from dagstore.adapters.postgres_pool import PostgresPool
from dagstore.api.models import (
    CreateDAGRequest,
    CreateEdgeRequest,
    CreateNodeRequest,
    DAGResponse,
    EdgeResponse,
    HealthResponse,
    NodeResponse,
)
from dagstore.config import HOST, LOG_FORMAT, PORT, PoolConfig, load_environment, log_level
from dagstore.errors import ConfigurationError, StorageError
from dagstore.handlers import DAGHandler, EdgeHandler, NodeHandler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for the database pool"""
    # Startup
    logger.info("Starting DAG Store API...")

    # Raises ConfigurationError, which aborts startup
    pool = PostgresPool(PoolConfig.from_env())
    await pool.connect()
    app.state.pool = pool

    yield

    # Shutdown
    app.state.pool = None
    await pool.close()
    logger.info("DAG Store API shutdown complete")


app = FastAPI(
    title="DAG Store API",
    description="Create and list DAGs, nodes and edges",
    version=__version__,
    lifespan=lifespan,
)


def storage_error_response(exc: StorageError) -> PlainTextResponse:
    """Render a storage failure as a plain-text 500 carrying the driver message"""
    return PlainTextResponse(str(exc), status_code=500)


@app.exception_handler(StorageError)
async def handle_storage_error(request: Request, exc: StorageError) -> PlainTextResponse:
    return storage_error_response(exc)


# Dependencies
def get_pool(request: Request) -> PostgresPool:
    """Shared pool created by the lifespan handler"""
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise StorageError(
            "acquire connection",
            asyncpg.InterfaceError("connection pool is not initialized"),
        )
    return pool


def get_dag_handler(pool: PostgresPool = Depends(get_pool)) -> DAGHandler:
    return DAGHandler(pool)


def get_node_handler(pool: PostgresPool = Depends(get_pool)) -> NodeHandler:
    return NodeHandler(pool)


def get_edge_handler(pool: PostgresPool = Depends(get_pool)) -> EdgeHandler:
    return EdgeHandler(pool)


@app.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Detailed health status"""
    pool = getattr(request.app.state, "pool", None)
    return {
        "status": "healthy",
        "service": "dag-store",
        "database_connected": pool is not None and pool.is_connected,
        "timestamp": datetime.now().isoformat(),
    }


# DAGs
@app.post("/dags", response_model=DAGResponse)
async def create_dag(req: CreateDAGRequest, handler: DAGHandler = Depends(get_dag_handler)):
    """Create a DAG with a server-generated id"""
    dag = await handler.create(name=req.name)
    return dag.to_dict()


@app.get("/dags", response_model=List[DAGResponse])
async def list_dags(handler: DAGHandler = Depends(get_dag_handler)):
    """List all DAGs (order unspecified)"""
    dags = await handler.list()
    return [dag.to_dict() for dag in dags]


# Nodes
@app.post("/nodes", response_model=NodeResponse)
async def create_node(req: CreateNodeRequest, handler: NodeHandler = Depends(get_node_handler)):
    """
    Create a node in a DAG.

    The dag_id is not checked for existence by the service.
    """
    node = await handler.create(dag_id=req.dag_id, label=req.label)
    return node.to_dict()


@app.get("/nodes", response_model=List[NodeResponse])
async def list_nodes(handler: NodeHandler = Depends(get_node_handler)):
    """List all nodes (order unspecified)"""
    nodes = await handler.list()
    return [node.to_dict() for node in nodes]


# Edges
@app.post("/edges", response_model=EdgeResponse)
async def create_edge(req: CreateEdgeRequest, handler: EdgeHandler = Depends(get_edge_handler)):
    """
    Create an edge between two nodes.

    Self-loops and duplicates are accepted.
    """
    edge = await handler.create(source=req.source, target=req.target, dag_id=req.dag_id)
    return edge.to_dict()


@app.get("/edges", response_model=List[EdgeResponse])
async def list_edges(handler: EdgeHandler = Depends(get_edge_handler)):
    """List all edges (order unspecified)"""
    edges = await handler.list()
    return [edge.to_dict() for edge in edges]


async def check_database(config: PoolConfig) -> None:
    """
    Open and close a pool once so an unreachable database fails before serving.

    Raises:
        ConfigurationError: If the first connection attempt fails
    """
    pool = PostgresPool(config)
    await pool.connect()
    await pool.close()


def main() -> None:
    """
    Run the API server on the fixed address.

    Environment Variables:
        DATABASE_URL: PostgreSQL connection string (required)
        LOG_LEVEL: Logging level (default: INFO)
    """
    # Load .env before reading LOG_LEVEL and DATABASE_URL
    load_environment()

    # Configure logging
    logging.basicConfig(
        level=log_level(),
        format=LOG_FORMAT,
    )

    try:
        config = PoolConfig.from_env()
        asyncio.run(check_database(config))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info(f"Database: {config.redacted_dsn}")
    logger.info(f"Server running at http://{HOST}:{PORT}")

    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
