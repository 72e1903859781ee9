"""
Edge Handler

Create and list operations over the edges table.
"""

import logging
import uuid
from typing import List

from schemas.graph import Edge
from dagstore.handlers.base import TableHandler

logger = logging.getLogger(__name__)


INSERT_EDGE = "INSERT INTO edges (id, source, target, dag_id) VALUES ($1, $2, $3, $4)"
SELECT_EDGES = "SELECT id, source, target, dag_id FROM edges"


class EdgeHandler(TableHandler):
    """
    Creates and lists Edge records.

    Self-loops, duplicate edges and edges whose endpoints belong to another
    DAG are all stored as given. Only database constraints can reject them.
    """

    async def create(self, source: uuid.UUID, target: uuid.UUID, dag_id: uuid.UUID) -> Edge:
        """
        Insert a new edge with a generated id.

        Args:
            source: Node the edge starts at
            target: Node the edge ends at
            dag_id: Owning DAG

        Returns:
            The inserted Edge record

        Raises:
            StorageError: If the insert fails
        """
        edge = Edge.new(source, target, dag_id)
        await self._insert(
            "create Edge",
            INSERT_EDGE,
            edge.id,
            edge.source,
            edge.target,
            edge.dag_id,
        )

        logger.info(f"Created Edge {edge.id}: {edge.source} -> {edge.target} in DAG {edge.dag_id}")
        return edge

    async def list(self) -> List[Edge]:
        """
        Fetch every edge across all DAGs.

        Raises:
            StorageError: If the select fails or a row cannot be decoded
        """
        edges = await self._select("fetch Edges", SELECT_EDGES, Edge.from_record)

        logger.debug(f"Fetched {len(edges)} Edges")
        return edges
