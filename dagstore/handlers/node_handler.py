"""
Node Handler

Create and list operations over the nodes table.
"""

import logging
import uuid
from typing import List

from schemas.graph import Node
from dagstore.handlers.base import TableHandler

logger = logging.getLogger(__name__)


INSERT_NODE = "INSERT INTO nodes (id, dag_id, label) VALUES ($1, $2, $3)"
SELECT_NODES = "SELECT id, dag_id, label FROM nodes"


class NodeHandler(TableHandler):
    """
    Creates and lists Node records.

    The dag_id is not checked against the dags table here. If the schema
    declares a foreign key, a dangling reference comes back as a StorageError.
    """

    async def create(self, dag_id: uuid.UUID, label: str) -> Node:
        """
        Insert a new node with a generated id.

        Args:
            dag_id: Owning DAG
            label: Node label

        Returns:
            The inserted Node record

        Raises:
            StorageError: If the insert fails
        """
        node = Node.new(dag_id, label)
        await self._insert("create Node", INSERT_NODE, node.id, node.dag_id, node.label)

        logger.info(f"Created Node {node.id} in DAG {node.dag_id}")
        return node

    async def list(self) -> List[Node]:
        """
        Fetch every node across all DAGs.

        Raises:
            StorageError: If the select fails or a row cannot be decoded
        """
        nodes = await self._select("fetch Nodes", SELECT_NODES, Node.from_record)

        logger.debug(f"Fetched {len(nodes)} Nodes")
        return nodes
