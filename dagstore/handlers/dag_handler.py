"""
DAG Handler

Create and list operations over the dags table.
"""

import logging
from typing import List

from schemas.graph import DAG
from dagstore.handlers.base import TableHandler

logger = logging.getLogger(__name__)


INSERT_DAG = "INSERT INTO dags (id, name) VALUES ($1, $2)"
SELECT_DAGS = "SELECT id, name FROM dags"


class DAGHandler(TableHandler):
    """
    Creates and lists DAG records.

    Names are stored as given; empty and duplicate names are accepted.
    """

    async def create(self, name: str) -> DAG:
        """
        Insert a new DAG with a generated id.

        Args:
            name: DAG name

        Returns:
            The inserted DAG record

        Raises:
            StorageError: If the insert fails
        """
        dag = DAG.new(name)
        await self._insert("create DAG", INSERT_DAG, dag.id, dag.name)

        logger.info(f"Created DAG {dag.id} ({dag.name!r})")
        return dag

    async def list(self) -> List[DAG]:
        """
        Fetch every DAG, in whatever order the database returns them.

        Raises:
            StorageError: If the select fails or a row cannot be decoded
        """
        dags = await self._select("fetch DAGs", SELECT_DAGS, DAG.from_record)

        logger.debug(f"Fetched {len(dags)} DAGs")
        return dags
