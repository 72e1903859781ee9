"""
Entity Handlers

One handler per table, each exposing create() and list().
"""

from dagstore.handlers.dag_handler import DAGHandler
from dagstore.handlers.node_handler import NodeHandler
from dagstore.handlers.edge_handler import EdgeHandler

__all__ = [
    "DAGHandler",
    "NodeHandler",
    "EdgeHandler",
]
