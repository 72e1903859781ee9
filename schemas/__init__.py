"""
DAG Store - Record Types

Graph records shared by the handlers and the HTTP API.
"""

from schemas.graph import DAG, Node, Edge

__all__ = [
    "DAG",
    "Node",
    "Edge",
]
