"""
Graph Types

Records stored in the dags, nodes and edges tables.
These types are returned by the entity handlers and serialized by the API.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union
import uuid


UUIDLike = Union[uuid.UUID, str]


def _as_uuid(value: UUIDLike, column: str = "id") -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if value is None:
        raise TypeError(f"column {column!r} is NULL")
    return uuid.UUID(str(value))


def _as_text(value: Any, column: str) -> str:
    if value is None:
        raise TypeError(f"column {column!r} is NULL")
    if not isinstance(value, str):
        raise TypeError(f"column {column!r} is not text: {value!r}")
    return value


@dataclass
class DAG:
    """Named directed graph"""
    id: uuid.UUID
    name: str

    @classmethod
    def new(cls, name: str) -> "DAG":
        """Create a DAG with a freshly generated random id"""
        return cls(id=uuid.uuid4(), name=name)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": str(self.id),
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DAG":
        """
        Create DAG from dictionary.

        Raises:
            TypeError: If a column is NULL or of the wrong type
            ValueError: If the id is not a UUID
        """
        return cls(
            id=_as_uuid(data["id"], "id"),
            name=_as_text(data["name"], "name"),
        )

    @classmethod
    def from_record(cls, row: Mapping[str, Any]) -> "DAG":
        """Create DAG from a database row"""
        return cls.from_dict(row)


@dataclass
class Node:
    """Labeled vertex belonging to a DAG"""
    id: uuid.UUID
    dag_id: uuid.UUID
    label: str

    @classmethod
    def new(cls, dag_id: UUIDLike, label: str) -> "Node":
        """Create a Node with a freshly generated random id"""
        return cls(id=uuid.uuid4(), dag_id=_as_uuid(dag_id, "dag_id"), label=label)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": str(self.id),
            "dag_id": str(self.dag_id),
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        """Create Node from dictionary"""
        return cls(
            id=_as_uuid(data["id"], "id"),
            dag_id=_as_uuid(data["dag_id"], "dag_id"),
            label=_as_text(data["label"], "label"),
        )

    @classmethod
    def from_record(cls, row: Mapping[str, Any]) -> "Node":
        """Create Node from a database row"""
        return cls.from_dict(row)


@dataclass
class Edge:
    """Directed connection between two nodes, tagged with its DAG"""
    id: uuid.UUID
    source: uuid.UUID
    target: uuid.UUID
    dag_id: uuid.UUID

    @classmethod
    def new(cls, source: UUIDLike, target: UUIDLike, dag_id: UUIDLike) -> "Edge":
        """Create an Edge with a freshly generated random id"""
        return cls(
            id=uuid.uuid4(),
            source=_as_uuid(source, "source"),
            target=_as_uuid(target, "target"),
            dag_id=_as_uuid(dag_id, "dag_id"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": str(self.id),
            "source": str(self.source),
            "target": str(self.target),
            "dag_id": str(self.dag_id),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Edge":
        """Create Edge from dictionary"""
        return cls(
            id=_as_uuid(data["id"], "id"),
            source=_as_uuid(data["source"], "source"),
            target=_as_uuid(data["target"], "target"),
            dag_id=_as_uuid(data["dag_id"], "dag_id"),
        )

    @classmethod
    def from_record(cls, row: Mapping[str, Any]) -> "Edge":
        """Create Edge from a database row"""
        return cls.from_dict(row)
