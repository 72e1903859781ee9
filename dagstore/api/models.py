"""
API Models

Pydantic request and response bodies for the DAG Store API.
"""

import uuid

from pydantic import BaseModel


# Request models
class CreateDAGRequest(BaseModel):
    """Body of POST /dags"""
    name: str


class CreateNodeRequest(BaseModel):
    """Body of POST /nodes"""
    dag_id: uuid.UUID
    label: str


class CreateEdgeRequest(BaseModel):
    """Body of POST /edges"""
    source: uuid.UUID
    target: uuid.UUID
    dag_id: uuid.UUID


# Response models
class DAGResponse(BaseModel):
    """Single DAG"""
    id: uuid.UUID
    name: str


class NodeResponse(BaseModel):
    """Single node"""
    id: uuid.UUID
    dag_id: uuid.UUID
    label: str


class EdgeResponse(BaseModel):
    """Single edge"""
    id: uuid.UUID
    source: uuid.UUID
    target: uuid.UUID
    dag_id: uuid.UUID


class HealthResponse(BaseModel):
    status: str
    service: str
    database_connected: bool
    timestamp: str  # ISO 8601
