"""
HTTP API

FastAPI application exposing the entity handlers.
"""
