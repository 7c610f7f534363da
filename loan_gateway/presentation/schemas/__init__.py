"""Pydantic schemas for API request/response validation."""

from .decision import DecisionRequestSchema, DecisionResponseSchema

__all__ = [
    "DecisionRequestSchema",
    "DecisionResponseSchema",
]
