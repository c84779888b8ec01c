"""Shared entity building blocks."""

from ._base import Entity, EntityTable, utcnow

__all__ = ["Entity", "EntityTable", "utcnow"]
