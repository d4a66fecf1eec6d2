"""Storage layer for the blog API.

This package provides:
- PostStore: the storage capability the resource service depends on
- MongoPostStore: MongoDB backend via Motor
- InMemoryPostStore: process-local backend for tests and local runs
"""

from .base import UPDATABLE_FIELDS, PostStore
from .memory import InMemoryPostStore
from .mongo import MongoPostStore

__all__ = [
    "PostStore",
    "UPDATABLE_FIELDS",
    "MongoPostStore",
    "InMemoryPostStore",
]
