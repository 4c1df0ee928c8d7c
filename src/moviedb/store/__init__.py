"""
Store

Data stores the resolver and services read through: an in-memory store
and a Postgres store with the same interface.
"""

from moviedb.store.base import DataStore
from moviedb.store.memory import InMemoryStore
from moviedb.store.postgres import PostgresStore

__all__ = ["DataStore", "InMemoryStore", "PostgresStore"]
