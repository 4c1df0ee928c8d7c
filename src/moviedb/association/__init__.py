"""
Association

Declares how entity types relate to each other and resolves those
declarations against a data store.
"""

from moviedb.association.registry import (
    Association,
    AssociationRegistry,
    Cardinality,
    EntityType,
)
from moviedb.association.resolver import RelationResolver

__all__ = [
    "Association",
    "AssociationRegistry",
    "Cardinality",
    "EntityType",
    "RelationResolver",
]
