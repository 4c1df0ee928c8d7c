from dataclasses import dataclass
from enum import Enum
from typing import List

from moviedb.errors import (
    DuplicateAssociationError,
    DuplicateEntityTypeError,
    InvalidFieldError,
    UnknownAssociationError,
    UnknownEntityTypeError,
)
from moviedb.log import get_logger

logger = get_logger(__name__)


class Cardinality(str, Enum):
    ONE = "one"  # resolves to a single row or None
    MANY = "many"  # resolves to a list, possibly empty


@dataclass(frozen=True)
class EntityType:
    """A named record type backed by one table."""

    name: str
    table: str
    fields: tuple[str, ...]
    primary_key: str = "id"

    def has_field(self, field: str) -> bool:
        return field in self.fields


@dataclass(frozen=True)
class Association:
    """
    A declared link from an owner type to a target type.

    A target row matches when its target_key value equals the owner's
    owner_key value. Owner and target are referenced by type name.
    """

    owner: str
    name: str
    cardinality: Cardinality
    target: str
    owner_key: str
    target_key: str


class AssociationRegistry:
    """
    Process-wide table of entity types and the associations they own.

    Populated once at startup and only read afterwards, so it is shared
    between requests without locking.
    """

    def __init__(self):
        self._entities: dict[str, EntityType] = {}
        self._associations: dict[str, dict[str, Association]] = {}

    def define(self, entity_type: EntityType) -> EntityType:
        """Add an entity type to the registry."""
        if entity_type.name in self._entities:
            raise DuplicateEntityTypeError(
                f"Entity type {entity_type.name} is already defined"
            )
        if not entity_type.has_field(entity_type.primary_key):
            raise InvalidFieldError(
                f"Primary key {entity_type.primary_key} is not a field of {entity_type.name}"
            )

        self._entities[entity_type.name] = entity_type
        self._associations[entity_type.name] = {}
        logger.debug("Defined entity type %s (table %s)", entity_type.name, entity_type.table)
        return entity_type

    def entity(self, name: str) -> EntityType:
        """Get an entity type by name."""
        try:
            return self._entities[name]
        except KeyError:
            raise UnknownEntityTypeError(f"Unknown entity type: {name}") from None

    def register(
        self,
        owner: str,
        name: str,
        cardinality: Cardinality | str,
        target: str,
        owner_key: str,
        target_key: str,
    ) -> Association:
        """
        Declare an association on an owner type.

        Raises:
            UnknownEntityTypeError: owner or target was never defined
            DuplicateAssociationError: owner already has an association called name
            InvalidFieldError: a key field is missing from its entity type
        """
        owner_type = self.entity(owner)
        target_type = self.entity(target)

        if name in self._associations[owner]:
            raise DuplicateAssociationError(
                f"Association {owner}.{name} is already registered"
            )
        if not owner_type.has_field(owner_key):
            raise InvalidFieldError(f"{owner_key} is not a field of {owner}")
        if not target_type.has_field(target_key):
            raise InvalidFieldError(f"{target_key} is not a field of {target}")

        association = Association(
            owner=owner,
            name=name,
            cardinality=Cardinality(cardinality),
            target=target,
            owner_key=owner_key,
            target_key=target_key,
        )
        self._associations[owner][name] = association

        logger.debug(
            "Registered %s.%s (%s) -> %s on %s.%s = %s.%s",
            owner,
            name,
            association.cardinality.value,
            target,
            owner,
            owner_key,
            target,
            target_key,
        )
        return association

    def lookup(self, owner: str, name: str) -> Association:
        """Get the association called name on owner."""
        association = self._associations.get(owner, {}).get(name)
        if association is None:
            raise UnknownAssociationError(f"Unknown association: {owner}.{name}")
        return association

    def associations(self, owner: str) -> List[Association]:
        """List the associations of an owner type in registration order."""
        self.entity(owner)
        return list(self._associations[owner].values())
