from typing import Iterable, List, Optional

from moviedb.association.registry import AssociationRegistry, Cardinality
from moviedb.errors import CardinalityViolationError, MissingKeyValueError
from moviedb.log import get_logger
from moviedb.store.base import DataStore

logger = get_logger(__name__)


class RelationResolver:
    """
    Materializes declared associations for single records.

    Every resolution issues exactly one find_where read against the store.
    Nothing is cached or batched across records, so attaching an association
    to N records costs N queries.
    """

    def __init__(self, registry: AssociationRegistry):
        self.registry = registry

    def resolve(self, owner: str, instance: Optional[dict], name: str, store: DataStore):
        """
        Resolve association name on an instance of the owner type.

        Returns:
            list of target rows for a "many" association (empty when nothing
            matches); a single row or None for a "one" association
        """
        association = self.registry.lookup(owner, name)
        target_type = self.registry.entity(association.target)

        if instance is None:
            raise MissingKeyValueError(
                f"Cannot resolve {owner}.{name}: instance was not loaded"
            )

        value = instance.get(association.owner_key)
        if value is None:
            raise MissingKeyValueError(
                f"Cannot resolve {owner}.{name}: "
                f"instance has no value for {association.owner_key}"
            )

        rows = store.find_where(target_type, association.target_key, value)
        logger.debug(
            "Resolved %s.%s for %s=%r: %d row(s)",
            owner,
            name,
            association.owner_key,
            value,
            len(rows),
        )

        if association.cardinality is Cardinality.MANY:
            return list(rows)

        if len(rows) > 1:
            raise CardinalityViolationError(
                f"{owner}.{name} expects at most one {association.target}, "
                f"found {len(rows)} with {association.target_key}={value!r}"
            )
        return rows[0] if rows else None

    def attach(self, owner: str, instance: dict, name: str, store: DataStore) -> dict:
        """Return a copy of instance with the resolved association under key name."""
        resolved = self.resolve(owner, instance, name, store)
        return {**instance, name: resolved}

    def attach_each(
        self,
        owner: str,
        instances: Iterable[dict],
        name: str,
        store: DataStore,
    ) -> List[dict]:
        """Attach the association to each instance, one query per instance."""
        return [self.attach(owner, instance, name, store) for instance in instances]
