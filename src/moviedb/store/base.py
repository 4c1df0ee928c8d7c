from typing import TYPE_CHECKING, Any, List, Optional, Protocol

if TYPE_CHECKING:
    from moviedb.association.registry import EntityType


class DataStore(Protocol):
    """
    Fetch-by-predicate capability the resolver and services read through.

    Rows are plain dicts keyed by field name. Failures are raised as
    StoreError.
    """

    def find_by_id(self, entity_type: "EntityType", id: Any) -> Optional[dict]:
        ...

    def find_where(self, entity_type: "EntityType", field: str, value: Any) -> List[dict]:
        ...

    def list_all(self, entity_type: "EntityType") -> List[dict]:
        ...

    def insert(self, entity_type: "EntityType", values: dict) -> dict:
        ...
