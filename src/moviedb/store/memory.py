from typing import TYPE_CHECKING, Any, List, Optional

from moviedb.errors import StoreError

if TYPE_CHECKING:
    from moviedb.association.registry import EntityType


class InMemoryStore:
    """
    Data store holding rows in per-table lists.

    Rows come back as copies in insertion order, so callers can attach
    associations without touching stored data.
    """

    def __init__(self):
        self._tables: dict[str, list[dict]] = {}

    def _rows(self, entity_type: "EntityType") -> list[dict]:
        return self._tables.setdefault(entity_type.table, [])

    def find_by_id(self, entity_type: "EntityType", id: Any) -> Optional[dict]:
        for row in self._rows(entity_type):
            if row[entity_type.primary_key] == id:
                return dict(row)
        return None

    def find_where(self, entity_type: "EntityType", field: str, value: Any) -> List[dict]:
        if not entity_type.has_field(field):
            raise StoreError(f"{field} is not a field of {entity_type.name}")
        return [dict(row) for row in self._rows(entity_type) if row.get(field) == value]

    def list_all(self, entity_type: "EntityType") -> List[dict]:
        return [dict(row) for row in self._rows(entity_type)]

    def insert(self, entity_type: "EntityType", values: dict) -> dict:
        """Insert a row, assigning the next integer primary key when none is given."""
        unknown = [field for field in values if not entity_type.has_field(field)]
        if unknown:
            raise StoreError(f"Unknown fields for {entity_type.name}: {', '.join(unknown)}")

        rows = self._rows(entity_type)
        pk = entity_type.primary_key
        row = {field: None for field in entity_type.fields}
        row.update(values)

        if row[pk] is None:
            row[pk] = max((r[pk] for r in rows), default=0) + 1
        elif any(r[pk] == row[pk] for r in rows):
            raise StoreError(f"Duplicate {entity_type.name} {pk}: {row[pk]}")

        rows.append(row)
        return dict(row)
