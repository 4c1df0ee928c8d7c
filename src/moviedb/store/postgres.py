from typing import TYPE_CHECKING, Any, List, Optional

import psycopg
from psycopg import sql

from moviedb import db
from moviedb.errors import StoreError
from moviedb.log import get_logger

if TYPE_CHECKING:
    from moviedb.association.registry import EntityType

logger = get_logger(__name__)


class PostgresStore:
    """
    Data store backed by Postgres tables, one table per entity type.
    Table and column names are always passed as identifiers, never interpolated.
    """

    def _select(self, entity_type: "EntityType") -> sql.Composed:
        return sql.SQL("SELECT {fields} FROM {table}").format(
            fields=sql.SQL(", ").join(sql.Identifier(f) for f in entity_type.fields),
            table=sql.Identifier(entity_type.table),
        )

    def _run(self, action: str, entity_type: "EntityType", fetch, query, params=None):
        try:
            return fetch(query, params)
        except psycopg.Error as e:
            logger.error("Failed to %s %s: %s", action, entity_type.table, e)
            raise StoreError(f"Failed to {action} {entity_type.table}: {e}") from e

    def find_by_id(self, entity_type: "EntityType", id: Any) -> Optional[dict]:
        """Get a row by primary key."""
        query = sql.SQL("{select} WHERE {pk} = %s").format(
            select=self._select(entity_type),
            pk=sql.Identifier(entity_type.primary_key),
        )
        return self._run("read", entity_type, db.fetch_one, query, (id,))

    def find_where(self, entity_type: "EntityType", field: str, value: Any) -> List[dict]:
        """Get all rows whose field equals value, ordered by primary key."""
        if not entity_type.has_field(field):
            raise StoreError(f"{field} is not a field of {entity_type.name}")

        query = sql.SQL("{select} WHERE {field} = %s ORDER BY {pk}").format(
            select=self._select(entity_type),
            field=sql.Identifier(field),
            pk=sql.Identifier(entity_type.primary_key),
        )
        return self._run("read", entity_type, db.fetch_all, query, (value,))

    def list_all(self, entity_type: "EntityType") -> List[dict]:
        """List all rows ordered by primary key."""
        query = sql.SQL("{select} ORDER BY {pk}").format(
            select=self._select(entity_type),
            pk=sql.Identifier(entity_type.primary_key),
        )
        return self._run("read", entity_type, db.fetch_all, query)

    def insert(self, entity_type: "EntityType", values: dict) -> dict:
        """Insert a row and return it as stored."""
        unknown = [field for field in values if not entity_type.has_field(field)]
        if unknown:
            raise StoreError(f"Unknown fields for {entity_type.name}: {', '.join(unknown)}")

        columns = list(values)
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING {fields}").format(
            table=sql.Identifier(entity_type.table),
            columns=sql.SQL(", ").join(sql.Identifier(c) for c in columns),
            values=sql.SQL(", ").join(sql.Placeholder() for _ in columns),
            fields=sql.SQL(", ").join(sql.Identifier(f) for f in entity_type.fields),
        )
        return self._run("write", entity_type, db.fetch_one, query, tuple(values[c] for c in columns))
