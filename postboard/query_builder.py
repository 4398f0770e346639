"""
Small immutable builder for single-table statements.
The goal is to produce parameterized SQL without executing it.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from postboard.entities import Field

Column = str | Field[Any]


class QueryBuilder:
    """
    Builds SELECT, INSERT, UPDATE and DELETE statements for one table.

    Placeholders use asyncpg's ``$n`` style. Values always travel as
    parameters; only column and table names are interpolated.

    Usage:
        builder = QueryBuilder("posts")
        query, params = builder.select("id", "title").where("id", post_id).build()
        query, params = builder.where("id", post_id).build_update(
            {"title": "T"}, returning=["id", "title"]
        )
    """

    def __init__(self, table_name: str):
        self.table_name = table_name
        self.select_fields: list[str] = []
        self.conditions: list[tuple[str, Any]] = []
        self.order_by_parts: list[str] = []

    def _clone(self) -> "QueryBuilder":
        """Create a copy of the current QueryBuilder instance"""
        new_builder = QueryBuilder(self.table_name)
        new_builder.select_fields = self.select_fields.copy()
        new_builder.conditions = self.conditions.copy()
        new_builder.order_by_parts = self.order_by_parts.copy()
        return new_builder

    def select(self, *fields: Column) -> "QueryBuilder":
        """Set the SELECT columns. Defaults to * when none are provided."""
        new_builder = self._clone()
        new_builder.select_fields = [str(field) for field in fields if str(field)]
        return new_builder

    def where(self, field: Column, value: Any) -> "QueryBuilder":
        """Add a ``field = value`` condition, joined to the others with AND."""
        new_builder = self._clone()
        new_builder.conditions.append((str(field), value))
        return new_builder

    def order_by_asc(self, field: Column) -> "QueryBuilder":
        """Add an ORDER BY ... ASC on the given field. Can be chained."""
        new_builder = self._clone()
        new_builder.order_by_parts.append(f"{field} ASC")
        return new_builder

    def _where_clause(self, param_offset: int = 0) -> tuple[str, list[Any]]:
        """Render the WHERE clause with placeholders numbered after ``param_offset``"""
        if not self.conditions:
            return "", []
        parts = [
            f"{field} = ${param_offset + i + 1}"
            for i, (field, _) in enumerate(self.conditions)
        ]
        return f" WHERE {' AND '.join(parts)}", [value for _, value in self.conditions]

    @staticmethod
    def _returning_clause(returning: Iterable[Column] | None) -> str:
        if not returning:
            return ""
        return f" RETURNING {', '.join(str(column) for column in returning)}"

    def build(self) -> tuple[str, list[Any]]:
        """Build the SELECT query and parameters"""
        columns = ", ".join(self.select_fields) if self.select_fields else "*"
        where_clause, params = self._where_clause()
        query = f"SELECT {columns} FROM {self.table_name}{where_clause}"
        if self.order_by_parts:
            query += f" ORDER BY {', '.join(self.order_by_parts)}"
        return query, params

    def build_insert(
        self, values: Mapping[str, Any], returning: Iterable[Column] | None = None
    ) -> tuple[str, list[Any]]:
        """Build an INSERT of one row; column order follows ``values``."""
        if not values:
            raise ValueError("Cannot insert a row without columns")
        columns = ", ".join(values.keys())
        placeholders = ", ".join(f"${i + 1}" for i in range(len(values)))
        query = (
            f"INSERT INTO {self.table_name} ({columns}) VALUES ({placeholders})"
            f"{self._returning_clause(returning)}"
        )
        return query, list(values.values())

    def build_update(
        self, values: Mapping[str, Any], returning: Iterable[Column] | None = None
    ) -> tuple[str, list[Any]]:
        """Build an UPDATE; SET parameters come first, WHERE parameters follow."""
        if not values:
            raise ValueError("Cannot update without columns to set")
        if not self.conditions:
            raise ValueError("Cannot update without WHERE conditions")
        set_clause = ", ".join(f"{column} = ${i + 1}" for i, column in enumerate(values))
        where_clause, where_params = self._where_clause(param_offset=len(values))
        query = (
            f"UPDATE {self.table_name} SET {set_clause}{where_clause}"
            f"{self._returning_clause(returning)}"
        )
        return query, list(values.values()) + where_params

    def build_delete(self) -> tuple[str, list[Any]]:
        """Build a DELETE restricted by the WHERE conditions"""
        if not self.conditions:
            raise ValueError("Cannot delete without WHERE conditions")
        where_clause, params = self._where_clause()
        return f"DELETE FROM {self.table_name}{where_clause}", params
