"""Repository class"""

from typing import Generic, TypeVar

import asyncpg
from pydantic import BaseModel

from postboard.database_operations import DatabaseOperations
from postboard.entities import BaseEntity, SchemaBase
from postboard.entity_mapper import EntityMapper
from postboard.query_builder import QueryBuilder

T = TypeVar("T", bound=BaseEntity)
C = TypeVar("C", bound=BaseModel)
U = TypeVar("U", bound=BaseModel)
S = TypeVar("S", bound=BaseEntity)


class Repository(Generic[T, C, U]):
    """Single-table CRUD where every method issues exactly one statement.

    Type Parameters:
        T: Entity read back from the table
        C: Model accepted by create()
        U: Model accepted by update(); every field is written (full replacement)

    Methods raise StorageError when the statement fails; they never retry.
    """

    def __init__(
        self,
        pool: asyncpg.Pool,
        schema: type[SchemaBase],
        entity_class: type[T],
        update_class: type[U] | None = None,
    ):
        if pool is None:
            raise ValueError("pool is required")
        if not getattr(schema, "table_name", None):
            raise ValueError("schema must declare a table_name")

        self.schema = schema
        self.table_name = schema.table_name
        self.entity_class = entity_class
        self.update_class = update_class

        # Composition: Inject dependencies
        self.db_ops = DatabaseOperations(pool)
        self.entity_mapper = EntityMapper(entity_class)

    @property
    def id_column(self) -> str:
        return str(getattr(self.schema, "id", "id"))

    def query(self) -> QueryBuilder:
        """Return a fresh query builder bound to this repository's table"""
        return QueryBuilder(self.table_name)

    async def find_all(self, shape: type[S] | None = None) -> list[S]:
        """Return every row ordered by id, selecting only the columns of ``shape``.

        ``shape`` defaults to the repository's entity class.
        """
        mapper = EntityMapper(shape) if shape is not None else self.entity_mapper
        query, params = (
            self.query().select(*mapper.columns).order_by_asc(self.id_column).build()
        )
        rows = await self.db_ops.fetch_all(query, params)
        return mapper.map_rows_to_entities(rows)  # type: ignore[return-value]

    async def find_by_id(self, entity_id: int) -> T | None:
        """Find entity by id, or None when no row matches"""
        query, params = (
            self.query()
            .select(*self.entity_mapper.columns)
            .where(self.id_column, entity_id)
            .build()
        )
        row = await self.db_ops.fetch_one(query, params)
        if row is None:
            return None
        return self.entity_mapper.map_row_to_entity(row)

    async def create(self, data: C) -> T:
        """Insert a row, letting storage generate the id, and return it"""
        query, params = self.query().build_insert(
            data.model_dump(), returning=self.entity_mapper.columns
        )
        row = await self.db_ops.fetch_one(query, params)
        return self.entity_mapper.map_row_to_entity(row)

    async def update(self, entity_id: int, data: U) -> T | None:
        """Overwrite every mutable column of a row; None when no row matches"""
        if self.update_class is None:
            raise ValueError(f"{self.table_name} does not support updates")

        query, params = (
            self.query()
            .where(self.id_column, entity_id)
            .build_update(data.model_dump(), returning=self.entity_mapper.columns)
        )
        row = await self.db_ops.fetch_one(query, params)
        if row is None:
            return None
        return self.entity_mapper.map_row_to_entity(row)

    async def delete(self, entity_id: int) -> int:
        """Delete a row by id and return the number of rows removed"""
        query, params = self.query().where(self.id_column, entity_id).build_delete()
        result = await self.db_ops.execute_query(query, params)
        # Command status is "DELETE <count>"
        return int(result.split()[-1]) if result else 0
