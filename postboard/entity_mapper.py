from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class EntityMapper(Generic[T]):
    """Composition class for entity mapping operations"""

    def __init__(self, entity_class: type[T]):
        self.entity_class = entity_class

    @property
    def columns(self) -> list[str]:
        """Columns that populate the entity, in declaration order"""
        return list(self.entity_class.model_fields)

    def map_row_to_entity(self, row: Any) -> T:
        """Map database row to entity"""
        return self.entity_class(**dict(row))

    def map_rows_to_entities(self, rows: list[Any]) -> list[T]:
        """Map database rows to entities"""
        return [self.map_row_to_entity(row) for row in rows]
