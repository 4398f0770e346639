from typing import Annotated, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import Field as ModelField

# Bounds of a PostgreSQL INTEGER (int4) column
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

Int4 = Annotated[int, ModelField(ge=INT4_MIN, le=INT4_MAX)]

T = TypeVar("T")


class Field(Generic[T]):
    """Type-safe column reference for schema classes.

    Usage:
        class PostSchema(SchemaBase):
            id = Field[int]("id")
            title = Field[str]("title")

    This allows for:
        builder.where(PostSchema.id, post_id)
        builder.select(PostSchema.id, PostSchema.title)
    """

    def __init__(self, column_name: str):
        """
        Args:
            column_name: The actual database column name
        """
        self._column_name = column_name

    def __str__(self) -> str:
        """Return the column name when used in queries"""
        return self._column_name

    def __repr__(self) -> str:
        return f"Field({self._column_name})"


class SchemaBase:
    """Base class for table column definitions with type-safe fields."""

    table_name: ClassVar[str]


class PostSchema(SchemaBase):
    table_name = "posts"

    id = Field[int]("id")
    user_id = Field[int | None]("user_id")
    title = Field[str]("title")
    body = Field[str]("body")


class UserSchema(SchemaBase):
    table_name = "users"

    id = Field[int]("id")
    username = Field[str]("username")
    email = Field[str]("email")


class BaseEntity(BaseModel):
    """Base class for rows read back from the database."""

    id: int


class Post(BaseEntity):
    user_id: int | None = None
    title: str
    body: str


class PostSummary(BaseEntity):
    """Shape returned when listing posts: the author column is not selected."""

    title: str
    body: str


class User(BaseEntity):
    username: str
    email: str


# Request bodies
class CreatePost(BaseModel):
    user_id: Int4 | None = None
    title: str
    body: str


class UpdatePost(BaseModel):
    """Full replacement of a post's mutable columns; a missing user_id clears it."""

    title: str
    body: str
    user_id: Int4 | None = None


class CreateUser(BaseModel):
    username: str
    email: str


class Message(BaseModel):
    message: str
