import asyncpg
from pydantic import BaseModel

from postboard.entities import CreateUser, User, UserSchema
from postboard.repository import Repository


class UserRepository(Repository[User, CreateUser, BaseModel]):
    """Users are only ever created through the API, so no update model is bound."""

    def __init__(self, pool: asyncpg.Pool):
        super().__init__(pool, schema=UserSchema, entity_class=User)
