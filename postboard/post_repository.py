import asyncpg

from postboard.entities import (
    CreatePost,
    Post,
    PostSchema,
    PostSummary,
    UpdatePost,
)
from postboard.repository import Repository


class PostRepository(Repository[Post, CreatePost, UpdatePost]):
    def __init__(self, pool: asyncpg.Pool):
        super().__init__(
            pool,
            schema=PostSchema,
            entity_class=Post,
            update_class=UpdatePost,
        )

    async def list_summaries(self) -> list[PostSummary]:
        """All posts without their author column"""
        return await self.find_all(PostSummary)
