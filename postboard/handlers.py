"""HTTP handlers for posts and users.

Each handler issues at most one statement through its repository. Storage
failures are logged and collapsed into a bare status code: 404 for the
id-addressed operations (get, update, delete) and 500 for the rest, so a
missing row and a database outage look the same to a get/update/delete
caller.
"""

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import PlainTextResponse

from postboard.entities import (
    INT4_MAX,
    INT4_MIN,
    CreatePost,
    CreateUser,
    Message,
    Post,
    PostSummary,
    UpdatePost,
    User,
)
from postboard.errors import HandlerError, StorageError
from postboard.logger import get_logger
from postboard.post_repository import PostRepository
from postboard.user_repository import UserRepository

logger = get_logger(__name__)

router = APIRouter()

# posts.id is a SERIAL column
PostId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]

POST_DELETED = "Post deleted successfully"


def get_pool(request: Request) -> asyncpg.Pool:
    return request.app.state.pool


def get_post_repository(pool: asyncpg.Pool = Depends(get_pool)) -> PostRepository:
    return PostRepository(pool)


def get_user_repository(pool: asyncpg.Pool = Depends(get_pool)) -> UserRepository:
    return UserRepository(pool)


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Hello, world!"


@router.get("/posts", response_model=list[PostSummary])
async def get_posts(repo: PostRepository = Depends(get_post_repository)):
    try:
        return await repo.list_summaries()
    except StorageError:
        logger.exception("Failed to list posts")
        raise HandlerError(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/posts/{id}", response_model=Post)
async def get_post(id: PostId, repo: PostRepository = Depends(get_post_repository)):
    try:
        post = await repo.find_by_id(id)
    except StorageError:
        logger.exception(f"Failed to fetch post {id}")
        raise HandlerError(status.HTTP_404_NOT_FOUND)
    if post is None:
        raise HandlerError(status.HTTP_404_NOT_FOUND)
    return post


@router.post("/posts", response_model=Post)
async def create_post(
    new_post: CreatePost, repo: PostRepository = Depends(get_post_repository)
):
    try:
        return await repo.create(new_post)
    except StorageError:
        logger.exception("Failed to create post")
        raise HandlerError(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.put("/posts/{id}", response_model=Post)
async def update_post(
    id: PostId,
    updated_post: UpdatePost,
    repo: PostRepository = Depends(get_post_repository),
):
    try:
        post = await repo.update(id, updated_post)
    except StorageError:
        logger.exception(f"Failed to update post {id}")
        raise HandlerError(status.HTTP_404_NOT_FOUND)
    if post is None:
        raise HandlerError(status.HTTP_404_NOT_FOUND)
    return post


@router.delete("/posts/{id}", response_model=Message)
async def delete_post(id: PostId, repo: PostRepository = Depends(get_post_repository)):
    try:
        deleted = await repo.delete(id)
    except StorageError:
        logger.exception(f"Failed to delete post {id}")
        raise HandlerError(status.HTTP_404_NOT_FOUND)
    if deleted == 0:
        logger.info(f"Delete of post {id} matched no rows")
    return Message(message=POST_DELETED)


@router.post("/users", response_model=User)
async def create_user(
    new_user: CreateUser, repo: UserRepository = Depends(get_user_repository)
):
    try:
        return await repo.create(new_user)
    except StorageError:
        logger.exception("Failed to create user")
        raise HandlerError(status.HTTP_500_INTERNAL_SERVER_ERROR)
