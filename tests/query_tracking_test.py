"""Tests for query tracking functionality"""

import pytest

from postboard.db_context import DatabaseManager, QueryTracker
from postboard.entities import CreatePost, CreateUser, UpdatePost


class TestQueryTracker:
    def test_disabled_tracker_ignores_queries(self):
        tracker = QueryTracker()
        tracker.log_query("SELECT 1", [])

        assert tracker.count() == 0

    @pytest.mark.asyncio
    async def test_no_tracker_outside_context(self):
        assert DatabaseManager.get_query_tracker() is None

        async with DatabaseManager.track_queries() as tracker:
            assert DatabaseManager.get_query_tracker() is tracker

        assert DatabaseManager.get_query_tracker() is None

    @pytest.mark.asyncio
    async def test_nested_tracking_reuses_tracker(self):
        async with DatabaseManager.track_queries() as outer:
            async with DatabaseManager.track_queries() as inner:
                assert inner is outer
            DatabaseManager.log_query("SELECT 1", [])
            assert DatabaseManager.get_query_tracker() is outer

        assert outer.count() == 1


class TestOneStatementPerOperation:
    """Each repository call issues exactly one statement."""

    @pytest.mark.asyncio
    async def test_create_post(self, post_repo):
        async with DatabaseManager.track_queries() as tracker:
            await post_repo.create(CreatePost(title="T", body="B"))

        [log] = tracker.get_queries()
        assert log.query == (
            "INSERT INTO posts (user_id, title, body) VALUES ($1, $2, $3) "
            "RETURNING id, user_id, title, body"
        )
        assert log.params == [None, "T", "B"]

    @pytest.mark.asyncio
    async def test_read_update_delete(self, post_repo):
        post = await post_repo.create(CreatePost(title="T", body="B"))

        async with DatabaseManager.track_queries() as tracker:
            await post_repo.list_summaries()
            await post_repo.find_by_id(post.id)
            await post_repo.update(post.id, UpdatePost(title="T2", body="B2", user_id=None))
            await post_repo.delete(post.id)

        assert [log.query for log in tracker.get_queries()] == [
            "SELECT id, title, body FROM posts ORDER BY id ASC",
            "SELECT id, user_id, title, body FROM posts WHERE id = $1",
            "UPDATE posts SET title = $1, body = $2, user_id = $3 WHERE id = $4 "
            "RETURNING id, user_id, title, body",
            "DELETE FROM posts WHERE id = $1",
        ]

    @pytest.mark.asyncio
    async def test_create_user(self, user_repo):
        async with DatabaseManager.track_queries() as tracker:
            await user_repo.create(CreateUser(username="alice", email="a@x.com"))

        assert tracker.count() == 1
        assert tracker.get_queries()[0].params == ["alice", "a@x.com"]
