"""Tests for user count routes."""

import asyncio
import time
import unittest
from unittest.mock import MagicMock

import httpx
from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_account_service
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import StorageError
from services.account_service import AccountService


class TestUserCounts(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_account_service] = lambda: AccountService(self.repo, bcrypt_rounds=4)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_empty_counts(self):
        assert self.client.get("/api/users/total").json() == {"totalUsers": 0}
        assert self.client.get("/api/users/online").json() == {"onlineUsers": 0}

    def test_counts_reflect_repository(self):
        alice = self.repo.create(user_name="alice", email="a@x.com", password_hash="h")
        self.repo.create(user_name="bob", email="b@x.com", password_hash="h")
        self.repo.set_online(alice.id, True)

        response = self.client.get("/api/users/total")
        assert response.status_code == 200
        assert response.json() == {"totalUsers": 2}

        response = self.client.get("/api/users/online")
        assert response.status_code == 200
        assert response.json() == {"onlineUsers": 1}

    def test_storage_error(self):
        repo = MagicMock()
        repo.count.side_effect = StorageError("down")
        repo.count_online.side_effect = StorageError("down")
        app.dependency_overrides[get_account_service] = lambda: AccountService(repo)

        for path in ("/api/users/total", "/api/users/online"):
            response = self.client.get(path)
            assert response.status_code == 500
            assert response.json() == {"message": "Internal server error"}


    def test_unexpected_error_is_json(self):
        repo = MagicMock()
        repo.count.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_account_service] = lambda: AccountService(repo)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/users/total")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

class _SlowCountRepository(FakeUserRepository):
    """count() stalls like a slow store round-trip."""

    def count(self) -> int:
        time.sleep(0.5)
        return super().count()


class TestSlowStoreDoesNotBlockOtherRequests(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        repo = _SlowCountRepository()
        app.dependency_overrides[get_account_service] = lambda: AccountService(repo, bcrypt_rounds=4)

    def tearDown(self):
        app.dependency_overrides.clear()

    async def test_online_count_not_delayed_by_slow_total(self):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            start = time.perf_counter()

            async def timed_get(path):
                response = await client.get(path)
                return response, time.perf_counter() - start

            (slow_response, slow_elapsed), (fast_response, fast_elapsed) = await asyncio.gather(
                timed_get("/api/users/total"),
                timed_get("/api/users/online"),
            )

        assert slow_response.status_code == 200
        assert fast_response.status_code == 200
        assert slow_elapsed >= 0.5
        assert fast_elapsed < 0.3, f"online count waited {fast_elapsed:.2f}s behind the slow request"


if __name__ == '__main__':
    unittest.main()
