"""Unit tests for API dependencies — repository and service wiring.

Tests focus on:
- 500 when no database was opened at startup
- MongoUserRepository receives the database stored on app state
- AccountService picks up the configured bcrypt cost
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from fastapi import HTTPException
from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_account_service, get_user_repo
from adapter.mongodb import USERS_COLLECTION_NAME
from adapter.mongodb.user_repository import MongoUserRepository
from services.account_service import AccountService
from utils.config import Settings


def _request_with_db(db):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(db=db)))


class TestGetUserRepo(unittest.TestCase):

    def test_returns_mongo_repository_when_connected(self):
        mock_db = MagicMock()

        repo = get_user_repo(_request_with_db(mock_db))

        self.assertIsInstance(repo, MongoUserRepository)
        mock_db.__getitem__.assert_called_with(USERS_COLLECTION_NAME)

    def test_raises_500_when_database_unavailable(self):
        with self.assertRaises(HTTPException) as context:
            get_user_repo(_request_with_db(None))

        self.assertEqual(context.exception.status_code, 500)
        self.assertEqual(context.exception.detail, "Database unavailable")

    def test_raises_500_when_state_missing(self):
        request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))

        with self.assertRaises(HTTPException):
            get_user_repo(request)


class TestGetAccountService(unittest.TestCase):

    def test_uses_configured_rounds(self):
        repo = MagicMock()
        settings = Settings(mongo_url=None, bcrypt_rounds=6)

        service = get_account_service(repo=repo, settings=settings)

        self.assertIsInstance(service, AccountService)
        self.assertIs(service.repo, repo)
        self.assertEqual(service.bcrypt_rounds, 6)


class TestUnavailableDatabase(unittest.TestCase):

    def tearDown(self):
        app.dependency_overrides.clear()
        app.state.db = None

    def test_endpoint_returns_500_without_database(self):
        app.state.db = None
        client = TestClient(app)

        response = client.get("/api/users/total")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Database unavailable"})


if __name__ == '__main__':
    unittest.main()
