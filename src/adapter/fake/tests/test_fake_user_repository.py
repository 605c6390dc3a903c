"""Tests for FakeUserRepository."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError


class TestFakeUserRepository(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_create_assigns_id_and_defaults_offline(self):
        user = self.repo.create(user_name="alice", email="a@x.com", password_hash="$2b$hash")

        self.assertTrue(user.id)
        self.assertFalse(user.is_online)
        self.assertEqual(self.repo.get_by_id(user.id), user)
        self.assertEqual(self.repo.get_by_email("a@x.com"), user)

    def test_create_rejects_duplicate_email(self):
        self.repo.create(user_name="alice", email="a@x.com", password_hash="h")
        with self.assertRaises(DuplicateError):
            self.repo.create(user_name="other", email="a@x.com", password_hash="h")

    def test_create_rejects_duplicate_user_name(self):
        self.repo.create(user_name="alice", email="a@x.com", password_hash="h")
        with self.assertRaises(DuplicateError):
            self.repo.create(user_name="alice", email="b@x.com", password_hash="h")

    def test_set_online_and_count(self):
        alice = self.repo.create(user_name="alice", email="a@x.com", password_hash="h")
        self.repo.create(user_name="bob", email="b@x.com", password_hash="h")

        self.assertTrue(self.repo.set_online(alice.id, True))
        self.assertEqual(self.repo.count(), 2)
        self.assertEqual(self.repo.count_online(), 1)

        self.assertTrue(self.repo.set_online(alice.id, False))
        self.assertEqual(self.repo.count_online(), 0)

    def test_set_online_unknown_id(self):
        self.assertFalse(self.repo.set_online("missing", True))

    def test_get_by_email_not_found(self):
        self.assertIsNone(self.repo.get_by_email("nobody@x.com"))


if __name__ == '__main__':
    unittest.main()
