"""Tests for sign-in and profile helpers."""

import unittest

from adapter.fake.dictionary_api import FakeDictionaryApi
from domain.model.errors import ValidationError
from domain.model.user import UserProfile
from port.dictionary_api import DictionaryApiError
from services.account_service import load_profile, sign_in, signed_in_status_text


class TestSignIn(unittest.IsolatedAsyncioTestCase):

    async def test_returns_token(self):
        api = FakeDictionaryApi(profile=UserProfile(id=1, username="kim"))

        result = await sign_in(api, " kim ", "pw")

        self.assertEqual(result.token, "token-kim")
        self.assertEqual(result.user.username, "kim")

    async def test_blank_credentials(self):
        with self.assertRaises(ValidationError):
            await sign_in(FakeDictionaryApi(), "  ", "pw")

    async def test_rejected_credentials_propagate(self):
        api = FakeDictionaryApi()
        api.login_error = DictionaryApiError("Invalid credentials", status_code=401)

        with self.assertRaises(DictionaryApiError):
            await sign_in(api, "kim", "wrong")


class TestLoadProfile(unittest.IsolatedAsyncioTestCase):

    async def test_returns_profile(self):
        api = FakeDictionaryApi(profile=UserProfile(id=2, email="a@b.test"))

        self.assertEqual(await load_profile(api), UserProfile(id=2, email="a@b.test"))

    async def test_failure_returns_none(self):
        api = FakeDictionaryApi()
        api.profile_error = DictionaryApiError("boom")

        self.assertIsNone(await load_profile(api))

    async def test_no_token_skips_request(self):
        api = FakeDictionaryApi(auth_token="")

        self.assertIsNone(await load_profile(api))
        self.assertEqual(api.calls, [])


class TestStatusText(unittest.TestCase):

    def test_named_user(self):
        self.assertEqual(signed_in_status_text(UserProfile(username=" kim ")), "Signed in as kim")

    def test_email_fallback(self):
        self.assertEqual(signed_in_status_text(UserProfile(username="", email="a@b.test")), "Signed in as a@b.test")

    def test_anonymous(self):
        self.assertEqual(signed_in_status_text(None), "Signed in")
        self.assertEqual(signed_in_status_text(UserProfile()), "Signed in")


if __name__ == "__main__":
    unittest.main()
