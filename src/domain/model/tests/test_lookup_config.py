"""Tests for the LookupConfig snapshot."""

import unittest
from dataclasses import FrozenInstanceError

from domain.model.config import DEFAULT_ORIGIN, LookupConfig, get_origin


class TestLookupConfig(unittest.TestCase):

    def test_api_origin(self):
        config = LookupConfig(api_base_url="http://localhost:8080/api/v1")
        self.assertEqual(config.api_origin, "http://localhost:8080")

    def test_unparsable_origin_falls_back(self):
        self.assertEqual(get_origin("not a url"), DEFAULT_ORIGIN)
        self.assertEqual(get_origin("http://[broken"), DEFAULT_ORIGIN)

    def test_cookie_domain_defaults_to_origin(self):
        self.assertEqual(LookupConfig().resolved_cookie_domain, "https://sottaku.app")
        self.assertEqual(LookupConfig(cookie_domain="https://x.test").resolved_cookie_domain, "https://x.test")

    def test_result_cap_never_below_one(self):
        self.assertEqual(LookupConfig(max_results=5).result_cap, 5)
        self.assertEqual(LookupConfig(max_results=0).result_cap, 32)
        self.assertEqual(LookupConfig(max_results=-3).result_cap, 1)

    def test_preferred_languages_frozen_to_tuple(self):
        config = LookupConfig(preferred_languages=["ko", "ja"])
        self.assertEqual(config.preferred_languages, ("ko", "ja"))

    def test_with_updates_returns_new_snapshot(self):
        config = LookupConfig(enabled=True, auth_token="a")
        updated = config.with_updates(auth_token="b")

        self.assertEqual(config.auth_token, "a")
        self.assertEqual(updated.auth_token, "b")
        self.assertTrue(updated.enabled)

    def test_snapshot_is_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            LookupConfig().enabled = True


if __name__ == "__main__":
    unittest.main()
