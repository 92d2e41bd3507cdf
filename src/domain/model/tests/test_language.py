"""Tests for the Language Value Object, script detection and preference normalization."""

import unittest

from domain.model.language import (
    GLOBE_FLAG,
    JAPANESE,
    KOREAN,
    SUPPORTED_LANGUAGES,
    detect_language,
    get_language,
    get_language_flag,
    get_language_name,
    normalize_preferred_languages,
)


class TestGetLanguage(unittest.TestCase):
    """Test language registry lookups."""

    def test_supported_codes(self):
        self.assertIs(get_language("ja"), JAPANESE)
        self.assertIs(get_language("ko"), KOREAN)

    def test_unknown_code(self):
        self.assertIsNone(get_language("en"))

    def test_flags(self):
        self.assertEqual(get_language_flag("ja"), JAPANESE.flag)
        self.assertEqual(get_language_flag("xx"), GLOBE_FLAG)

    def test_name_falls_back_to_code(self):
        self.assertEqual(get_language_name("ko"), "Korean")
        self.assertEqual(get_language_name("fr"), "fr")

    def test_default_supported_set(self):
        self.assertEqual(SUPPORTED_LANGUAGES, ("ja", "ko"))


class TestDetectLanguage(unittest.TestCase):
    """Test script-based language detection."""

    def test_hiragana(self):
        self.assertEqual(detect_language("こんにちは"), "ja")

    def test_katakana(self):
        self.assertEqual(detect_language("カタカナ"), "ja")

    def test_kanji(self):
        self.assertEqual(detect_language("漢字"), "ja")

    def test_hangul(self):
        self.assertEqual(detect_language("안녕하세요"), "ko")

    def test_hangul_takes_precedence_over_kanji(self):
        self.assertEqual(detect_language("學校에"), "ko")

    def test_latin_is_undetected(self):
        self.assertIsNone(detect_language("hello"))

    def test_empty(self):
        self.assertIsNone(detect_language(""))
        self.assertIsNone(detect_language(None))


class TestNormalizePreferredLanguages(unittest.TestCase):
    """Test filtering of the user's preferred language list."""

    def test_preserves_order_and_dedupes(self):
        self.assertEqual(normalize_preferred_languages(["ko", "ja", "ko"], "ja"), ["ko", "ja"])

    def test_drops_unsupported_and_non_strings(self):
        self.assertEqual(normalize_preferred_languages(["en", 3, " ko "], "ja"), ["ko"])

    def test_empty_seeds_default(self):
        self.assertEqual(normalize_preferred_languages([], "ko"), ["ko"])

    def test_unsupported_default_seeds_full_set(self):
        self.assertEqual(normalize_preferred_languages(None, "en"), ["ja", "ko"])

    def test_custom_supported_set(self):
        self.assertEqual(
            normalize_preferred_languages(["zh", "ja"], "ja", supported=("zh",)),
            ["zh"],
        )


if __name__ == "__main__":
    unittest.main()
