"""Tests for cross-language interleaving and matched-length resolution."""

import unittest

from domain.model.entry import LanguageResult
from domain.model.scan import ScanResult
from services.entry_normalizer import create_entry
from services.interleave import interleave_language_entries, resolve_original_text_length


def make_entries(language: str, terms: list[str], match_length: int | None = None):
    return tuple(
        create_entry(ScanResult(kanji_representation=term, match_length=match_length), language,
                     "https://sottaku.app", term, index)
        for index, term in enumerate(terms)
    )


def language_result(language: str, terms: list[str], length: int = 0, match_length: int | None = None):
    return LanguageResult(language, make_entries(language, terms, match_length), length)


class TestInterleave(unittest.TestCase):
    """Test round-robin merging."""

    def test_round_robin_by_rank(self):
        results = [language_result("ja", ["a0", "a1", "a2"]), language_result("ko", ["b0", "b1"])]

        merged = interleave_language_entries(results, 4)

        self.assertEqual([e.term for e in merged], ["a0", "b0", "a1", "b1"])

    def test_exhausted_language_skipped(self):
        results = [language_result("ja", ["a0", "a1", "a2"]), language_result("ko", ["b0"])]

        merged = interleave_language_entries(results, 10)

        self.assertEqual([e.term for e in merged], ["a0", "b0", "a1", "a2"])

    def test_cap_mid_round(self):
        results = [language_result("ja", ["a0", "a1"]), language_result("ko", ["b0", "b1"])]

        merged = interleave_language_entries(results, 3)

        self.assertEqual([e.term for e in merged], ["a0", "b0", "a1"])

    def test_empty_inputs(self):
        self.assertEqual(interleave_language_entries([], 5), [])
        self.assertEqual(interleave_language_entries([language_result("ja", [])], 5), [])


class TestResolveOriginalTextLength(unittest.TestCase):
    """Test the matched-length priority order."""

    def test_language_length_wins(self):
        results = [language_result("ja", ["abc"], length=2), language_result("ko", [], length=5)]

        self.assertEqual(resolve_original_text_length(results, [], "query"), 5)

    def test_entry_match_length_next(self):
        results = [language_result("ja", ["abcdef"], match_length=4)]

        entries = list(results[0].entries)
        self.assertEqual(resolve_original_text_length(results, entries, "query"), 4)

    def test_headword_length_when_no_match_length(self):
        results = [language_result("ja", ["ab"])]

        entries = list(results[0].entries)
        self.assertEqual(resolve_original_text_length(results, entries, "query"), 2)

    def test_query_length_last(self):
        self.assertEqual(resolve_original_text_length([language_result("ja", [])], [], "query"), 5)


if __name__ == "__main__":
    unittest.main()
