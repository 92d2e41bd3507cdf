"""Tests for the command line entry point."""

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import AsyncMock, patch

from cli.main import format_response, main
from domain.model.config import LookupConfig
from domain.model.entry import LookupResponse
from domain.model.scan import ScanResult
from services.entry_normalizer import create_entry

ORIGIN = "https://sottaku.app"


def make_response() -> LookupResponse:
    entry = create_entry(
        ScanResult(id=1, kanji_representation="猫", reading="ねこ", word_translation="cat", in_flashcards=True),
        "ja", ORIGIN, "ねこ", 0,
    )
    return LookupResponse(dictionary_entries=(entry,), original_text_length=2)


class TestFormatResponse(unittest.TestCase):

    def test_lists_entries(self):
        output = format_response(make_response())

        lines = output.splitlines()
        self.assertEqual(lines[0], "matched length: 2")
        self.assertIn("猫 (ねこ) [saved]", lines[1])
        self.assertEqual(lines[2], "    cat")

    def test_empty(self):
        self.assertEqual(format_response(LookupResponse()), "matched length: 0")


@patch("cli.main.setup_structured_logging")
@patch("cli.main.load_dotenv")
class TestMain(unittest.TestCase):

    @patch("cli.main.load_lookup_config", return_value=LookupConfig(enabled=True, auth_token="token"))
    @patch("cli.main.TermLookupService")
    def test_prints_json(self, service_cls, _load_config, _dotenv, _logging):
        service_cls.return_value.find_terms = AsyncMock(return_value=make_response())
        stdout = io.StringIO()

        with redirect_stdout(stdout):
            code = main(["ねこ", "--json", "--language-mode", "mixed", "--max-results", "5"])

        self.assertEqual(code, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual(payload["original_text_length"], 2)
        self.assertEqual(payload["entries"][0]["headwords"][0]["term"], "猫")
        configured = service_cls.return_value.configure.call_args[0][0]
        self.assertEqual(configured.language_mode, "mixed")
        self.assertEqual(configured.max_results, 5)

    @patch("cli.main.load_lookup_config", return_value=LookupConfig(enabled=True, auth_token=""))
    def test_missing_token_exits_with_error(self, _load_config, _dotenv, _logging):
        stderr = io.StringIO()

        with redirect_stderr(stderr):
            code = main(["ねこ"])

        self.assertEqual(code, 1)
        self.assertIn("Sign in to Sottaku", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
