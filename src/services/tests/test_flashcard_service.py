"""Tests for flashcard actions."""

import unittest

from adapter.fake.dictionary_api import FakeDictionaryApi
from domain.model.entry import EntryMetadata
from domain.model.errors import ValidationError
from services.flashcard_service import action_for, add_to_flashcards, request_translation


class TestAddToFlashcards(unittest.IsolatedAsyncioTestCase):

    async def test_adds_and_marks_saved(self):
        api = FakeDictionaryApi()
        metadata = EntryMetadata(question_id=7, language="ko", has_definition=True)

        updated = await add_to_flashcards(api, metadata, "ja")

        self.assertEqual(api.added, [(7, "ko")])
        self.assertTrue(updated.in_flashcards)
        self.assertFalse(metadata.in_flashcards)

    async def test_uses_fallback_language(self):
        api = FakeDictionaryApi()

        await add_to_flashcards(api, EntryMetadata(question_id=7, language=""), "ja")

        self.assertEqual(api.added, [(7, "ja")])

    async def test_missing_question_id(self):
        api = FakeDictionaryApi()

        with self.assertRaises(ValidationError):
            await add_to_flashcards(api, EntryMetadata(question_id=None, language="ja"), "ja")
        self.assertEqual(api.calls, [])


class TestRequestTranslation(unittest.IsolatedAsyncioTestCase):

    async def test_submits_word_request(self):
        api = FakeDictionaryApi()

        await request_translation(api, EntryMetadata(question_id=5, language="ja"), "ko")

        self.assertEqual(api.word_requests, [(5, "ja")])

    async def test_missing_question_id(self):
        with self.assertRaises(ValidationError):
            await request_translation(FakeDictionaryApi(), None, "ja")


class TestActionFor(unittest.TestCase):

    def test_actions(self):
        self.assertEqual(action_for(EntryMetadata(1, "ja", has_definition=False)), "request_translation")
        self.assertEqual(action_for(EntryMetadata(1, "ja", has_definition=True)), "add_flashcard")
        self.assertEqual(action_for(EntryMetadata(1, "ja", in_flashcards=True, has_definition=True)), "saved")


if __name__ == "__main__":
    unittest.main()
