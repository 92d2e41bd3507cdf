"""Flashcard actions offered next to a lookup entry.

Entries with a definition can be saved as flashcards; entries without one
can have a translation requested. Both act on the entry's metadata.
"""

import logging
from dataclasses import replace

from domain.model.entry import EntryMetadata
from domain.model.errors import ValidationError
from port.dictionary_api import DictionaryApiPort

logger = logging.getLogger(__name__)


def _require_question_id(metadata: EntryMetadata | None) -> int:
    if metadata is None or not metadata.question_id:
        raise ValidationError("Missing question id")
    return metadata.question_id


async def add_to_flashcards(
    api: DictionaryApiPort, metadata: EntryMetadata, fallback_language: str,
) -> EntryMetadata:
    """Save the entry as a flashcard.

    Returns:
        A copy of metadata marked as saved.

    Raises:
        ValidationError: metadata has no question id.
        DictionaryApiError: The service rejected the request.
    """
    question_id = _require_question_id(metadata)
    language = metadata.language or fallback_language
    await api.add_flashcard(question_id, language)
    logger.info("Flashcard added", extra={"question_id": question_id, "language": language})
    return replace(metadata, in_flashcards=True)


async def request_translation(
    api: DictionaryApiPort, metadata: EntryMetadata, fallback_language: str,
) -> None:
    """Ask the service to add a definition for an entry that has none."""
    question_id = _require_question_id(metadata)
    language = metadata.language or fallback_language
    await api.submit_word_request(question_id, language)
    logger.info("Translation requested", extra={"question_id": question_id, "language": language})


def action_for(metadata: EntryMetadata) -> str:
    """Which action a presentation layer should offer for an entry."""
    if metadata.has_definition:
        return "saved" if metadata.in_flashcards else "add_flashcard"
    return "request_translation"
