"""Entry normalizer — maps a validated scan result to a DictionaryEntry."""

import httpx

from domain.model.entry import (
    DICTIONARY_NAME,
    NO_DEFINITION_PLACEHOLDER,
    AudioUrls,
    Definition,
    DictionaryEntry,
    EntryMetadata,
    Headword,
    HeadwordSource,
)
from domain.model.language import get_language_flag
from domain.model.scan import ScanResult

MAX_SCORE = 100


def build_glossary(
    translation: str, sentence: str, sentence_translation: str, usage_notes: str,
) -> tuple[str, ...]:
    """Glossary lines in fixed order, or a single placeholder line."""
    lines: list[str] = []
    if translation:
        lines.append(translation)
    if sentence:
        lines.append(f"Context: {sentence}")
    if sentence_translation:
        lines.append(f"Translation: {sentence_translation}")
    if usage_notes:
        lines.append(f"Usage: {usage_notes}")
    if not lines:
        lines.append(NO_DEFINITION_PLACEHOLDER)
    return tuple(lines)


def resolve_url(value: str | None, base: str) -> str | None:
    """Resolve value against base; None when absent or not a valid URL.

    Absolute URLs of any scheme (including data: and blob:) are kept, and
    the result is percent-encoded.
    """
    if not value:
        return None
    try:
        return str(httpx.URL(base).join(str(value)))
    except httpx.InvalidURL:
        return None


def _sentence_text(result: ScanResult) -> str:
    if result.cloze_sentence_tokens:
        return "".join(result.cloze_sentence_tokens)
    return result.cloze_sentence or ""


def create_entry(
    result: ScanResult,
    language: str,
    api_origin: str,
    query: str,
    rank_index: int,
    source_text: str | None = None,
    match_length_override: int | None = None,
) -> DictionaryEntry:
    """Build the canonical entry for one scan result.

    Deterministic: the same inputs always produce an equal entry.

    Args:
        result: Validated scan result.
        language: Language code the result was fetched for.
        api_origin: Origin that relative audio paths resolve against.
        query: Query text sent to the service.
        rank_index: Position of the result in the service's ranking.
        source_text: Span of the input the query was derived from.
        match_length_override: Match length to use when the result has none.
    """
    question_id = result.id
    term = result.kanji_representation or result.reading or query or ""
    reading = result.reading or term
    match_length = result.match_length if result.match_length is not None else match_length_override

    translation = result.word_translation or result.english_word or ""
    sentence = _sentence_text(result)
    sentence_translation = result.english_sentence or ""
    usage_notes = result.usage_notes or ""
    has_definition = bool(result.has_definition) or bool(translation) or bool(sentence)

    flag = get_language_flag(language)
    resolved_source_text = source_text or query or ""
    score = max(0, MAX_SCORE - rank_index)

    metadata = EntryMetadata(
        question_id=question_id,
        language=language,
        in_flashcards=result.in_flashcards,
        audio=AudioUrls(
            word=resolve_url(result.word_audio_file, api_origin),
            sentence=resolve_url(result.sentence_audio_file, api_origin),
        ),
        match_length=match_length,
        has_definition=has_definition,
        translation=translation,
        sentence=sentence,
        sentence_translation=sentence_translation,
        usage_notes=usage_notes,
        reading=reading,
        term=term,
        language_flag=flag,
    )

    headword = Headword(
        index=0,
        term=term,
        reading=reading,
        sources=(
            HeadwordSource(
                original_text=resolved_source_text,
                transformed_text=query,
                deinflected_text=term or query,
            ),
        ),
        metadata=metadata,
    )

    definition = Definition(
        index=0,
        headword_indices=(0,),
        dictionary=DICTIONARY_NAME,
        dictionary_index=0,
        dictionary_alias=flag,
        id=question_id if question_id is not None else rank_index,
        score=score,
        frequency_order=rank_index,
        sequences=(question_id if question_id is not None else -1,),
        glossary=build_glossary(translation, sentence, sentence_translation, usage_notes),
    )

    return DictionaryEntry(
        score=score,
        frequency_order=rank_index,
        dictionary_index=0,
        dictionary_alias=flag,
        source_term_exact_match_count=1 if query and term and query == term else 0,
        match_primary_reading=query == reading,
        max_original_text_length=max(len(query), len(term), len(reading), len(resolved_source_text)),
        headwords=(headword,),
        definitions=(definition,),
        metadata=metadata,
    )
