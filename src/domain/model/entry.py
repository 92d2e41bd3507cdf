"""Dictionary entry domain models.

A lookup turns raw text into QueryVariants, fetches one LanguageResult per
target language, and merges those into an ordered list of DictionaryEntry
records. Entries are immutable once created; the EntryMetadata side-record
is what presentation actions (save flashcard, request translation) read.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

DICTIONARY_NAME = "Sottaku"
NO_DEFINITION_PLACEHOLDER = "No Sottaku definition available yet."


@dataclass(frozen=True)
class QueryVariant:
    """A candidate rewriting of the input text to search with.

    query is sent to the server; source_text is the span of the input it
    was derived from (shown and measured as the matched length).
    """
    query: str
    source_text: str
    original_text_length: int | None = None


@dataclass(frozen=True)
class AudioUrls:
    word: str | None = None
    sentence: str | None = None


@dataclass(frozen=True)
class EntryMetadata:
    """Service-specific provenance attached to a canonical entry."""
    question_id: int | None
    language: str
    in_flashcards: bool = False
    audio: AudioUrls = field(default_factory=AudioUrls)
    match_length: int | None = None
    has_definition: bool = False
    translation: str = ""
    sentence: str = ""
    sentence_translation: str = ""
    usage_notes: str = ""
    reading: str = ""
    term: str = ""
    language_flag: str = ""


@dataclass(frozen=True)
class HeadwordSource:
    original_text: str
    transformed_text: str
    deinflected_text: str
    match_type: str = "exact"
    match_source: str = "term"
    is_primary: bool = True


@dataclass(frozen=True)
class Headword:
    index: int
    term: str
    reading: str
    sources: tuple[HeadwordSource, ...]
    metadata: EntryMetadata
    tags: tuple[str, ...] = ()
    word_classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Definition:
    index: int
    headword_indices: tuple[int, ...]
    dictionary: str
    dictionary_index: int
    dictionary_alias: str
    id: int
    score: int
    frequency_order: int
    sequences: tuple[int, ...]
    glossary: tuple[str, ...]
    is_primary: bool = True
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class DictionaryEntry:
    """Canonical term entry consumed by presentation layers."""
    score: int
    frequency_order: int
    dictionary_index: int
    dictionary_alias: str
    source_term_exact_match_count: int
    match_primary_reading: bool
    max_original_text_length: int
    headwords: tuple[Headword, ...]
    definitions: tuple[Definition, ...]
    metadata: EntryMetadata
    type: str = "term"
    is_primary: bool = True

    @property
    def term(self) -> str:
        return self.headwords[0].term if self.headwords else ""

    @property
    def reading(self) -> str:
        return self.headwords[0].reading if self.headwords else ""

    @property
    def glossary(self) -> tuple[str, ...]:
        return self.definitions[0].glossary if self.definitions else ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LanguageResult:
    """Per-language outcome of one fetch cycle."""
    language: str
    entries: tuple[DictionaryEntry, ...]
    original_text_length: int


@dataclass(frozen=True)
class LookupResponse:
    """Result of find_terms()."""
    dictionary_entries: tuple[DictionaryEntry, ...] = ()
    original_text_length: int = 0
