"""Validated scan-result records.

The scan endpoint returns ad hoc snake_case records whose fields may be
missing, null, numeric strings, or the wrong type. ScanResult is the strict
internal shape they are parsed into before anything else touches them.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> int | None:
    """Leniently parse an integer.

    Accepts ints, finite floats (truncated) and strings with a leading
    integer ("12", " 7abc"). Everything else, including bools, yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


class ScanResult(BaseModel):
    """One candidate term returned by the scan endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    kanji_representation: str | None = None
    reading: str | None = None
    match_length: int | None = None
    word_translation: str | None = None
    english_word: str | None = None
    cloze_sentence_tokens: list[str] | None = None
    cloze_sentence: str | None = None
    english_sentence: str | None = None
    usage_notes: str | None = None
    has_definition: bool | None = None
    word_audio_file: str | None = None
    sentence_audio_file: str | None = None
    in_flashcards: bool = False

    @field_validator("id", "match_length", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any) -> int | None:
        return parse_int(value)

    @field_validator(
        "kanji_representation", "reading", "word_translation", "english_word",
        "cloze_sentence", "english_sentence", "usage_notes",
        "word_audio_file", "sentence_audio_file",
        mode="before",
    )
    @classmethod
    def _to_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value)

    @field_validator("cloze_sentence_tokens", mode="before")
    @classmethod
    def _token_list(cls, value: Any) -> list[str] | None:
        if not isinstance(value, list):
            return None
        return [str(token) for token in value if token is not None]

    @field_validator("has_definition", mode="before")
    @classmethod
    def _optional_flag(cls, value: Any) -> bool | None:
        return None if value is None else bool(value)

    @field_validator("in_flashcards", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return value is True

    @property
    def question_id(self) -> int | None:
        """Identifier usable for membership checks (positive ints only)."""
        if self.id is not None and self.id > 0:
            return self.id
        return None


@dataclass
class ScanResponse:
    """Scan endpoint result; results is always a list."""
    results: list[ScanResult] = field(default_factory=list)
    original_text_length: int = 0
