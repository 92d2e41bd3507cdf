"""Deinflection port — outbound interface for the morphological analyzer."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class DeinflectionOptions:
    """Options forwarded to the analyzer for one lookup."""
    deinflect: bool = True
    search_resolution: str = "length"
    text_replacements: tuple = (None,)
    remove_non_japanese_characters: bool = False


@dataclass(frozen=True)
class TextVariant:
    """A span of the input and the dictionary form derived from it."""
    original_text: str
    deinflected_text: str


class DeinflectionPort(Protocol):
    """Port for producing deinflected text variants.

    Implementations wrap a morphological analyzer and are treated as a
    black box: they may raise, and callers must tolerate that.
    """

    async def get_text_variants(
        self, text: str, language: str, options: DeinflectionOptions,
    ) -> list[TextVariant]:
        """Return candidate (original span, deinflected form) pairs, best first."""
        ...
