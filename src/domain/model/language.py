"""Language Value Object.

Encapsulates the languages the remote dictionary serves: codes, display
names, flags, and the script patterns used to detect them from text.
"""

import re
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Language:
    """Immutable value object representing a supported study language."""

    code: str
    name: str
    flag: str
    script_pattern: re.Pattern

    def matches_script(self, text: str) -> bool:
        """Return True if any character of text belongs to this language's script."""
        return bool(self.script_pattern.search(text))


# ── Language instances ────────────────────────────────────────

JAPANESE = Language(
    code="ja",
    name="Japanese",
    flag="\U0001F1EF\U0001F1F5",
    # Hiragana, katakana, CJK extension A, CJK unified ideographs
    script_pattern=re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff]"),
)

KOREAN = Language(
    code="ko",
    name="Korean",
    flag="\U0001F1F0\U0001F1F7",
    # Hangul jamo, compatibility jamo, syllables
    script_pattern=re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7af]"),
)

GLOBE_FLAG = "\U0001F310"

FALLBACK_LANGUAGE = JAPANESE.code


# ── Registry ──────────────────────────────────────────────────

LANGUAGES: dict[str, Language] = {lang.code: lang for lang in (JAPANESE, KOREAN)}

SUPPORTED_LANGUAGES: tuple[str, ...] = (JAPANESE.code, KOREAN.code)

# Hangul is checked first: Korean text may contain hanja that would
# otherwise match the CJK ideograph range.
DETECTION_ORDER: tuple[Language, ...] = (KOREAN, JAPANESE)


def get_language(code: str) -> Language | None:
    """Look up a Language by its ISO 639-1 code (e.g., "ja")."""
    return LANGUAGES.get(code)


def get_language_flag(code: str) -> str:
    language = LANGUAGES.get(code)
    return language.flag if language else GLOBE_FLAG


def get_language_name(code: str) -> str:
    language = LANGUAGES.get(code)
    return language.name if language else code


def detect_language(text: str) -> str | None:
    """Detect the study language of text from its script.

    Returns:
        "ko" for any Hangul, else "ja" for any kana/kanji, else None.
    """
    trimmed = (text or "").strip()
    for language in DETECTION_ORDER:
        if language.matches_script(trimmed):
            return language.code
    return None


def normalize_preferred_languages(
    preferred_languages: Iterable[object] | None,
    default_language: str,
    supported: Iterable[str] = SUPPORTED_LANGUAGES,
) -> list[str]:
    """Filter preferred languages down to the supported set.

    Preserves input order and drops duplicates. When nothing survives, the
    list is seeded with the default language (if supported), and failing
    that with the full supported set.
    """
    supported = tuple(supported)
    normalized: list[str] = []

    def add(value: object) -> None:
        if not isinstance(value, str):
            return
        code = value.strip()
        if not code or code in normalized or code not in supported:
            return
        normalized.append(code)

    for language in preferred_languages or ():
        add(language)

    if not normalized:
        add(default_language)

    if not normalized:
        for language in supported:
            add(language)

    return normalized
