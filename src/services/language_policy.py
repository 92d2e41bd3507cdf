"""Language policy — decides which languages a lookup queries.

Also owns the supported-language cache: the static default set, refreshed
from the service once per auth token.
"""

import logging

from domain.model.config import LookupConfig
from domain.model.language import (
    FALLBACK_LANGUAGE,
    SUPPORTED_LANGUAGES,
    detect_language,
    normalize_preferred_languages,
)
from port.dictionary_api import DictionaryApiPort

logger = logging.getLogger(__name__)

FIXED_LANGUAGE_MODES = ("ja", "ko")


def resolve_languages(
    text: str,
    config: LookupConfig,
    default_language: str | None = None,
    supported: tuple[str, ...] | list[str] = SUPPORTED_LANGUAGES,
) -> list[str]:
    """Resolve the ordered, non-empty list of languages to query for text.

    Decision order:
        1. A fixed language mode returns that language only.
        2. "mixed" returns every normalized preferred language, in order.
        3. "auto" detects the script (Hangul first, then Japanese).
        4. Otherwise the first preferred language, the default, or "ja".
    """
    default_language = default_language if default_language is not None else config.default_language
    preferred = normalize_preferred_languages(config.preferred_languages, default_language, supported)

    if config.language_mode in FIXED_LANGUAGE_MODES:
        return [config.language_mode]
    if config.language_mode == "mixed":
        return preferred

    detected = detect_language(text)
    if detected:
        return [detected]
    if preferred:
        return [preferred[0]]
    if default_language:
        return [default_language]
    return [FALLBACK_LANGUAGE]


class SupportedLanguageCache:
    """Supported-language list, fetched lazily once per auth token.

    Without a token the static default is used and the cache is cleared.
    An empty response or a failed fetch yields the static default, which is
    then kept for that token.
    """

    def __init__(self, default: tuple[str, ...] = SUPPORTED_LANGUAGES):
        self._default = tuple(default)
        self._token: str | None = None
        self._languages: tuple[str, ...] = self._default

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    def clear(self) -> None:
        self._token = None
        self._languages = self._default

    async def get(self, api: DictionaryApiPort, auth_token: str) -> tuple[str, ...]:
        if not auth_token:
            self.clear()
            return self._languages
        if auth_token == self._token:
            return self._languages

        try:
            fetched = await api.get_supported_languages()
        except Exception as e:
            logger.warning(
                "Supported language refresh failed, using default",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            fetched = []

        # Replaced wholesale; a concurrent lookup keeps the tuple it already read.
        self._languages = tuple(fetched) if fetched else self._default
        self._token = auth_token
        logger.debug("Supported languages resolved", extra={"languages": list(self._languages)})
        return self._languages
