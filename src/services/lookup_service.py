"""Term lookup service — orchestrates the multi-language resolution pipeline.

Pipeline per language: query variants → scan with fallback → flashcard
membership → entry normalization. Languages run one after another, then
their results are interleaved into one ranked list.
"""

import logging
from dataclasses import dataclass
from typing import Callable

import httpx

from adapter.external.sottaku_api import SottakuApiClient
from domain.model.config import LookupConfig
from domain.model.entry import DictionaryEntry, LanguageResult, LookupResponse, QueryVariant
from domain.model.errors import (
    AuthenticationRequiredError,
    ConfigurationError,
    UpgradeRequiredError,
)
from domain.model.scan import ScanResult
from port.deinflection import DeinflectionOptions, DeinflectionPort
from port.dictionary_api import DictionaryApiError, DictionaryApiPort
from services.entry_normalizer import create_entry
from services.interleave import interleave_language_entries, resolve_original_text_length
from services.language_policy import SupportedLanguageCache, resolve_languages
from services.query_variants import build_query_variants

logger = logging.getLogger(__name__)

UPGRADE_MARKERS = ("402", "pro subscription", "upgrade")

ApiFactory = Callable[[LookupConfig, httpx.Cookies], DictionaryApiPort]


def is_upgrade_error(error: DictionaryApiError) -> bool:
    """Whether a gateway error means the account needs a paid subscription."""
    if error.status_code == 402:
        return True
    lowered = error.message.lower()
    return any(marker in lowered for marker in UPGRADE_MARKERS)


@dataclass
class _ScanAttempt:
    variant: QueryVariant
    results: list[ScanResult]
    original_text_length: int


async def _scan_variant(
    api: DictionaryApiPort, language: str, variant: QueryVariant, max_results: int,
) -> _ScanAttempt:
    if not variant.query:
        return _ScanAttempt(variant, [], len(variant.source_text))

    try:
        response = await api.scan(variant.query, language, max_results)
    except DictionaryApiError as e:
        if is_upgrade_error(e):
            logger.warning(
                "Scan refused, subscription required",
                extra={"language": language, "status_code": e.status_code},
            )
            raise UpgradeRequiredError() from e
        raise

    if variant.original_text_length is not None:
        original_text_length = variant.original_text_length
    else:
        original_text_length = response.original_text_length
    return _ScanAttempt(variant, response.results[:max(1, max_results)], original_text_length)


async def annotate_membership(
    api: DictionaryApiPort, results: list[ScanResult], language: str,
) -> set[int]:
    """Stamp in_flashcards on results already saved by the user.

    Best effort: any failure leaves every flag unset.

    Returns:
        The saved question ids found.
    """
    question_ids = [result.question_id for result in results if result.question_id is not None]
    if not question_ids or not api.auth_token:
        return set()

    try:
        saved = await api.get_flashcard_membership(question_ids, language)
    except Exception as e:
        logger.warning(
            "Flashcard membership check failed",
            extra={"language": language, "error_type": type(e).__name__, "error": str(e)},
        )
        return set()

    for result in results:
        if result.question_id in saved:
            result.in_flashcards = True
    return saved


async def fetch_language(
    api: DictionaryApiPort,
    language: str,
    variants: list[QueryVariant],
    max_results: int,
    api_origin: str,
) -> LanguageResult:
    """Fetch one language, trying variants until one yields results.

    When no variant yields anything, the first variant's (empty) attempt is
    returned so the reported original text length stays deterministic.

    Raises:
        UpgradeRequiredError: The service requires a subscription.
        DictionaryApiError: Any other gateway failure; no partial results.
    """
    candidates = variants or [QueryVariant(query="", source_text="", original_text_length=0)]

    selected: _ScanAttempt | None = None
    first: _ScanAttempt | None = None
    for variant in candidates:
        attempt = await _scan_variant(api, language, variant, max_results)
        if attempt.results:
            selected = attempt
            break
        if first is None:
            first = attempt
    if selected is None:
        selected = first

    await annotate_membership(api, selected.results, language)

    variant = selected.variant
    entries = tuple(
        create_entry(
            result,
            language,
            api_origin,
            variant.query,
            index,
            variant.source_text,
            variant.original_text_length,
        )
        for index, result in enumerate(selected.results)
    )
    logger.debug(
        "Language fetched",
        extra={"language": language, "query": variant.query, "entry_count": len(entries)},
    )
    return LanguageResult(
        language=language,
        entries=entries,
        original_text_length=selected.original_text_length,
    )


class TermLookupService:
    """Public entry point for remote term lookups.

    configure() replaces the configuration snapshot wholesale. Each
    find_terms() call reads the snapshot in effect when it starts and builds
    its own gateway from it. Every gateway shares the service cookie jar,
    which is emptied when the auth token is cleared.
    """

    def __init__(
        self,
        deinflection: DeinflectionPort | None = None,
        api_factory: ApiFactory = SottakuApiClient.from_config,
        language_cache: SupportedLanguageCache | None = None,
    ):
        self._deinflection = deinflection
        self._api_factory = api_factory
        self._language_cache = language_cache or SupportedLanguageCache()
        self._config: LookupConfig | None = None
        self._cookies = httpx.Cookies()

    @property
    def config(self) -> LookupConfig | None:
        return self._config

    def configure(self, config: LookupConfig) -> None:
        self._config = config
        if not config.auth_token:
            self._language_cache.clear()
            self._cookies.clear()

    def create_api(self) -> DictionaryApiPort:
        """Gateway bound to the current snapshot, for presentation actions."""
        if self._config is None:
            raise ConfigurationError("Sottaku options not configured")
        return self._api_factory(self._config, self._cookies)

    async def find_terms(
        self, text: str, options: DeinflectionOptions | None = None,
    ) -> LookupResponse:
        """Look up text across the resolved languages.

        Raises:
            ConfigurationError: configure() was never called.
            AuthenticationRequiredError: Enabled without an auth token.
            UpgradeRequiredError: The service requires a subscription.
            DictionaryApiError: Any other gateway failure.
        """
        config = self._config
        if config is None:
            raise ConfigurationError("Sottaku options not configured")
        if not config.enabled:
            return LookupResponse(dictionary_entries=(), original_text_length=len(text or ""))
        if not config.has_credentials:
            raise AuthenticationRequiredError()

        query = (text or "").strip()
        if not query:
            return LookupResponse(dictionary_entries=(), original_text_length=0)

        api = self._api_factory(config, self._cookies)
        supported = await self._language_cache.get(api, config.auth_token)
        languages = resolve_languages(query, config, config.default_language, supported)
        max_results = config.result_cap
        api_origin = config.api_origin

        language_results: list[LanguageResult] = []
        for language in languages:
            variants = await build_query_variants(query, language, self._deinflection, options)
            language_results.append(
                await fetch_language(api, language, variants, max_results, api_origin)
            )

        entries: list[DictionaryEntry] = interleave_language_entries(language_results, max_results)
        original_text_length = resolve_original_text_length(language_results, entries, query)

        logger.info("Lookup completed", extra={
            "languages": languages,
            "entry_count": len(entries),
            "original_text_length": original_text_length,
        })
        return LookupResponse(
            dictionary_entries=tuple(entries),
            original_text_length=original_text_length,
        )
