"""Lookup configuration snapshot."""

from dataclasses import dataclass, replace
from typing import Literal
from urllib.parse import urlsplit

from domain.model.language import FALLBACK_LANGUAGE

LanguageMode = Literal["auto", "ja", "ko", "mixed"]

LANGUAGE_MODES: tuple[str, ...] = ("auto", "ja", "ko", "mixed")

DEFAULT_API_BASE_URL = "https://sottaku.app/api/v1"
DEFAULT_ORIGIN = "https://sottaku.app"
DEFAULT_MAX_RESULTS = 32


def get_origin(url: str) -> str:
    """Return scheme://host[:port] of url, or the default origin if unparsable."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return DEFAULT_ORIGIN
    if not parts.scheme or not parts.netloc:
        return DEFAULT_ORIGIN
    return f"{parts.scheme}://{parts.netloc}"


@dataclass(frozen=True)
class LookupConfig:
    """Immutable configuration snapshot supplied by the settings store.

    The lookup core only reads it. Updates produce a new snapshot via
    with_updates(); a snapshot is never modified in place.
    """
    enabled: bool = False
    auth_token: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL
    cookie_domain: str = ""
    language_mode: LanguageMode = "auto"
    preferred_languages: tuple[str, ...] = ()
    default_language: str = FALLBACK_LANGUAGE
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self) -> None:
        if isinstance(self.preferred_languages, list):
            object.__setattr__(self, "preferred_languages", tuple(self.preferred_languages))

    @property
    def api_origin(self) -> str:
        return get_origin(self.api_base_url)

    @property
    def resolved_cookie_domain(self) -> str:
        return self.cookie_domain or self.api_origin

    @property
    def has_credentials(self) -> bool:
        return bool(self.auth_token)

    @property
    def result_cap(self) -> int:
        """Shared per-lookup result cap, never below one."""
        return max(1, self.max_results or DEFAULT_MAX_RESULTS)

    def with_updates(self, **changes) -> "LookupConfig":
        return replace(self, **changes)
