"""Lookup configuration from environment variables.

Variables (all optional):
    SOTTAKU_ENABLED              "1"/"true"/"yes"/"on" to enable lookups
    SOTTAKU_AUTH_TOKEN           bearer token
    SOTTAKU_API_BASE_URL         e.g. https://sottaku.app/api/v1
    SOTTAKU_COOKIE_DOMAIN        defaults to the API origin
    SOTTAKU_LANGUAGE_MODE        auto | ja | ko | mixed
    SOTTAKU_PREFERRED_LANGUAGES  comma separated codes, e.g. "ko,ja"
    SOTTAKU_DEFAULT_LANGUAGE     fallback language code
    SOTTAKU_MAX_RESULTS          positive integer
"""

import logging
import os
from typing import Mapping

from domain.model.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_MAX_RESULTS,
    LANGUAGE_MODES,
    LookupConfig,
)
from domain.model.errors import ValidationError
from domain.model.language import FALLBACK_LANGUAGE

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUE_VALUES


def _parse_positive_int(value: str | None, default: int) -> int:
    if not value:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        logger.warning("Ignoring invalid integer setting", extra={"value": value})
        return default
    return parsed if parsed > 0 else default


def parse_language_mode(value: str | None) -> str:
    mode = (value or "auto").strip().lower()
    if mode not in LANGUAGE_MODES:
        raise ValidationError(f"Invalid language mode: {value!r} (expected one of {', '.join(LANGUAGE_MODES)})")
    return mode


def parse_language_list(value: str | None) -> tuple[str, ...]:
    return tuple(code.strip() for code in (value or "").split(",") if code.strip())


def load_lookup_config(environ: Mapping[str, str] | None = None) -> LookupConfig:
    """Build a configuration snapshot from environment variables.

    Raises:
        ValidationError: SOTTAKU_LANGUAGE_MODE is not a known mode.
    """
    env = os.environ if environ is None else environ
    return LookupConfig(
        enabled=_parse_bool(env.get("SOTTAKU_ENABLED")),
        auth_token=env.get("SOTTAKU_AUTH_TOKEN", "").strip(),
        api_base_url=env.get("SOTTAKU_API_BASE_URL", "").strip() or DEFAULT_API_BASE_URL,
        cookie_domain=env.get("SOTTAKU_COOKIE_DOMAIN", "").strip(),
        language_mode=parse_language_mode(env.get("SOTTAKU_LANGUAGE_MODE")),
        preferred_languages=parse_language_list(env.get("SOTTAKU_PREFERRED_LANGUAGES")),
        default_language=env.get("SOTTAKU_DEFAULT_LANGUAGE", "").strip() or FALLBACK_LANGUAGE,
        max_results=_parse_positive_int(env.get("SOTTAKU_MAX_RESULTS"), DEFAULT_MAX_RESULTS),
    )
