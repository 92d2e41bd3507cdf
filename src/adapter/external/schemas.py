"""Wire payload models for the Sottaku API.

Each parse_* function accepts the unwrapped ``data`` value of a response
(anything JSON can produce) and returns domain types, defaulting every
missing or malformed field instead of failing.
"""

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from domain.model.scan import ScanResponse, ScanResult, parse_int
from domain.model.user import SignInResult, UserProfile

logger = logging.getLogger(__name__)

# Keys that may carry language lists, merged in this order
SUPPORTED_LANGUAGE_KEYS = ("languages", "supported_languages", "admin_only_languages")


class MembershipPayload(BaseModel):
    """Response of the flashcard membership check.

    ``exists`` is aligned index-by-index with ``question_ids``.
    """
    model_config = ConfigDict(extra="ignore")

    exists: list[Any] = []
    question_ids: list[Any] = []

    def saved_ids(self) -> set[int]:
        saved: set[int] = set()
        for exists, raw_id in zip(self.exists, self.question_ids):
            if exists is not True:
                continue
            question_id = parse_int(raw_id)
            if question_id is not None:
                saved.add(question_id)
        return saved


class UserPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    username: Any = None
    name: Any = None
    email: Any = None
    isPro: Any = None
    is_pro: Any = None

    def to_profile(self) -> UserProfile:
        username = self.username if self.username is not None else self.name
        return UserProfile(
            id=parse_int(self.id) or 0,
            username=username if isinstance(username, str) else None,
            email=self.email if isinstance(self.email, str) else None,
            is_pro=self.isPro is True or self.is_pro is True,
        )


class LoginPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str | None = None
    user: dict[str, Any] | None = None


def parse_scan_response(data: Any, text: str) -> ScanResponse:
    """Parse a scan payload; results is always a list."""
    raw_results = data.get("results") if isinstance(data, dict) else None
    results: list[ScanResult] = []
    if isinstance(raw_results, list):
        for item in raw_results:
            if not isinstance(item, dict):
                logger.debug("Skipping non-object scan result", extra={"type": type(item).__name__})
                continue
            results.append(ScanResult.model_validate(item))

    raw_length = data.get("original_text_length") if isinstance(data, dict) else None
    if isinstance(raw_length, (int, float)) and not isinstance(raw_length, bool) and math.isfinite(raw_length):
        original_text_length = int(raw_length)
    else:
        original_text_length = max(0, len(text or ""))

    return ScanResponse(results=results, original_text_length=original_text_length)


def parse_membership(data: Any) -> set[int]:
    if not isinstance(data, dict):
        return set()
    try:
        return MembershipPayload.model_validate(data).saved_ids()
    except ValidationError:
        logger.debug("Malformed membership payload")
        return set()


def parse_user(data: Any) -> UserProfile | None:
    if not isinstance(data, dict):
        return None
    return UserPayload.model_validate(data).to_profile()


def parse_profile(data: Any) -> UserProfile | None:
    """Profile responses wrap the user object as ``{"user": {...}}``."""
    if not isinstance(data, dict):
        return None
    return parse_user(data.get("user"))


def parse_sign_in(data: Any) -> SignInResult | None:
    if not isinstance(data, dict):
        return None
    try:
        payload = LoginPayload.model_validate(data)
    except ValidationError:
        return None
    if not payload.token:
        return None
    return SignInResult(token=payload.token, user=parse_user(payload.user))


def _language_code(value: Any) -> str | None:
    if isinstance(value, dict):
        value = value.get("code") or value.get("iso")
    if not isinstance(value, str):
        return None
    code = value.strip()
    return code or None


def parse_supported_languages(data: Any) -> list[str]:
    """Extract language codes from a list or from the known list keys."""
    if isinstance(data, list):
        sources = [data]
    elif isinstance(data, dict):
        sources = [data.get(key) for key in SUPPORTED_LANGUAGE_KEYS]
    else:
        return []

    codes: list[str] = []
    for source in sources:
        if not isinstance(source, list):
            continue
        for value in source:
            code = _language_code(value)
            if code and code not in codes:
                codes.append(code)
    return codes
