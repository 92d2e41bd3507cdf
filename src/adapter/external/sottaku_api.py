"""Sottaku API adapter.

Implements DictionaryApiPort over HTTP: builds URLs, attaches bearer auth,
serializes JSON bodies, unwraps ``{"data": ...}`` envelopes, and maps failed
responses to DictionaryApiError.

One client is bound to one configuration snapshot; build a new one with
from_config() whenever the configuration changes. Clients built from
successive snapshots can share one cookie jar so a session survives.
"""

import logging
from typing import Any
import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from adapter.external.schemas import (
    parse_membership,
    parse_profile,
    parse_scan_response,
    parse_sign_in,
    parse_supported_languages,
)
from domain.model.config import DEFAULT_API_BASE_URL, LookupConfig, get_origin
from domain.model.scan import ScanResponse
from domain.model.user import SignInResult, UserProfile
from port.dictionary_api import DictionaryApiError

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = 10.0

LOGIN_PATH = "/login"
SEARCH_PATH = "/dictionary/search"
SCAN_PATH = "/dictionary/yomitan-scan"
WORD_INFO_PATH = "/dictionary/word/{word_id}"
WORD_INFO_BATCH_PATH = "/dictionary/word-info-batch"
SUPPORTED_LANGUAGES_PATH = "/dictionary/supported-languages"
FLASHCARD_EXISTS_PATH = "/flashcards/exists"
FLASHCARD_ADD_PATH = "/flashcards/add"
WORD_REQUEST_PATH = "/word_requests/submit"
PROFILE_PATH = "/profile/data"


class SottakuApiClient:
    """Adapter that talks to the Sottaku dictionary service."""

    def __init__(
        self,
        api_base_url: str = DEFAULT_API_BASE_URL,
        auth_token: str = "",
        cookie_domain: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = API_TIMEOUT_SECONDS,
        cookies: httpx.Cookies | None = None,
    ):
        self._api_base_url = api_base_url or DEFAULT_API_BASE_URL
        self._auth_token = auth_token or ""
        self._cookie_domain = cookie_domain or get_origin(self._api_base_url)
        self._transport = transport
        self._timeout = timeout
        # Session cookies set by the service (e.g. on sign-in) are sent back
        # on every later request that uses this jar.
        self._cookies = cookies if cookies is not None else httpx.Cookies()

    @classmethod
    def from_config(
        cls,
        config: LookupConfig,
        cookies: httpx.Cookies | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "SottakuApiClient":
        return cls(
            api_base_url=config.api_base_url,
            auth_token=config.auth_token,
            cookie_domain=config.resolved_cookie_domain,
            transport=transport,
            cookies=cookies,
        )

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def auth_token(self) -> str:
        return self._auth_token

    @property
    def cookie_domain(self) -> str:
        return self._cookie_domain

    # ------------------------------------------------------------------
    # Typed operations
    # ------------------------------------------------------------------

    async def login_with_password(self, username: str, password: str) -> SignInResult:
        """Exchange credentials for a bearer token.

        The client keeps using its own token; callers build a new
        configuration snapshot with the returned one.

        Raises:
            DictionaryApiError: On request failure or when no token is returned.
        """
        data = await self.request(
            LOGIN_PATH,
            method="POST",
            body={"username": username, "email": username, "password": password},
            requires_auth=False,
        )
        result = parse_sign_in(data)
        if result is None:
            raise DictionaryApiError("Sign-in response did not include a token")
        return result

    async def search(self, query: str, language: str) -> Any:
        return await self.request(SEARCH_PATH, method="POST", body={"query": query, "language": language})

    async def scan(self, text: str, language: str, max_results: int | None = None) -> ScanResponse:
        body: dict[str, Any] = {"text": text, "language": language}
        if max_results is not None:
            body["maxResults"] = max_results
        data = await self.request(SCAN_PATH, method="POST", body=body)
        response = parse_scan_response(data, text)
        logger.debug(
            "Scan completed",
            extra={"language": language, "result_count": len(response.results)},
        )
        return response

    async def get_flashcard_membership(self, question_ids: list[int], language: str) -> set[int]:
        data = await self.request(
            FLASHCARD_EXISTS_PATH,
            method="POST",
            body={"questionIds": list(question_ids), "language": language},
        )
        return parse_membership(data)

    async def add_flashcard(self, question_id: int, language: str) -> Any:
        return await self.request(
            FLASHCARD_ADD_PATH,
            method="POST",
            body={"questionId": question_id, "language": language},
        )

    async def submit_word_request(self, question_id: int, language: str) -> Any:
        return await self.request(
            WORD_REQUEST_PATH,
            method="POST",
            body={"question_id": question_id, "language": language},
        )

    async def get_word_info(self, word_id: int, language: str) -> Any:
        return await self.request(WORD_INFO_PATH.format(word_id=word_id), language=language)

    async def get_word_info_batch(self, word_ids: list[int], language: str) -> dict[str, Any]:
        data = await self.request(
            WORD_INFO_BATCH_PATH,
            method="POST",
            body={"wordIds": list(word_ids), "language": language},
        )
        if isinstance(data, dict) and isinstance(data.get("word_info"), dict):
            return data["word_info"]
        return {}

    async def get_profile(self) -> UserProfile | None:
        return parse_profile(await self.request(PROFILE_PATH))

    async def get_supported_languages(self) -> list[str]:
        return parse_supported_languages(await self.request(SUPPORTED_LANGUAGES_PATH))

    # ------------------------------------------------------------------
    # URL helper
    # ------------------------------------------------------------------

    def build_url(self, path: str, language: str | None = None) -> str:
        """Join path onto the base URL and add a language parameter if missing."""
        trimmed_base = self._api_base_url.rstrip("/")
        trimmed_path = path if path.startswith("/") else f"/{path}"
        url = httpx.URL(trimmed_base + trimmed_path)
        if language and "language" not in url.params:
            url = url.copy_add_param("language", language)
        return str(url)

    # ------------------------------------------------------------------
    # Generic request
    # ------------------------------------------------------------------

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        requires_auth: bool = True,
        language: str | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Returns the ``data`` member when present, otherwise the whole body
        (None for an empty or non-JSON body).

        Raises:
            DictionaryApiError: Non-2xx status, ``success: false`` body, or
                transport failure.
        """
        url = self.build_url(path, language)
        headers = {"Accept": "application/json"}
        if requires_auth and self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        if body is not None:
            headers["Content-Type"] = "application/json"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport, cookies=self._cookies,
            ) as client:
                response = await _send_with_retry(client, method, url, headers, body)
        except httpx.RequestError as e:
            logger.warning(
                "Sottaku API request error",
                extra={"path": path, "method": method, "error_type": type(e).__name__},
            )
            raise DictionaryApiError(f"Request failed: {type(e).__name__}") from e

        self._cookies.update(response.cookies)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success or (isinstance(payload, dict) and payload.get("success") is False):
            message = None
            if isinstance(payload, dict):
                message = payload.get("error") or payload.get("message")
            message = str(message) if message else response.reason_phrase
            logger.warning(
                "Sottaku API HTTP error",
                extra={"path": path, "method": method, "status_code": response.status_code},
            )
            raise DictionaryApiError(message or "Request failed", status_code=response.status_code)

        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.ConnectError, httpx.ConnectTimeout)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _send_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: dict[str, str],
    body: Any,
) -> httpx.Response:
    """Send a request, retrying only when the connection was never established."""
    return await client.request(method, url, headers=headers, json=body)
