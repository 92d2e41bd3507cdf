"""Dictionary API port — outbound interface to the remote dictionary service."""

from typing import Any, Protocol

from domain.model.scan import ScanResponse
from domain.model.user import SignInResult, UserProfile


class DictionaryApiError(Exception):
    """Remote dictionary request failed.

    Raised for non-2xx responses, bodies with ``success: false``, and
    transport failures. ``status_code`` is None for transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message or "Request failed")

    @property
    def message(self) -> str:
        return str(self)


class DictionaryApiPort(Protocol):
    """Port for the remote multi-language dictionary service.

    Implementations are bound to one configuration snapshot (base URL and
    bearer token) and parse payloads into domain types before returning.
    """

    @property
    def auth_token(self) -> str: ...

    async def login_with_password(self, username: str, password: str) -> SignInResult: ...

    async def scan(self, text: str, language: str, max_results: int | None = None) -> ScanResponse:
        """Scan text for dictionary terms.

        Always returns a list of results (possibly empty); original_text_length
        defaults to len(text) when the server omits it.
        """
        ...

    async def search(self, query: str, language: str) -> Any: ...

    async def get_flashcard_membership(self, question_ids: list[int], language: str) -> set[int]:
        """Return the subset of question_ids already saved as flashcards."""
        ...

    async def add_flashcard(self, question_id: int, language: str) -> Any: ...

    async def submit_word_request(self, question_id: int, language: str) -> Any: ...

    async def get_word_info(self, word_id: int, language: str) -> Any: ...

    async def get_word_info_batch(self, word_ids: list[int], language: str) -> dict[str, Any]: ...

    async def get_profile(self) -> UserProfile | None: ...

    async def get_supported_languages(self) -> list[str]:
        """Return supported language codes, possibly empty."""
        ...
