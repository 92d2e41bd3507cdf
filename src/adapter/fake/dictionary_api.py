"""In-memory implementation of DictionaryApiPort for testing."""

from typing import Any

from domain.model.scan import ScanResponse, ScanResult
from domain.model.user import SignInResult, UserProfile


class FakeDictionaryApi:
    """Fake dictionary API that returns preconfigured responses.

    scan_results maps (text, language) to raw result dicts; unknown keys
    scan to an empty result list. Set an *_error attribute to make the
    matching operation raise it.
    """

    def __init__(
        self,
        scan_results: dict[tuple[str, str], list[dict[str, Any]]] | None = None,
        saved_ids: set[int] | None = None,
        supported_languages: list[str] | None = None,
        profile: UserProfile | None = None,
        auth_token: str = "token",
    ):
        self.scan_results = scan_results or {}
        self.original_text_lengths: dict[tuple[str, str], int] = {}
        self.saved_ids = saved_ids or set()
        self.supported_languages = supported_languages or []
        self.profile = profile
        self._auth_token = auth_token

        self.scan_error: Exception | None = None
        self.membership_error: Exception | None = None
        self.supported_languages_error: Exception | None = None
        self.profile_error: Exception | None = None
        self.login_error: Exception | None = None

        self.calls: list[tuple[str, tuple]] = []
        self.added: list[tuple[int, str]] = []
        self.word_requests: list[tuple[int, str]] = []

    @property
    def auth_token(self) -> str:
        return self._auth_token

    async def login_with_password(self, username: str, password: str) -> SignInResult:
        self.calls.append(("login", (username,)))
        if self.login_error:
            raise self.login_error
        return SignInResult(token=f"token-{username}", user=self.profile)

    async def scan(self, text: str, language: str, max_results: int | None = None) -> ScanResponse:
        self.calls.append(("scan", (text, language, max_results)))
        if self.scan_error:
            raise self.scan_error
        raw = self.scan_results.get((text, language), [])
        return ScanResponse(
            results=[ScanResult.model_validate(item) for item in raw],
            original_text_length=self.original_text_lengths.get((text, language), len(text)),
        )

    async def search(self, query: str, language: str) -> Any:
        self.calls.append(("search", (query, language)))
        return {"results": self.scan_results.get((query, language), [])}

    async def get_flashcard_membership(self, question_ids: list[int], language: str) -> set[int]:
        self.calls.append(("membership", (tuple(question_ids), language)))
        if self.membership_error:
            raise self.membership_error
        return {qid for qid in question_ids if qid in self.saved_ids}

    async def add_flashcard(self, question_id: int, language: str) -> Any:
        self.calls.append(("add_flashcard", (question_id, language)))
        self.added.append((question_id, language))
        self.saved_ids.add(question_id)
        return {"added": True}

    async def submit_word_request(self, question_id: int, language: str) -> Any:
        self.calls.append(("word_request", (question_id, language)))
        self.word_requests.append((question_id, language))
        return None

    async def get_word_info(self, word_id: int, language: str) -> Any:
        self.calls.append(("word_info", (word_id, language)))
        return None

    async def get_word_info_batch(self, word_ids: list[int], language: str) -> dict[str, Any]:
        self.calls.append(("word_info_batch", (tuple(word_ids), language)))
        return {}

    async def get_profile(self) -> UserProfile | None:
        self.calls.append(("profile", ()))
        if self.profile_error:
            raise self.profile_error
        return self.profile

    async def get_supported_languages(self) -> list[str]:
        self.calls.append(("supported_languages", ()))
        if self.supported_languages_error:
            raise self.supported_languages_error
        return list(self.supported_languages)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]
