from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Domain model representing the signed-in dictionary service user."""
    id: int = 0
    username: str | None = None
    email: str | None = None
    is_pro: bool = False

    @property
    def display_name(self) -> str:
        for candidate in (self.username, self.email):
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
        return ""


@dataclass(frozen=True)
class SignInResult:
    """Bearer token and user returned by a password sign-in."""
    token: str
    user: UserProfile | None = None
