"""Sign-in and profile display helpers.

Session handling beyond issuing a token is owned by the settings layer;
these helpers only talk to the service and shape the result.
"""

import logging

from domain.model.errors import ValidationError
from domain.model.user import SignInResult, UserProfile
from port.dictionary_api import DictionaryApiPort

logger = logging.getLogger(__name__)


async def sign_in(api: DictionaryApiPort, username: str, password: str) -> SignInResult:
    """Exchange credentials for a bearer token.

    Raises:
        ValidationError: username or password is blank.
        DictionaryApiError: The service rejected the credentials.
    """
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Enter a username and password")
    result = await api.login_with_password(username, password)
    logger.info("Signed in", extra={"user_id": result.user.id if result.user else None})
    return result


async def load_profile(api: DictionaryApiPort) -> UserProfile | None:
    """Fetch the current user's profile; None if unavailable."""
    if not api.auth_token:
        return None
    try:
        return await api.get_profile()
    except Exception as e:
        logger.warning(
            "Profile fetch failed",
            extra={"error_type": type(e).__name__, "error": str(e)},
        )
        return None


def signed_in_status_text(user: UserProfile | None) -> str:
    name = user.display_name if user else ""
    return f"Signed in as {name}" if name else "Signed in"
