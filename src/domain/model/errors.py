"""Domain-level exceptions.

Services raise these errors to express lookup failures the caller must see.
Gateway failures are reported separately as DictionaryApiError (port layer).
"""

UPGRADE_URL = "https://sottaku.app/upgrade"


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule."""


class ConfigurationError(DomainError):
    """Lookup attempted before any configuration was supplied."""


class AuthenticationRequiredError(DomainError):
    """Remote lookups are enabled but no credential is present."""

    def __init__(self, message: str = "Sign in to Sottaku from the settings page to enable remote lookups."):
        super().__init__(message)


class UpgradeRequiredError(DomainError):
    """The service refused the request because the account lacks a subscription."""

    def __init__(self, upgrade_url: str = UPGRADE_URL):
        self.upgrade_url = upgrade_url
        super().__init__(f"Upgrade required: {upgrade_url}")
