"""
FTC API error hierarchy.

Catch ``FTCAPIError`` for anything raised by this package. Validation
errors are raised before any network access; ``RequestFailed`` means the
server answered with a non-success status. Network failures surface as
``httpx.RequestError`` and are not wrapped.
"""

from collections.abc import Sequence


class FTCAPIError(Exception):
    """Base exception for FTC API client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(FTCAPIError):
    """Raised when the client or a token cannot be set up."""

    pass


class MissingConfiguration(ConfigurationError):
    """Raised when a token or season is missing or unsupported."""

    pass


class MissingCredential(ConfigurationError):
    """Raised when a username or key is missing while creating a token."""

    pass


# =============================================================================
# Validation
# =============================================================================


class FTCValidationError(FTCAPIError, ValueError):
    """Raised when call arguments are illegal for an operation."""

    pass


class MissingArgument(FTCValidationError):
    """A required argument was empty or absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is required")


class ConflictingOptions(FTCValidationError):
    """Two options that cannot be combined were both given."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class MissingDependency(FTCValidationError):
    """An option was given without an option it depends on."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class MissingAnyOf(FTCValidationError):
    """None of a group of options was given, but one is required."""

    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(f"Must specify at least one of {' or '.join(self.names)}")


class InvalidOption(FTCValidationError):
    """An option value has the wrong type or an unknown option was given."""

    pass


# =============================================================================
# Transport
# =============================================================================


class RequestFailed(FTCAPIError):
    """Raised when the API responds with a non-success status."""

    def __init__(self, status_code: int, status_text: str, url: str | None = None):
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"API request failed: {status_code} {status_text}")
