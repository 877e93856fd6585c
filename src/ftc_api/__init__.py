"""
FTC API - Client for the FIRST Tech Challenge Events API.

Validates each call's filter combination before any network access, builds
the request URL, and returns the decoded JSON response.
"""

__version__ = "0.1.0"

from .config import Settings, get_settings
from .errors import (
    ConfigurationError,
    ConflictingOptions,
    FTCAPIError,
    FTCValidationError,
    InvalidOption,
    MissingAnyOf,
    MissingArgument,
    MissingConfiguration,
    MissingCredential,
    MissingDependency,
    RequestFailed,
)
from .seasons import DEFAULT_SEASON, Season
from .api import FTCClient, SyncFTCClient, create_token

__all__ = [
    "__version__",
    # Client
    "FTCClient",
    "SyncFTCClient",
    "create_token",
    # Config
    "Settings",
    "get_settings",
    "Season",
    "DEFAULT_SEASON",
    # Errors
    "FTCAPIError",
    "ConfigurationError",
    "MissingConfiguration",
    "MissingCredential",
    "FTCValidationError",
    "MissingArgument",
    "ConflictingOptions",
    "MissingDependency",
    "MissingAnyOf",
    "InvalidOption",
    "RequestFailed",
]
