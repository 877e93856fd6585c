"""
FTC API token handling.

The Events API uses HTTP Basic auth with a token that is the base64
encoding of "username:key". Encoding is not encryption; treat the token as
a secret.
"""

import base64
import binascii
import logging

from ..config import FTCSettings
from ..errors import MissingConfiguration, MissingCredential

logger = logging.getLogger(__name__)


def create_token(username: str, key: str) -> str:
    """
    Create an authorization token from a username and key.

    Args:
        username: Username issued by the FTC Events API
        key: Authorization key issued with the username

    Returns:
        Token usable as the client's Basic auth credential

    Raises:
        MissingCredential: If either value is empty
    """
    if not username or not key:
        raise MissingCredential("Username and key are required to create a token")

    return base64.b64encode(f"{username}:{key}".encode("utf-8")).decode("ascii")


def decode_token(token: str) -> tuple[str, str]:
    """Split a token back into its (username, key) pair."""
    if not token:
        raise MissingCredential("Token is required")

    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise MissingCredential(f"Token is not valid base64: {e}") from e

    username, sep, key = decoded.partition(":")
    if not sep or not username or not key:
        raise MissingCredential("Token does not contain a username:key pair")
    return username, key


def token_from_settings(settings: FTCSettings) -> str:
    """
    Get the token for configured credentials.

    A pre-encoded FTC_TOKEN wins over FTC_USERNAME/FTC_KEY.

    Raises:
        MissingConfiguration: If no credentials are configured
    """
    token = settings.token.get_secret_value()
    if token:
        logger.debug("Using pre-encoded token from settings")
        return token

    if not settings.has_credentials:
        raise MissingConfiguration(
            "FTC credentials not configured. Set FTC_USERNAME and FTC_KEY "
            "(or FTC_TOKEN) in the environment or .env file."
        )

    logger.debug(f"Creating token for {settings.username}")
    return create_token(settings.username, settings.key.get_secret_value())
