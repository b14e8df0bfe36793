"""GitHub token lookup and storage.

Tokens are resolved from the ``GITHUB_TOKEN`` environment variable or from
the system keyring (SecretService on Linux, Keychain on macOS, Credential
Manager on Windows). Token values are never logged.
"""

import os
import re

import keyring
import keyring.errors

from tentacle.constants import (
    ENV_GITHUB_TOKEN,
    KEYRING_SERVICE,
    KEYRING_USERNAME,
)
from tentacle.logger import get_logger

logger = get_logger(__name__)

# Maximum allowed token length per GitHub
MAX_TOKEN_LENGTH: int = 255

# Legacy 40-char hex, prefixed app/OAuth/personal tokens, fine-grained PATs
_TOKEN_PATTERN = re.compile(
    r"[a-f0-9]{40}"
    r"|gh[pousr]_[A-Za-z0-9_]{36,251}"
    r"|github_pat_[A-Za-z0-9_]{36,243}"
)


class KeyringUnavailableError(Exception):
    """Raised when no usable keyring backend exists."""


def validate_github_token(token: str | None) -> bool:
    """Validate GitHub token format.

    Accepts legacy 40-character hex tokens and the prefixed formats
    (``ghp_``, ``gho_``, ``ghu_``, ``ghs_``, ``ghr_``, ``github_pat_``).

    Args:
        token: The token to validate. ``None`` is invalid.

    Returns:
        True if the token format is valid, False otherwise.

    """
    if not token or not isinstance(token, str):
        return False

    token = token.strip()
    if not token or len(token) > MAX_TOKEN_LENGTH:
        return False

    return _TOKEN_PATTERN.fullmatch(token) is not None


class KeyringTokenStore:
    """Token storage backed by the system keyring."""

    def __init__(
        self,
        service: str = KEYRING_SERVICE,
        username: str = KEYRING_USERNAME,
    ) -> None:
        """Initialize the keyring token store.

        Args:
            service: The service name for keyring storage.
            username: The username for keyring storage.

        """
        self.service = service
        self.username = username

    def get(self) -> str | None:
        """Retrieve the stored token.

        Returns:
            The token, or None if nothing is stored or the keyring cannot
            be used.

        """
        try:
            token = keyring.get_password(self.service, self.username)
        except keyring.errors.KeyringError:
            # Expected in headless environments; details may contain secrets
            logger.debug("Keyring access failed")
            return None

        if token:
            logger.debug("GitHub token retrieved from keyring (value hidden)")
            return token
        logger.debug("No token stored in keyring")
        return None

    def set(self, token: str) -> None:
        """Store the token in the keyring.

        Raises:
            ValueError: If the token format is invalid
            KeyringUnavailableError: If the keyring cannot store it

        """
        if not validate_github_token(token):
            msg = "Invalid GitHub token format"
            raise ValueError(msg)
        try:
            keyring.set_password(self.service, self.username, token.strip())
        except keyring.errors.KeyringError as e:
            msg = "Keyring unavailable, cannot store token"
            raise KeyringUnavailableError(msg) from e
        logger.debug("Token saved to keyring successfully")

    def delete(self) -> None:
        """Remove the token from the keyring.

        Raises:
            keyring.errors.PasswordDeleteError: If no token is stored.

        """
        keyring.delete_password(self.service, self.username)
        logger.debug("Token removed from keyring successfully")


def resolve_token(store: KeyringTokenStore | None = None) -> str | None:
    """Return a token from the environment, falling back to the keyring."""
    token = os.getenv(ENV_GITHUB_TOKEN, "").strip()
    if token:
        logger.debug("Using GitHub token from %s", ENV_GITHUB_TOKEN)
        return token
    store = store if store is not None else KeyringTokenStore()
    return store.get()
