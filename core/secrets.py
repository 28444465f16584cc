"""API key lookup for the Stash server: OS keyring first, then environment."""

import logging
import os

import keyring
from keyring.errors import KeyringError

logger = logging.getLogger(__name__)
SERVICE_NAME = "stash-setup"


def get_secret(name: str) -> str | None:
    """Resolve a secret by name: keyring -> os.environ. Empty values count as unset."""
    try:
        value = keyring.get_password(SERVICE_NAME, name)
        if value:
            return value
    except KeyringError:
        logger.debug("keyring lookup failed for %s, falling back to env", name)
    return os.environ.get(name) or None


def resolve_api_key(settings: dict) -> str | None:
    """Return the server API key named by settings server.api_key_secret, if any."""
    name = (settings.get("server") or {}).get("api_key_secret")
    if not name:
        return None
    return get_secret(name)
