"""The authorization root: the single account allowed to verify guides and resolve disputes."""

import os

from marketplace.shared.errors import Unauthorized

DEFAULT_AUTHORIZATION_ROOT = "marketplace-root"


def authorization_root() -> str:
    return os.getenv("MARKETPLACE_AUTHORIZATION_ROOT", DEFAULT_AUTHORIZATION_ROOT)


def require_root(caller, action: str) -> None:
    """Raise Unauthorized unless ``caller`` is the authorization root."""
    if str(caller) != authorization_root():
        raise Unauthorized(f"Only the authorization root may {action}")
