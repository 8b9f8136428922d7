"""Typed failures raised by marketplace command handlers.

Every failure is detected before the handler writes anything, so raising one
rolls back an untouched Unit of Work. ``Unauthorized`` covers both a caller
without the right relationship to a record and a record in the wrong state
for the action; the two are deliberately indistinguishable to callers.
"""


class MarketplaceError(Exception):
    """Base class for all marketplace failures."""

    code = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class NotFound(MarketplaceError):
    """A referenced guide, experience, booking, review or dispute does not exist."""

    code = "NotFound"


class Unauthorized(MarketplaceError):
    """Wrong caller, wrong record state, or a non-root caller on a root-only action."""

    code = "Unauthorized"


class InvalidAmount(MarketplaceError):
    """A numeric argument is out of range (price, traveler count, rating)."""

    code = "InvalidAmount"


class AlreadyExists(MarketplaceError):
    """The record being created is already present."""

    code = "AlreadyExists"


class NotVerified(MarketplaceError):
    """The guide has not been verified by the authorization root."""

    code = "NotVerified"
