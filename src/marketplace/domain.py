"""Marketplace bounded context: Guides, Experiences, Bookings, Reviews, Disputes.

Every public operation is a command processed synchronously inside a single
Unit of Work: it reads the aggregates it needs, validates, mutates, and
commits all of them together or none of them.
"""

from protean.domain import Domain

from marketplace.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

marketplace = Domain(name="marketplace")
