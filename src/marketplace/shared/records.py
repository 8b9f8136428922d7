"""Record lookups shared by command handlers and read queries."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.shared.errors import NotFound


def find(aggregate_cls, identifier):
    """Return the aggregate stored under ``identifier``, or None."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def load(aggregate_cls, identifier):
    """Return the aggregate stored under ``identifier`` or raise NotFound."""
    record = find(aggregate_cls, identifier)
    if record is None:
        raise NotFound(f"{aggregate_cls.__name__} {identifier} does not exist")
    return record
