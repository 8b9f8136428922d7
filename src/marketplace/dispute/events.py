"""Domain events for the Dispute aggregate."""

from protean.fields import Identifier, Integer, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Dispute")
class DisputeRaised:
    """A traveler opened a dispute on one of their bookings."""

    __version__ = 1

    dispute_id = Integer(required=True)
    booking_id = Integer(required=True)
    raised_by = Identifier(required=True)
    reason = Text(default="")
    raised_at = Integer(required=True)


@marketplace.event(part_of="Dispute")
class DisputeResolved:
    """The authorization root closed a dispute."""

    __version__ = 1

    dispute_id = Integer(required=True)
    resolved_by = Identifier(required=True)
    resolution = Text(default="")
    resolved_at = Integer(required=True)
