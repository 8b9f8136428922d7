"""Domain events for the Review aggregate."""

from protean.fields import Identifier, Integer, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Review")
class ReviewSubmitted:
    """A traveler reviewed a completed booking."""

    __version__ = 1

    booking_id = Integer(required=True)
    traveler = Identifier(required=True)
    guide = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    reviewed_at = Integer(required=True)
