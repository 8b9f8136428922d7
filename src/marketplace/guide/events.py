"""Domain events for the Guide aggregate."""

from protean.fields import Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Guide")
class GuideRegistered:
    """An account registered itself as a guide."""

    __version__ = 1

    account = Identifier(required=True)
    joined_at = Integer(required=True)


@marketplace.event(part_of="Guide")
class GuideVerified:
    """The authorization root verified a guide's credentials."""

    __version__ = 1

    account = Identifier(required=True)
    verified_by = Identifier(required=True)
    verified_at = Integer(required=True)


@marketplace.event(part_of="Guide")
class GuideRated:
    """A traveler's review moved the guide's running rating."""

    __version__ = 1

    account = Identifier(required=True)
    booking_id = Integer(required=True)
    review_rating = Integer(required=True)
    previous_rating = Integer(required=True)
    new_rating = Integer(required=True)
    total_bookings = Integer(required=True)
    rated_at = Integer(required=True)
