"""Domain events for the Booking aggregate."""

from protean.fields import Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Booking")
class BookingConfirmed:
    """A traveler booked an experience for a date."""

    __version__ = 1

    booking_id = Integer(required=True)
    experience_id = Integer(required=True)
    guide = Identifier(required=True)
    traveler = Identifier(required=True)
    date = Integer(required=True)
    travelers_count = Integer(required=True)
    total_payment = Integer(required=True)
    confirmed_at = Integer(required=True)


@marketplace.event(part_of="Booking")
class BookingCompleted:
    """The traveler marked the experience as taken."""

    __version__ = 1

    booking_id = Integer(required=True)
    traveler = Identifier(required=True)
    completed_at = Integer(required=True)
