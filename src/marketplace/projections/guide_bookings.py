"""GuideBookings: bookings listed per guide, for callers that need that index.

The core never reads this model; it is kept current from booking events.
"""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking, BookingStatus
from marketplace.booking.events import BookingCompleted, BookingConfirmed
from marketplace.domain import marketplace


@marketplace.projection
class GuideBookings:
    booking_id = Integer(identifier=True, required=True)
    guide = Identifier(required=True)
    experience_id = Integer(required=True)
    traveler = Identifier(required=True)
    date = Integer(required=True)
    travelers_count = Integer(required=True)
    total_payment = Integer(required=True)
    status = String(max_length=20, required=True)
    updated_at = Integer()


@marketplace.projector(projector_for=GuideBookings, aggregates=[Booking])
class GuideBookingsProjector:
    @on(BookingConfirmed)
    def on_booking_confirmed(self, event):
        current_domain.repository_for(GuideBookings).add(
            GuideBookings(
                booking_id=event.booking_id,
                guide=event.guide,
                experience_id=event.experience_id,
                traveler=event.traveler,
                date=event.date,
                travelers_count=event.travelers_count,
                total_payment=event.total_payment,
                status=BookingStatus.CONFIRMED.value,
                updated_at=event.confirmed_at,
            )
        )

    @on(BookingCompleted)
    def on_booking_completed(self, event):
        repo = current_domain.repository_for(GuideBookings)
        try:
            entry = repo.get(event.booking_id)
        except ObjectNotFoundError:
            return  # Booking predates the projection

        entry.status = BookingStatus.COMPLETED.value
        entry.updated_at = event.completed_at
        repo.add(entry)
