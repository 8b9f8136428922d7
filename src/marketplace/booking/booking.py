"""Booking aggregate: a traveler's reservation of an experience on a date.

State Machine (2 states):
    CONFIRMED → COMPLETED
    COMPLETED → (terminal)

``total_payment`` is fixed at creation as price × travelers. Nothing moves
funds; the amount is only recorded.
"""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String

from marketplace.booking.events import BookingCompleted, BookingConfirmed
from marketplace.domain import marketplace


class BookingStatus(Enum):
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"


_VALID_TRANSITIONS = {
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED},
    BookingStatus.COMPLETED: set(),
}


@marketplace.aggregate
class Booking:
    booking_id = Integer(identifier=True, required=True)
    experience_id = Integer(required=True)
    traveler = Identifier(required=True)
    date = Integer(required=True)
    travelers_count = Integer(required=True)
    total_payment = Integer(required=True)
    status = String(choices=BookingStatus, default=BookingStatus.CONFIRMED.value)
    created_at = Integer(required=True)
    completed_at = Integer(default=0)

    @invariant.post
    def travelers_count_must_be_positive(self):
        if self.travelers_count is not None and self.travelers_count <= 0:
            raise ValidationError({"travelers_count": ["A booking needs at least one traveler"]})

    @invariant.post
    def payment_cannot_be_negative(self):
        if self.total_payment is not None and self.total_payment < 0:
            raise ValidationError({"total_payment": ["Total payment cannot be negative"]})

    @classmethod
    def confirm(cls, booking_id, experience, traveler, date, travelers_count, block_height):
        booking = cls(
            booking_id=booking_id,
            experience_id=experience.experience_id,
            traveler=traveler,
            date=date,
            travelers_count=travelers_count,
            total_payment=experience.total_for(travelers_count),
            status=BookingStatus.CONFIRMED.value,
            created_at=block_height,
            completed_at=0,
        )
        booking.raise_(
            BookingConfirmed(
                booking_id=booking_id,
                experience_id=experience.experience_id,
                guide=str(experience.guide),
                traveler=str(traveler),
                date=date,
                travelers_count=travelers_count,
                total_payment=booking.total_payment,
                confirmed_at=block_height,
            )
        )
        return booking

    def is_traveler(self, account) -> bool:
        return str(self.traveler) == str(account)

    def can_transition_to(self, target_status) -> bool:
        return target_status in _VALID_TRANSITIONS[BookingStatus(self.status)]

    @property
    def is_completed(self) -> bool:
        return BookingStatus(self.status) == BookingStatus.COMPLETED

    def complete(self, block_height):
        if not self.can_transition_to(BookingStatus.COMPLETED):
            raise ValidationError({"status": [f"Cannot transition from {self.status} to Completed"]})

        self.status = BookingStatus.COMPLETED.value
        self.completed_at = block_height
        self.raise_(
            BookingCompleted(
                booking_id=self.booking_id,
                traveler=str(self.traveler),
                completed_at=block_height,
            )
        )
