"""AvailabilitySlot aggregate: cumulative travelers booked per experience and date.

Slots are created or topped up as a side effect of booking creation and are
never decremented. ``booked_count`` is not capped: ``max_travelers`` bounds
one booking, not the sum of all bookings on a date.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Integer, String

from marketplace.domain import marketplace


def slot_key(experience_id, date) -> str:
    return f"{experience_id}:{date}"


@marketplace.aggregate
class AvailabilitySlot:
    slot_id = String(identifier=True, required=True, max_length=50)
    experience_id = Integer(required=True)
    date = Integer(required=True)
    available = Boolean(default=True)
    booked_count = Integer(default=0)

    @invariant.post
    def booked_count_cannot_be_negative(self):
        if self.booked_count is not None and self.booked_count < 0:
            raise ValidationError({"booked_count": ["Booked count cannot be negative"]})

    @classmethod
    def open(cls, experience_id, date, travelers_count):
        return cls(
            slot_id=slot_key(experience_id, date),
            experience_id=experience_id,
            date=date,
            available=True,
            booked_count=travelers_count,
        )

    def add_travelers(self, travelers_count):
        self.booked_count = self.booked_count + travelers_count
