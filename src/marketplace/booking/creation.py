"""CreateBooking: any caller books travelers onto an active experience.

Booking creation moves three records together: the new Booking, the
guide's booking and earnings counters, and the per-date AvailabilitySlot.
All three are added in this handler's Unit of Work.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking
from marketplace.domain import logger, marketplace
from marketplace.experience.availability import AvailabilitySlot, slot_key
from marketplace.experience.experience import Experience
from marketplace.guide.guide import Guide
from marketplace.shared.errors import InvalidAmount, Unauthorized
from marketplace.shared.records import find, load
from marketplace.shared.sequence import BOOKINGS, next_id
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Booking")
class CreateBooking:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    experience_id = Integer(required=True)
    date = Integer(required=True)
    travelers_count = Integer(required=True)


@marketplace.command_handler(part_of=Booking)
class CreateBookingHandler:
    @handle(CreateBooking)
    def create_booking(self, command):
        with request_context(command):
            experience = load(Experience, command.experience_id)
            guide = load(Guide, experience.guide)

            if not experience.active:
                raise Unauthorized(f"Experience {command.experience_id} is not open for booking")
            if not experience.accepts(command.travelers_count):
                raise InvalidAmount(
                    f"Travelers count must be between 1 and {experience.max_travelers}, "
                    f"got {command.travelers_count}"
                )

            booking = Booking.confirm(
                booking_id=next_id(BOOKINGS),
                experience=experience,
                traveler=command.caller,
                date=command.date,
                travelers_count=command.travelers_count,
                block_height=command.block_height,
            )
            current_domain.repository_for(Booking).add(booking)

            guide.record_booking(booking.total_payment)
            current_domain.repository_for(Guide).add(guide)

            # No ceiling across bookings: booked_count may exceed max_travelers
            slot = find(AvailabilitySlot, slot_key(command.experience_id, command.date))
            if slot is None:
                slot = AvailabilitySlot.open(
                    experience_id=command.experience_id,
                    date=command.date,
                    travelers_count=command.travelers_count,
                )
            else:
                slot.add_travelers(command.travelers_count)
            current_domain.repository_for(AvailabilitySlot).add(slot)

            logger.info(
                "Booking confirmed",
                booking_id=booking.booking_id,
                experience_id=booking.experience_id,
                travelers_count=booking.travelers_count,
                total_payment=booking.total_payment,
            )
            return booking.booking_id
