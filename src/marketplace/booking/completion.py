"""CompleteBooking: the traveler marks a confirmed booking as completed."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking, BookingStatus
from marketplace.domain import logger, marketplace
from marketplace.shared.errors import Unauthorized
from marketplace.shared.records import load
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Booking")
class CompleteBooking:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    booking_id = Integer(required=True)


@marketplace.command_handler(part_of=Booking)
class CompleteBookingHandler:
    @handle(CompleteBooking)
    def complete_booking(self, command):
        with request_context(command):
            booking = load(Booking, command.booking_id)
            # Wrong caller and wrong status report the same failure
            if not booking.is_traveler(command.caller) or not booking.can_transition_to(BookingStatus.COMPLETED):
                raise Unauthorized(f"Booking {command.booking_id} cannot be completed by {command.caller}")

            booking.complete(block_height=command.block_height)
            current_domain.repository_for(Booking).add(booking)
            logger.info("Booking completed", booking_id=booking.booking_id)
