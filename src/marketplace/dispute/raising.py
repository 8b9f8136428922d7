"""RaiseDispute: the traveler opens a dispute on a booking, whatever its status."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking
from marketplace.dispute.dispute import Dispute
from marketplace.domain import logger, marketplace
from marketplace.shared.errors import Unauthorized
from marketplace.shared.records import load
from marketplace.shared.sequence import DISPUTES, next_id
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Dispute")
class RaiseDispute:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    booking_id = Integer(required=True)
    reason = String(max_length=500, default="")


@marketplace.command_handler(part_of=Dispute)
class RaiseDisputeHandler:
    @handle(RaiseDispute)
    def raise_dispute(self, command):
        with request_context(command):
            booking = load(Booking, command.booking_id)
            if not booking.is_traveler(command.caller):
                raise Unauthorized(f"Only the traveler may dispute booking {command.booking_id}")

            dispute = Dispute.raise_for(
                dispute_id=next_id(DISPUTES),
                booking=booking,
                reason=command.reason,
                block_height=command.block_height,
            )
            current_domain.repository_for(Dispute).add(dispute)
            logger.info("Dispute raised", dispute_id=dispute.dispute_id, booking_id=dispute.booking_id)
            return dispute.dispute_id
