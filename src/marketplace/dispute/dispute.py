"""Dispute aggregate: a traveler's complaint about a booking.

State Machine (2 states):
    OPEN → RESOLVED
    RESOLVED → (terminal)
"""

from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String

from marketplace.dispute.events import DisputeRaised, DisputeResolved
from marketplace.domain import marketplace


class DisputeStatus(Enum):
    OPEN = "Open"
    RESOLVED = "Resolved"


@marketplace.aggregate
class Dispute:
    dispute_id = Integer(identifier=True, required=True)
    booking_id = Integer(required=True)
    raised_by = Identifier(required=True)
    reason = String(max_length=500, default="")
    status = String(choices=DisputeStatus, default=DisputeStatus.OPEN.value)
    resolution = String(max_length=500, default="")
    created_at = Integer(required=True)

    @classmethod
    def raise_for(cls, dispute_id, booking, reason, block_height):
        dispute = cls(
            dispute_id=dispute_id,
            booking_id=booking.booking_id,
            raised_by=booking.traveler,
            reason=reason,
            status=DisputeStatus.OPEN.value,
            resolution="",
            created_at=block_height,
        )
        dispute.raise_(
            DisputeRaised(
                dispute_id=dispute_id,
                booking_id=booking.booking_id,
                raised_by=str(booking.traveler),
                reason=reason,
                raised_at=block_height,
            )
        )
        return dispute

    @property
    def is_open(self) -> bool:
        return DisputeStatus(self.status) == DisputeStatus.OPEN

    def resolve(self, resolved_by, resolution, block_height):
        if not self.is_open:
            raise ValidationError({"status": ["Dispute is already resolved"]})

        self.status = DisputeStatus.RESOLVED.value
        self.resolution = resolution
        self.raise_(
            DisputeResolved(
                dispute_id=self.dispute_id,
                resolved_by=str(resolved_by),
                resolution=resolution,
                resolved_at=block_height,
            )
        )
