"""Guide aggregate: the Guide Registry's record of one tour guide.

A guide is keyed by the account that registered it. Verification is a
one-way flag set by the authorization root. The booking and earnings
counters are moved only by the Booking Engine, and the rating only by the
Review & Rating Aggregator, each inside its own command's Unit of Work.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer

from marketplace.domain import marketplace
from marketplace.guide.events import GuideRated, GuideRegistered, GuideVerified


@marketplace.aggregate
class Guide:
    """A registered tour guide and its running totals."""

    account = Identifier(identifier=True, required=True)
    verified = Boolean(default=False)
    rating = Integer(default=0)
    total_bookings = Integer(default=0)
    total_earnings = Integer(default=0)
    active = Boolean(default=True)
    joined_at = Integer(required=True)

    @invariant.post
    def counters_cannot_be_negative(self):
        if (self.total_bookings or 0) < 0 or (self.total_earnings or 0) < 0:
            raise ValidationError({"counters": ["Booking and earnings counters cannot be negative"]})

    @classmethod
    def register(cls, account, block_height):
        guide = cls(
            account=account,
            verified=False,
            rating=0,
            total_bookings=0,
            total_earnings=0,
            active=True,
            joined_at=block_height,
        )
        guide.raise_(GuideRegistered(account=str(account), joined_at=block_height))
        return guide

    def verify(self, verified_by, block_height):
        self.verified = True
        self.raise_(
            GuideVerified(
                account=str(self.account),
                verified_by=str(verified_by),
                verified_at=block_height,
            )
        )

    def record_booking(self, total_cost):
        """Count one more booking and add its payment to the guide's earnings."""
        with atomic_change(self):
            self.total_bookings = self.total_bookings + 1
            self.total_earnings = self.total_earnings + total_cost

    def apply_review_rating(self, booking_id, review_rating, block_height):
        """Fold a review into the running rating.

        The weight is the guide's booking count at review time, not the number
        of reviews received, and the division floors.
        """
        previous = self.rating
        self.rating = (previous * self.total_bookings + review_rating) // self.total_bookings
        self.raise_(
            GuideRated(
                account=str(self.account),
                booking_id=booking_id,
                review_rating=review_rating,
                previous_rating=previous,
                new_rating=self.rating,
                total_bookings=self.total_bookings,
                rated_at=block_height,
            )
        )
