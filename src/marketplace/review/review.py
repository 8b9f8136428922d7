"""Review aggregate: one traveler review per completed booking.

Keyed by the booking it reviews and immutable once stored.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer, String

from marketplace.domain import marketplace
from marketplace.review.events import ReviewSubmitted

MAX_RATING = 100


@marketplace.aggregate
class Review:
    booking_id = Integer(identifier=True, required=True)
    rating = Integer(required=True)
    comment = String(max_length=500)
    reviewed_at = Integer(required=True)

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not 0 <= self.rating <= MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be between 0 and {MAX_RATING}"]})

    @classmethod
    def submit(cls, booking, guide, rating, comment, block_height):
        review = cls(
            booking_id=booking.booking_id,
            rating=rating,
            comment=comment,
            reviewed_at=block_height,
        )
        review.raise_(
            ReviewSubmitted(
                booking_id=booking.booking_id,
                traveler=str(booking.traveler),
                guide=str(guide.account),
                rating=rating,
                comment=comment,
                reviewed_at=block_height,
            )
        )
        return review
