"""SubmitReview: the traveler reviews a completed booking and moves the guide's rating.

A booking can be reviewed once. A second submission is rejected instead of
overwriting the first review and folding its rating in again.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking
from marketplace.domain import logger, marketplace
from marketplace.experience.experience import Experience
from marketplace.guide.guide import Guide
from marketplace.review.review import MAX_RATING, Review
from marketplace.shared.errors import AlreadyExists, InvalidAmount, Unauthorized
from marketplace.shared.records import find, load
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Review")
class SubmitReview:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    booking_id = Integer(required=True)
    rating = Integer(required=True)
    comment = String(max_length=500)


@marketplace.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        with request_context(command):
            booking = load(Booking, command.booking_id)
            if not booking.is_traveler(command.caller) or not booking.is_completed:
                raise Unauthorized(f"Booking {command.booking_id} cannot be reviewed by {command.caller}")
            if not 0 <= command.rating <= MAX_RATING:
                raise InvalidAmount(f"Rating must be between 0 and {MAX_RATING}, got {command.rating}")
            if find(Review, command.booking_id) is not None:
                raise AlreadyExists(f"Booking {command.booking_id} has already been reviewed")

            experience = load(Experience, booking.experience_id)
            guide = load(Guide, experience.guide)

            review = Review.submit(
                booking=booking,
                guide=guide,
                rating=command.rating,
                comment=command.comment,
                block_height=command.block_height,
            )
            current_domain.repository_for(Review).add(review)

            guide.apply_review_rating(
                booking_id=booking.booking_id,
                review_rating=command.rating,
                block_height=command.block_height,
            )
            current_domain.repository_for(Guide).add(guide)

            logger.info(
                "Review submitted",
                booking_id=review.booking_id,
                rating=review.rating,
                guide=str(guide.account),
                guide_rating=guide.rating,
            )
