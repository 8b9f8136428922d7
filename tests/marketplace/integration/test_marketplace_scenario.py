"""End-to-end walk through the marketplace: listing, booking, completion, review, dispute."""

import pytest
from protean import current_domain

from marketplace.booking.completion import CompleteBooking
from marketplace.booking.creation import CreateBooking
from marketplace.dispute.raising import RaiseDispute
from marketplace.dispute.resolution import ResolveDispute
from marketplace.experience.listing import CreateExperience
from marketplace.guide.registration import RegisterGuide
from marketplace.guide.verification import VerifyGuide
from marketplace.queries import check_availability, get_booking, get_dispute, get_guide, get_review
from marketplace.review.submission import SubmitReview
from marketplace.shared.errors import Unauthorized

GUIDE_A = "account-a"
TRAVELER_B = "account-b"


def _process(command):
    return current_domain.process(command, asynchronous=False)


class TestCityTourScenario:
    def test_full_lifecycle(self, root):
        _process(RegisterGuide(caller=GUIDE_A, block_height=1))
        _process(VerifyGuide(caller=root, block_height=2, guide=GUIDE_A))
        experience_id = _process(
            CreateExperience(
                caller=GUIDE_A,
                block_height=3,
                title="City Tour",
                description="Walking tour of the centre",
                price=100,
                location="Lisbon",
                duration=3,
                max_travelers=5,
            )
        )
        assert experience_id == 1

        booking_id = _process(
            CreateBooking(caller=TRAVELER_B, block_height=4, experience_id=experience_id, date=20, travelers_count=3)
        )
        assert booking_id == 1
        assert get_booking(booking_id).total_payment == 300
        assert get_guide(GUIDE_A).total_earnings == 300
        assert get_guide(GUIDE_A).total_bookings == 1
        assert check_availability(experience_id, 20).booked_count == 3

        # Reviewing before completion is refused
        with pytest.raises(Unauthorized):
            _process(SubmitReview(caller=TRAVELER_B, block_height=5, booking_id=booking_id, rating=80, comment="Early"))

        _process(CompleteBooking(caller=TRAVELER_B, block_height=6, booking_id=booking_id))
        _process(SubmitReview(caller=TRAVELER_B, block_height=7, booking_id=booking_id, rating=80, comment="Superb"))

        assert get_review(booking_id).rating == 80
        assert get_guide(GUIDE_A).rating == 80

        dispute_id = _process(
            RaiseDispute(caller=TRAVELER_B, block_height=8, booking_id=booking_id, reason="Tour ran short")
        )
        assert dispute_id == 1
        _process(ResolveDispute(caller=root, block_height=9, dispute_id=dispute_id, resolution="Noted"))
        assert get_dispute(dispute_id).status == "Resolved"
