"""Read-only queries over the marketplace records.

No authorization and no mutation. Each lookup returns the stored record or
None when it is absent.
"""

from protean.utils.globals import current_domain

from marketplace.booking.booking import Booking
from marketplace.dispute.dispute import Dispute
from marketplace.experience.availability import AvailabilitySlot, slot_key
from marketplace.experience.experience import Experience
from marketplace.guide.guide import Guide
from marketplace.projections.guide_bookings import GuideBookings
from marketplace.review.review import Review
from marketplace.shared.records import find


def get_guide(account):
    return find(Guide, account)


def get_experience(experience_id):
    return find(Experience, experience_id)


def get_booking(booking_id):
    return find(Booking, booking_id)


def get_review(booking_id):
    return find(Review, booking_id)


def get_dispute(dispute_id):
    return find(Dispute, dispute_id)


def check_availability(experience_id, date):
    """The slot for ``(experience_id, date)``; absent until the first booking on that date."""
    return find(AvailabilitySlot, slot_key(experience_id, date))


def bookings_for_guide(account):
    """Projected bookings across all of a guide's experiences, oldest first."""
    entries = current_domain.repository_for(GuideBookings)._dao.query.filter(guide=str(account)).all().items
    return sorted(entries, key=lambda entry: entry.booking_id)
