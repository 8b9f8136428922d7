"""BDD tests for the booking lifecycle."""

from pytest_bdd import parsers, scenarios, when

from marketplace.booking.completion import CompleteBooking
from marketplace.booking.creation import CreateBooking
from marketplace.review.submission import SubmitReview

scenarios("features/booking_lifecycle.feature")


@when(parsers.cfparse('"{traveler}" books {count:d} travelers on date {date:d}'))
def book(traveler, count, date, experience_id, run):
    run(
        CreateBooking,
        caller=traveler,
        experience_id=experience_id,
        date=date,
        travelers_count=count,
    )


@when(parsers.cfparse('"{traveler}" completes the booking'))
def complete(traveler, booking_id, run):
    run(CompleteBooking, caller=traveler, booking_id=booking_id)


@when(parsers.cfparse('"{traveler}" reviews the booking with rating {rating:d}'))
def review(traveler, rating, booking_id, run):
    run(
        SubmitReview,
        caller=traveler,
        booking_id=booking_id,
        rating=rating,
        comment="Written from a scenario",
    )
