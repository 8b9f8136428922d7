"""Shared BDD fixtures and step definitions for the marketplace domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from marketplace.booking.completion import CompleteBooking
from marketplace.booking.creation import CreateBooking
from marketplace.experience.listing import CreateExperience
from marketplace.guide.registration import RegisterGuide
from marketplace.guide.verification import VerifyGuide
from marketplace.queries import check_availability, get_booking, get_guide
from marketplace.shared.authority import authorization_root
from marketplace.shared.errors import MarketplaceError


@pytest.fixture()
def outcome():
    """Container for the last command's result or captured failure."""
    return {"result": None, "exc": None}


@pytest.fixture()
def clock():
    """Logical clock handed to each command in turn."""
    return {"height": 0}


@pytest.fixture()
def run(outcome, clock):
    """Process a command at the next block height, capturing its result or typed failure."""

    def _run(command_cls, **fields):
        clock["height"] += 1
        outcome["result"], outcome["exc"] = None, None
        try:
            outcome["result"] = current_domain.process(
                command_cls(block_height=clock["height"], **fields),
                asynchronous=False,
            )
        except MarketplaceError as exc:
            outcome["exc"] = exc
        return outcome["result"]

    return _run


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a verified guide "{account}"'))
def given_verified_guide(account, run):
    run(RegisterGuide, caller=account)
    run(VerifyGuide, caller=authorization_root(), guide=account)


@given(
    parsers.cfparse('"{account}" lists "{title}" priced {price:d} for up to {capacity:d} travelers'),
    target_fixture="experience_id",
)
def given_listed_experience(account, title, price, capacity, run):
    return run(
        CreateExperience,
        caller=account,
        title=title,
        description=f"{title} with a local guide",
        price=price,
        location="Lisbon",
        duration=3,
        max_travelers=capacity,
    )


@given(
    parsers.cfparse('"{traveler}" has booked {count:d} travelers on date {date:d}'),
    target_fixture="booking_id",
)
def given_booked(traveler, count, date, experience_id, run):
    return run(
        CreateBooking,
        caller=traveler,
        experience_id=experience_id,
        date=date,
        travelers_count=count,
    )


@given(parsers.cfparse('"{traveler}" has completed the booking'))
def given_completed(traveler, booking_id, run):
    run(CompleteBooking, caller=traveler, booking_id=booking_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the command fails with "{code}"'))
def command_fails(outcome, code):
    assert outcome["exc"] is not None, "Expected a marketplace failure but the command succeeded"
    assert outcome["exc"].code == code


@then("the command succeeds")
def command_succeeds(outcome):
    assert outcome["exc"] is None, f"Unexpected failure: {outcome['exc']}"


@then(parsers.cfparse("the command returns {value:d}"))
def command_returns(outcome, value):
    assert outcome["result"] == value


@then(parsers.cfparse('guide "{account}" has earned {amount:d} over {count:d} bookings'))
def guide_totals(account, amount, count):
    guide = get_guide(account)
    assert guide.total_earnings == amount
    assert guide.total_bookings == count


@then(parsers.cfparse('guide "{account}" has rating {rating:d}'))
def guide_rating(account, rating):
    assert get_guide(account).rating == rating


@then(parsers.cfparse("date {date:d} has {count:d} travelers booked"))
def date_booked_count(experience_id, date, count):
    assert check_availability(experience_id, date).booked_count == count


@then(parsers.cfparse('the booking status is "{status}"'))
def booking_status(booking_id, status):
    assert get_booking(booking_id).status == status
