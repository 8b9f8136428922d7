import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture

from marketplace.shared.authority import authorization_root

GUIDE = "guide-alice"
TRAVELER = "traveler-bob"


@pytest.fixture(scope="session")
def marketplace_bed():
    from marketplace.domain import marketplace

    bed = DomainFixture(marketplace)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(marketplace_bed):
    with marketplace_bed.domain_context():
        yield

        # Sequences live in the same store, so ids restart at 1 per test
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def root():
    return authorization_root()


@pytest.fixture()
def verified_guide(root):
    """Account of a registered guide that the authorization root has verified."""
    from marketplace.guide.registration import RegisterGuide
    from marketplace.guide.verification import VerifyGuide

    current_domain.process(RegisterGuide(caller=GUIDE, block_height=1), asynchronous=False)
    current_domain.process(VerifyGuide(caller=root, block_height=2, guide=GUIDE), asynchronous=False)
    return GUIDE


@pytest.fixture()
def experience_id(verified_guide):
    """A "City Tour" listing priced 100 for up to 5 travelers."""
    from marketplace.experience.listing import CreateExperience

    return current_domain.process(
        CreateExperience(
            caller=verified_guide,
            block_height=3,
            title="City Tour",
            description="Three hours through the old town",
            price=100,
            location="Lisbon",
            duration=3,
            max_travelers=5,
        ),
        asynchronous=False,
    )


@pytest.fixture()
def booking_id(experience_id):
    """A confirmed booking of 3 travelers on date 20 by TRAVELER."""
    from marketplace.booking.creation import CreateBooking

    return current_domain.process(
        CreateBooking(caller=TRAVELER, block_height=4, experience_id=experience_id, date=20, travelers_count=3),
        asynchronous=False,
    )


@pytest.fixture()
def completed_booking_id(booking_id):
    from marketplace.booking.completion import CompleteBooking

    current_domain.process(CompleteBooking(caller=TRAVELER, block_height=5, booking_id=booking_id), asynchronous=False)
    return booking_id
