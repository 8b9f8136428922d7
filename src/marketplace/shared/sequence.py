"""Sequence aggregate: the monotonic nonces that mint experience, booking and dispute ids.

A sequence is never read directly. ``next_id`` advances it by one and returns
the new value; it runs inside the caller's Unit of Work, after every check
has passed, so a failed command never consumes an id.
"""

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace

EXPERIENCES = "experience"
BOOKINGS = "booking"
DISPUTES = "dispute"


@marketplace.aggregate
class Sequence:
    key = String(identifier=True, required=True, max_length=50)
    value = Integer(default=0)

    @invariant.post
    def value_cannot_be_negative(self):
        if self.value is not None and self.value < 0:
            raise ValidationError({"value": ["Sequence value cannot be negative"]})

    def advance(self) -> int:
        self.value = self.value + 1
        return self.value


def next_id(name: str) -> int:
    """Allocate the next id from the named sequence."""
    repo = current_domain.repository_for(Sequence)
    try:
        sequence = repo.get(name)
    except ObjectNotFoundError:
        sequence = Sequence(key=name, value=0)

    allocated = sequence.advance()
    repo.add(sequence)
    return allocated
