"""Experience aggregate: one listing in the Experience Catalog.

Listings are created by verified, active guides and inherit that
verification. After creation only the ``active`` flag changes, and only at
the owning guide's request.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String

from marketplace.domain import marketplace
from marketplace.experience.events import ExperienceListed, ExperienceStatusChanged


@marketplace.aggregate
class Experience:
    """A bookable tour offered by a guide."""

    experience_id = Integer(identifier=True, required=True)
    guide = Identifier(required=True)
    title = String(max_length=100, default="")
    description = String(max_length=500, default="")
    price = Integer(required=True)
    location = String(max_length=100, default="")
    duration = Integer(required=True)
    max_travelers = Integer(required=True)
    verified = Boolean(default=True)
    active = Boolean(default=True)
    created_at = Integer(required=True)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be positive"]})

    @invariant.post
    def capacity_must_be_positive(self):
        if self.max_travelers is not None and self.max_travelers <= 0:
            raise ValidationError({"max_travelers": ["Max travelers must be positive"]})

    @classmethod
    def publish(
        cls,
        experience_id,
        guide,
        title,
        description,
        price,
        location,
        duration,
        max_travelers,
        block_height,
    ):
        experience = cls(
            experience_id=experience_id,
            guide=guide,
            title=title,
            description=description,
            price=price,
            location=location,
            duration=duration,
            max_travelers=max_travelers,
            verified=True,
            active=True,
            created_at=block_height,
        )
        experience.raise_(
            ExperienceListed(
                experience_id=experience_id,
                guide=str(guide),
                title=title,
                price=price,
                location=location,
                max_travelers=max_travelers,
                listed_at=block_height,
            )
        )
        return experience

    def is_owned_by(self, account) -> bool:
        return str(self.guide) == str(account)

    def accepts(self, travelers_count) -> bool:
        """A single booking may carry between one and ``max_travelers`` travelers."""
        return 0 < travelers_count <= self.max_travelers

    def total_for(self, travelers_count) -> int:
        return self.price * travelers_count

    def set_active(self, active, block_height):
        self.active = active
        self.raise_(
            ExperienceStatusChanged(
                experience_id=self.experience_id,
                guide=str(self.guide),
                active=active,
                changed_at=block_height,
            )
        )
