"""Domain events for the Experience aggregate."""

from protean.fields import Boolean, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Experience")
class ExperienceListed:
    """A verified guide published a new experience."""

    __version__ = 1

    experience_id = Integer(required=True)
    guide = Identifier(required=True)
    title = String(default="")
    price = Integer(required=True)
    location = String(default="")
    max_travelers = Integer(required=True)
    listed_at = Integer(required=True)


@marketplace.event(part_of="Experience")
class ExperienceStatusChanged:
    """The owning guide opened or closed an experience for booking."""

    __version__ = 1

    experience_id = Integer(required=True)
    guide = Identifier(required=True)
    active = Boolean(required=True)
    changed_at = Integer(required=True)
