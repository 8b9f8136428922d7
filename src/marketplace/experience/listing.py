"""CreateExperience: a verified, active guide lists a new experience."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.experience.experience import Experience
from marketplace.guide.guide import Guide
from marketplace.shared.errors import InvalidAmount, NotVerified, Unauthorized
from marketplace.shared.records import load
from marketplace.shared.sequence import EXPERIENCES, next_id
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Experience")
class CreateExperience:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    title = String(max_length=100, default="")
    description = String(max_length=500, default="")
    price = Integer(required=True)
    location = String(max_length=100, default="")
    duration = Integer(required=True)
    max_travelers = Integer(required=True)


@marketplace.command_handler(part_of=Experience)
class CreateExperienceHandler:
    @handle(CreateExperience)
    def create_experience(self, command):
        with request_context(command):
            guide = load(Guide, command.caller)
            if not guide.verified:
                raise NotVerified(f"Guide {command.caller} is not verified")
            if not guide.active:
                raise Unauthorized(f"Guide {command.caller} is not active")
            if command.price <= 0:
                raise InvalidAmount("Price must be greater than zero")
            if command.max_travelers <= 0:
                raise InvalidAmount("Max travelers must be greater than zero")

            experience = Experience.publish(
                experience_id=next_id(EXPERIENCES),
                guide=command.caller,
                title=command.title,
                description=command.description,
                price=command.price,
                location=command.location,
                duration=command.duration,
                max_travelers=command.max_travelers,
                block_height=command.block_height,
            )
            current_domain.repository_for(Experience).add(experience)
            logger.info(
                "Experience listed",
                experience_id=experience.experience_id,
                guide=str(experience.guide),
                price=experience.price,
            )
            return experience.experience_id
