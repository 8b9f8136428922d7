"""UpdateExperienceStatus: the owning guide opens or closes a listing."""

from protean import handle
from protean.fields import Boolean, Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.experience.experience import Experience
from marketplace.shared.errors import Unauthorized
from marketplace.shared.records import load
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Experience")
class UpdateExperienceStatus:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    experience_id = Integer(required=True)
    active = Boolean(required=True)


@marketplace.command_handler(part_of=Experience)
class UpdateExperienceStatusHandler:
    @handle(UpdateExperienceStatus)
    def update_experience_status(self, command):
        with request_context(command):
            experience = load(Experience, command.experience_id)
            if not experience.is_owned_by(command.caller):
                raise Unauthorized(f"Only the owning guide may change experience {command.experience_id}")

            experience.set_active(command.active, block_height=command.block_height)
            current_domain.repository_for(Experience).add(experience)
            logger.info(
                "Experience status changed",
                experience_id=experience.experience_id,
                active=experience.active,
            )
