"""RegisterGuide: an account registers itself as a guide."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.guide.guide import Guide
from marketplace.shared.errors import AlreadyExists
from marketplace.shared.records import find
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Guide")
class RegisterGuide:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)


@marketplace.command_handler(part_of=Guide)
class RegisterGuideHandler:
    @handle(RegisterGuide)
    def register_guide(self, command):
        with request_context(command):
            if find(Guide, command.caller) is not None:
                raise AlreadyExists(f"Account {command.caller} is already registered as a guide")

            guide = Guide.register(account=command.caller, block_height=command.block_height)
            current_domain.repository_for(Guide).add(guide)
            logger.info("Guide registered", account=str(guide.account))
