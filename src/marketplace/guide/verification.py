"""VerifyGuide: the authorization root vouches for a guide's credentials."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.guide.guide import Guide
from marketplace.shared.authority import require_root
from marketplace.shared.records import load
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Guide")
class VerifyGuide:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    guide = Identifier(required=True)


@marketplace.command_handler(part_of=Guide)
class VerifyGuideHandler:
    @handle(VerifyGuide)
    def verify_guide(self, command):
        with request_context(command):
            # Root check precedes the existence check
            require_root(command.caller, "verify guides")
            guide = load(Guide, command.guide)

            guide.verify(verified_by=command.caller, block_height=command.block_height)
            current_domain.repository_for(Guide).add(guide)
            logger.info("Guide verified", account=str(guide.account))
