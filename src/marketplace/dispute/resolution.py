"""ResolveDispute: the authorization root closes an open dispute with a resolution."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.dispute.dispute import Dispute
from marketplace.domain import logger, marketplace
from marketplace.shared.authority import require_root
from marketplace.shared.errors import Unauthorized
from marketplace.shared.records import load
from marketplace.utils.logging import request_context


@marketplace.command(part_of="Dispute")
class ResolveDispute:
    caller = Identifier(required=True)
    block_height = Integer(required=True, min_value=0)
    dispute_id = Integer(required=True)
    resolution = String(max_length=500, default="")


@marketplace.command_handler(part_of=Dispute)
class ResolveDisputeHandler:
    @handle(ResolveDispute)
    def resolve_dispute(self, command):
        with request_context(command):
            require_root(command.caller, "resolve disputes")
            dispute = load(Dispute, command.dispute_id)
            if not dispute.is_open:
                raise Unauthorized(f"Dispute {command.dispute_id} is already resolved")

            dispute.resolve(
                resolved_by=command.caller,
                resolution=command.resolution,
                block_height=command.block_height,
            )
            current_domain.repository_for(Dispute).add(dispute)
            logger.info("Dispute resolved", dispute_id=dispute.dispute_id)
