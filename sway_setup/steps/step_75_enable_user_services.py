from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib import services

logger = logging.getLogger(__name__)


class EnableUserServicesStep:
    step_id = "75_enable_user_services"
    description = "Enable PipeWire user services"
    # Needs a user systemd instance, which is absent over plain ssh/su.
    critical = False

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return services.all_enabled(ctx.config.user_services, user=True)

    def run(self, ctx: ProvisionContext) -> None:
        for name in ctx.config.user_services:
            if not services.is_enabled(name, user=True):
                services.enable_user(name, dry_run=ctx.dry_run)
