from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib import services

logger = logging.getLogger(__name__)


class EnableServicesStep:
    step_id = "70_enable_services"
    description = "Enable system services"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return services.all_enabled(ctx.config.system_services) and services.all_active(
            ctx.config.started_services
        )

    def run(self, ctx: ProvisionContext) -> None:
        for name in ctx.config.system_services:
            if not services.is_enabled(name):
                services.enable(name, dry_run=ctx.dry_run)
        for name in ctx.config.started_services:
            if not services.is_active(name):
                services.start(name, dry_run=ctx.dry_run)
