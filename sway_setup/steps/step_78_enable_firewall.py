from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib import services

logger = logging.getLogger(__name__)


class EnableFirewallStep:
    step_id = "78_enable_firewall"
    description = "Enable the ufw firewall"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return services.firewall_active()

    def run(self, ctx: ProvisionContext) -> None:
        services.enable_firewall(dry_run=ctx.dry_run)
