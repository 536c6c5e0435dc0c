from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.pkg import bootstrap_aur_helper, have_aur_helper

logger = logging.getLogger(__name__)


class InstallAurHelperStep:
    step_id = "25_install_aur_helper"
    description = "Install the yay AUR helper"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return have_aur_helper("yay")

    def run(self, ctx: ProvisionContext) -> None:
        logger.info("Installing yay AUR helper from %s", ctx.config.aur_helper_repo)
        bootstrap_aur_helper(ctx.config.aur_helper_repo, dry_run=ctx.dry_run)
