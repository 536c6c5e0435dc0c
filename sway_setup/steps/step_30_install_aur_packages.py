from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.pkg import aur_install, missing_packages

logger = logging.getLogger(__name__)


class InstallAurPackagesStep:
    step_id = "30_install_aur_packages"
    description = "Install themes and modules from the AUR"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return not missing_packages(ctx.config.aur_packages)

    def run(self, ctx: ProvisionContext) -> None:
        missing = missing_packages(ctx.config.aur_packages)
        logger.info("Installing from AUR: %s", " ".join(missing))
        aur_install(missing, dry_run=ctx.dry_run)
