from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.pkg import missing_packages, pacman_install

logger = logging.getLogger(__name__)


class InstallPackagesStep:
    step_id = "20_install_packages"
    description = "Install packages from the official repositories"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return not missing_packages(ctx.config.official_packages)

    def run(self, ctx: ProvisionContext) -> None:
        packages = ctx.config.official_packages
        logger.info("Installing %d packages from official repositories", len(packages))
        pacman_install(packages, dry_run=ctx.dry_run)
