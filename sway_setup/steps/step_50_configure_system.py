from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.files import install_system_file, system_file_matches
from ..lib.templates import system_files

logger = logging.getLogger(__name__)


class ConfigureSystemStep:
    step_id = "50_configure_system"
    description = "Configure TLP, Bluetooth, Polkit and Greetd"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return all(system_file_matches(f.dest, f.content()) for f in system_files())

    def run(self, ctx: ProvisionContext) -> None:
        for f in system_files():
            if system_file_matches(f.dest, f.content()):
                logger.info("%s already up to date", f.dest)
                continue
            logger.info("Configuring %s", f.dest)
            install_system_file(f.dest, f.content(), mode=f.mode, dry_run=ctx.dry_run)
