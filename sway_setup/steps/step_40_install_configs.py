from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.files import file_matches, write_file
from ..lib.templates import user_files

logger = logging.getLogger(__name__)


class InstallConfigsStep:
    step_id = "40_install_configs"
    description = "Install user configuration files"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return all(file_matches(f.dest, f.content(), f.mode) for f in user_files(ctx.home))

    def run(self, ctx: ProvisionContext) -> None:
        written = 0
        for f in user_files(ctx.home):
            if file_matches(f.dest, f.content(), f.mode):
                continue
            write_file(f.dest, f.content(), mode=f.mode, dry_run=ctx.dry_run)
            written += 1
        logger.info("Installed %d configuration files", written)
