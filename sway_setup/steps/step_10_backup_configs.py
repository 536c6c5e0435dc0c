from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..context import ProvisionContext
from ..lib.backup import backup_directories, write_manifest
from ..lib.files import file_matches
from ..lib.templates import BACKED_UP_CONFIG_DIRS, user_files

logger = logging.getLogger(__name__)


def _config_dirs(ctx: ProvisionContext) -> List[Path]:
    return [ctx.config_home / name for name in BACKED_UP_CONFIG_DIRS]


class BackupConfigsStep:
    step_id = "10_backup_configs"
    description = "Back up existing configuration directories"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        # Nothing to preserve unless a managed file would be overwritten
        # with different content.
        for f in user_files(ctx.home):
            if f.dest.exists() and not file_matches(f.dest, f.content()):
                return False
        return True

    def run(self, ctx: ProvisionContext) -> None:
        copied = backup_directories(
            _config_dirs(ctx), ctx.backup_dir, ctx.manifest, dry_run=ctx.dry_run
        )
        if copied:
            write_manifest(ctx.backup_dir, ctx.manifest, dry_run=ctx.dry_run)
            logger.info("Backed up %d directories to %s", len(copied), ctx.backup_dir)
        else:
            logger.info("No existing configuration directories to back up")
