from __future__ import annotations

import logging

from ..context import ProvisionContext
from ..lib.templates import USER_DIRECTORIES

logger = logging.getLogger(__name__)


class CreateDirectoriesStep:
    step_id = "35_create_directories"
    description = "Create configuration directories"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return all((ctx.home / rel).is_dir() for rel in USER_DIRECTORIES)

    def run(self, ctx: ProvisionContext) -> None:
        for rel in USER_DIRECTORIES:
            p = ctx.home / rel
            if ctx.dry_run:
                logger.info("Would create %s", p)
                continue
            p.mkdir(parents=True, exist_ok=True)
