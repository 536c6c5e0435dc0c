from __future__ import annotations

import logging
from typing import List

from ..context import ProvisionContext
from ..lib.command import run_cmd, sudo_cmd

logger = logging.getLogger(__name__)


def _missing_groups(ctx: ProvisionContext) -> List[str]:
    r = run_cmd(["id", "-nG", ctx.username], check=False)
    current = set(r.stdout.split()) if r.ok else set()
    return [g for g in ctx.config.user_groups if g not in current]


class AddUserGroupsStep:
    step_id = "60_add_user_groups"
    description = "Add user to required groups"
    critical = True

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return not _missing_groups(ctx)

    def run(self, ctx: ProvisionContext) -> None:
        groups = ",".join(ctx.config.user_groups)
        logger.info("Adding %s to groups %s", ctx.username, groups)
        sudo_cmd(["usermod", "-aG", groups, ctx.username], dry_run=ctx.dry_run)
