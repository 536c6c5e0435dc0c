from __future__ import annotations

import logging
import re

from ..context import ProvisionContext
from ..lib.command import run_cmd, sudo_cmd

logger = logging.getLogger(__name__)

# fprintd-list prints " - #0: right-index-finger" per enrolled finger.
_ENROLLED = re.compile(r"^\s*-\s*#\d+:", re.MULTILINE)


class EnrollFingerprintStep:
    step_id = "80_enroll_fingerprint"
    description = "Enroll a fingerprint (optional)"
    critical = False

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        r = run_cmd(["fprintd-list", ctx.username], check=False)
        return r.ok and bool(_ENROLLED.search(r.stdout))

    def run(self, ctx: ProvisionContext) -> None:
        if not ctx.confirmer.confirm("Do you want to enroll fingerprint now?"):
            logger.info("You can enroll fingerprint later with: sudo fprintd-enroll %s", ctx.username)
            return
        sudo_cmd(["fprintd-enroll", ctx.username], capture=False, dry_run=ctx.dry_run)
