from __future__ import annotations

import logging
from pathlib import Path

from ..context import ProvisionContext
from ..lib.files import append_line, backup_system_file, prepend_lines, read_system_file

logger = logging.getLogger(__name__)

PAM_SUDO = Path("/etc/pam.d/sudo")
PAM_LOGIN = Path("/etc/pam.d/login")

SUDO_MARKER = "pam_fprintd.so"
SUDO_LINES = [
    "auth      sufficient pam_fprintd.so",
    "auth      optional   pam_gnome_keyring.so",
]

LOGIN_MARKER = "pam_gnome_keyring.so auto_start"
LOGIN_LINE = "session   optional   pam_gnome_keyring.so auto_start"


def _has(path: Path, marker: str) -> bool:
    text = read_system_file(path)
    if text is None:
        raise FileNotFoundError(str(path))
    return marker in text


class ConfigurePamStep:
    """Fingerprint auth for sudo, keyring unlock on login."""

    step_id = "55_configure_pam"
    description = "Configure PAM for fingerprint and keyring"
    critical = True

    def __init__(self, sudo_path: Path = PAM_SUDO, login_path: Path = PAM_LOGIN) -> None:
        self.sudo_path = sudo_path
        self.login_path = login_path

    def is_satisfied(self, ctx: ProvisionContext) -> bool:
        return _has(self.sudo_path, SUDO_MARKER) and _has(self.login_path, LOGIN_MARKER)

    def run(self, ctx: ProvisionContext) -> None:
        backup_system_file(self.sudo_path, dry_run=ctx.dry_run)
        backup_system_file(self.login_path, dry_run=ctx.dry_run)

        if not _has(self.sudo_path, SUDO_MARKER):
            logger.info("Adding fingerprint auth to %s", self.sudo_path)
            prepend_lines(self.sudo_path, SUDO_LINES, dry_run=ctx.dry_run)

        if not _has(self.login_path, LOGIN_MARKER):
            logger.info("Adding keyring session to %s", self.login_path)
            append_line(self.login_path, LOGIN_LINE, dry_run=ctx.dry_run)
