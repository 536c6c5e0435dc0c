from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import List, Sequence

from .command import have_command, run_cmd, sudo_cmd

logger = logging.getLogger(__name__)


def missing_packages(packages: Sequence[str]) -> List[str]:
    """Return the packages not present in the local pacman database.

    ``pacman -T`` prints every unsatisfied name and exits 127 when any are
    missing, so AUR packages installed through yay are covered too.
    """
    if not packages:
        return []
    r = run_cmd(["pacman", "-T", *packages], check=False)
    if r.returncode == 0:
        return []
    if r.returncode != 127:
        # pacman itself failed; treat everything as missing so the install runs.
        logger.warning("pacman -T exited %s; assuming packages are missing", r.returncode)
        return list(packages)
    return [line.strip() for line in r.stdout.splitlines() if line.strip()]


def pacman_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    if not packages:
        return
    sudo_cmd(["pacman", "-S", "--needed", "--noconfirm", *packages], capture=False, dry_run=dry_run)


def aur_install(packages: Sequence[str], *, helper: str = "yay", dry_run: bool = False) -> None:
    if not packages:
        return
    # yay escalates with sudo itself and refuses to run as root.
    run_cmd([helper, "-S", "--needed", "--noconfirm", *packages], capture=False, dry_run=dry_run)


def have_aur_helper(helper: str = "yay") -> bool:
    return have_command(helper)


def bootstrap_aur_helper(repo_url: str, *, dry_run: bool = False) -> None:
    """Build and install an AUR helper from its AUR git repository."""

    if dry_run:
        run_cmd(["git", "clone", repo_url, "<tmpdir>"], dry_run=True)
        run_cmd(["makepkg", "-si", "--noconfirm"], dry_run=True)
        return

    workdir = Path(tempfile.mkdtemp(prefix="aur-helper-"))
    try:
        checkout = workdir / "src"
        run_cmd(["git", "clone", repo_url, str(checkout)])
        run_cmd(["makepkg", "-si", "--noconfirm"], cwd=str(checkout), capture=False)
    finally:
        shutil.rmtree(workdir, ignore_errors=True)
