from __future__ import annotations

import logging
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def download(url: str, dest: Path, *, dry_run: bool = False) -> None:
    """Fetch url into dest; an empty output file is removed on failure."""

    if not dry_run:
        dest.parent.mkdir(parents=True, exist_ok=True)
    try:
        run_cmd(["wget", "-q", "-O", str(dest), url], dry_run=dry_run)
    except Exception:
        if not dry_run and dest.exists() and dest.stat().st_size == 0:
            dest.unlink()
        raise
