from __future__ import annotations

import getpass
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import ProvisionConfig
from .lib.backup import BackupManifest
from .logging_utils import log_path_for, run_stamp
from .prompt import Confirmer, TerminalConfirmer

BACKUP_PREFIX = ".config-backup"


@dataclass(frozen=True)
class ProvisionContext:
    """Everything a step needs to know about the host and this run."""

    username: str
    home: Path
    stamp: str
    log_path: str
    config: ProvisionConfig = field(default_factory=ProvisionConfig)
    confirmer: Confirmer = field(default_factory=TerminalConfirmer)
    dry_run: bool = False
    manifest: BackupManifest = field(default_factory=BackupManifest)
    backup_root: Optional[Path] = None

    @property
    def config_home(self) -> Path:
        return self.home / ".config"

    @property
    def pictures_dir(self) -> Path:
        return self.home / "Pictures"

    @property
    def wallpaper_path(self) -> Path:
        return self.pictures_dir / "wallpaper.jpg"

    @property
    def backup_dir(self) -> Path:
        return (self.backup_root or self.home) / f"{BACKUP_PREFIX}-{self.stamp}"


def build_context(
    *,
    config: ProvisionConfig,
    confirmer: Confirmer,
    dry_run: bool = False,
    stamp: Optional[str] = None,
    username: Optional[str] = None,
    home: Optional[str] = None,
) -> ProvisionContext:
    stamp = stamp or run_stamp()
    backup_root = config.backup_root
    return ProvisionContext(
        username=username or os.environ.get("USER") or getpass.getuser(),
        home=Path(home or os.path.expanduser("~")),
        stamp=stamp,
        log_path=log_path_for(stamp, config.log_dir),
        config=config,
        confirmer=confirmer,
        dry_run=dry_run,
        backup_root=Path(backup_root).expanduser() if backup_root else None,
    )
