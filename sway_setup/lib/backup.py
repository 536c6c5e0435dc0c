from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

import yaml

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.yaml"


@dataclass
class BackupManifest:
    """original path -> backup path, filled in as directories are copied."""

    entries: Dict[str, str] = field(default_factory=dict)

    def record(self, original: Path, backup: Path) -> None:
        self.entries[str(original)] = str(backup)

    def __len__(self) -> int:
        return len(self.entries)


def copy_tree(src: Path, dst: Path, *, dry_run: bool = False) -> None:
    if not src.exists():
        raise FileNotFoundError(str(src))

    if dry_run:
        logger.info("Would copy tree %s -> %s", src, dst)
        return

    dst.mkdir(parents=True, exist_ok=True)
    for item in src.rglob("*"):
        out = dst / item.relative_to(src)
        if item.is_symlink():
            out.parent.mkdir(parents=True, exist_ok=True)
            if out.is_symlink() or out.exists():
                out.unlink()
            out.symlink_to(item.readlink())
        elif item.is_dir():
            out.mkdir(parents=True, exist_ok=True)
        else:
            out.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(item, out)


def backup_directories(
    dirs: Iterable[Path],
    backup_dir: Path,
    manifest: BackupManifest,
    *,
    dry_run: bool = False,
) -> List[Path]:
    """Copy each existing directory into backup_dir/<name>.

    The backup directory is only created once something needs copying.
    """

    copied: List[Path] = []
    for src in dirs:
        if not src.is_dir():
            continue
        dst = backup_dir / src.name
        copy_tree(src, dst, dry_run=dry_run)
        manifest.record(src, dst)
        copied.append(src)
        logger.info("Backed up: %s", src)
    return copied


def write_manifest(backup_dir: Path, manifest: BackupManifest, *, dry_run: bool = False) -> Path:
    p = backup_dir / MANIFEST_NAME
    if dry_run:
        logger.info("Would write %s", p)
        return p
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(yaml.safe_dump(dict(manifest.entries), sort_keys=True), encoding="utf-8")
    return p
