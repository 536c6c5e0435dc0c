from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Optional, Sequence

from .command import sudo_cmd

logger = logging.getLogger(__name__)


def file_matches(path: Path, content: str, mode: Optional[int] = None) -> bool:
    """True when path holds exactly content (and mode, if given)."""

    try:
        if path.read_text(encoding="utf-8") != content:
            return False
        if mode is not None and stat.S_IMODE(path.stat().st_mode) != mode:
            return False
    except (FileNotFoundError, IsADirectoryError, UnicodeDecodeError):
        return False
    return True


def write_file(path: Path, content: str, *, mode: int = 0o644, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would write %s", path)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    path.chmod(mode)
    logger.debug("Wrote %s (mode %o)", path, mode)


def read_system_file(path: Path) -> Optional[str]:
    """Read a root-owned file, falling back to sudo when it is not world readable.

    Returns None if the file does not exist.
    """

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except PermissionError:
        r = sudo_cmd(["cat", str(path)], check=False)
        if not r.ok:
            return None
        return r.stdout


def system_file_matches(path: Path, content: str) -> bool:
    return read_system_file(path) == content


def install_system_file(path: Path, content: str, *, mode: int = 0o644, dry_run: bool = False) -> None:
    sudo_cmd(["mkdir", "-p", str(path.parent)], dry_run=dry_run)
    # tee keeps ownership and mode of an existing file; set the mode anyway
    # for files it creates.
    sudo_cmd(["tee", str(path)], input_text=content, dry_run=dry_run)
    sudo_cmd(["chmod", format(mode, "o"), str(path)], dry_run=dry_run)


def backup_system_file(path: Path, *, suffix: str = ".bak", dry_run: bool = False) -> Optional[Path]:
    """Copy path to path+suffix once; an existing backup is never replaced."""

    backup = path.with_name(path.name + suffix)
    if backup.exists():
        logger.info("Keeping existing backup %s", backup)
        return None
    sudo_cmd(["cp", "-p", str(path), str(backup)], dry_run=dry_run)
    return backup


def prepend_lines(path: Path, lines: Sequence[str], *, dry_run: bool = False) -> None:
    current = read_system_file(path)
    if current is None:
        raise FileNotFoundError(str(path))
    block = "".join(line + "\n" for line in lines)
    # The target is only replaced by the final rename; a failed write leaves it intact.
    tmp = path.with_name(path.name + ".tmp")
    sudo_cmd(["cp", "-p", str(path), str(tmp)], dry_run=dry_run)
    sudo_cmd(["tee", str(tmp)], input_text=block + current, dry_run=dry_run)
    sudo_cmd(["mv", "-f", str(tmp), str(path)], dry_run=dry_run)


def append_line(path: Path, line: str, *, dry_run: bool = False) -> None:
    sudo_cmd(["tee", "-a", str(path)], input_text=line + "\n", dry_run=dry_run)
