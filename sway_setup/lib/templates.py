"""Catalogue of the configuration files this tool owns.

Template bodies live under ``sway_setup/assets``: ``config/`` mirrors the
user's ~/.config, ``system/`` mirrors ``/``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"

USER_TEMPLATES = [
    "environment.d/envvars.conf",
    "sway/config",
    "waybar/config",
    "waybar/style.css",
    "waybar/scripts/tlp-status.sh",
    "waybar/scripts/tlp-toggle.sh",
    "kitty/kitty.conf",
    "swaylock/config",
    "rofi/config.rasi",
    "mako/config",
    "gtk-3.0/settings.ini",
    "cava/config",
    "systemd/user/sway-session.target",
]

SYSTEM_TEMPLATES = [
    "etc/tlp.conf",
    "etc/bluetooth/main.conf",
    "etc/polkit-1/rules.d/50-wheel-admin.rules",
    "etc/greetd/config.toml",
]

# Directories under ~/.config that get backed up before templates overwrite them.
BACKED_UP_CONFIG_DIRS = [
    "sway",
    "waybar",
    "mako",
    "rofi",
    "kitty",
    "swaylock",
    "cava",
    "gtk-3.0",
]

USER_DIRECTORIES = [
    ".config/sway",
    ".config/waybar",
    ".config/waybar/scripts",
    ".config/mako",
    ".config/rofi",
    ".config/kitty",
    ".config/swaylock",
    ".config/environment.d",
    ".config/systemd/user",
    ".config/way-displays",
    ".config/cava",
    ".config/gtk-3.0",
    "Pictures",
]


@dataclass(frozen=True)
class ManagedFile:
    source: Path
    dest: Path
    mode: int

    def content(self) -> str:
        return self.source.read_text(encoding="utf-8")


def _mode_for(rel: str) -> int:
    return 0o755 if rel.endswith(".sh") else 0o644


def user_files(home: Path) -> List[ManagedFile]:
    return [
        ManagedFile(source=ASSETS_DIR / "config" / rel, dest=home / ".config" / rel, mode=_mode_for(rel))
        for rel in USER_TEMPLATES
    ]


def system_files(root: Path = Path("/")) -> List[ManagedFile]:
    return [
        ManagedFile(source=ASSETS_DIR / "system" / rel, dest=root / rel, mode=0o644)
        for rel in SYSTEM_TEMPLATES
    ]
