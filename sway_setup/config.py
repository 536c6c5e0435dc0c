from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .logging_utils import DEFAULT_LOG_DIR

OFFICIAL_PACKAGES = [
    # Sway and Wayland
    "sway", "swaylock", "swayidle", "swaybg",
    "xdg-utils", "xdg-desktop-portal", "xdg-desktop-portal-wlr",
    "qt5-wayland", "qt6-wayland",
    # Font rendering
    "fontconfig", "freetype2", "cairo", "pango", "harfbuzz",
    # AMD graphics
    "mesa", "vulkan-radeon", "libva-mesa-driver", "mesa-vdpau",
    # Display and brightness
    "way-displays", "brightnessctl",
    # Screenshots
    "grim", "slurp",
    # Audio
    "pipewire", "pipewire-pulse", "pipewire-alsa", "wireplumber",
    "pipewire-screenaudio", "pipewire-zeroconf",
    "pavucontrol", "cava",
    # Network and Bluetooth
    "networkmanager",
    "bluez", "bluez-utils", "blueman", "bluetui",
    # Security
    "fprintd", "libfprint",
    "gnome-keyring", "seahorse",
    "polkit", "polkit-gnome",
    # System utilities
    "tlp", "tlp-rdw",
    "udisks2", "udiskie",
    "zip", "unzip", "p7zip", "unrar",
    "wl-clipboard", "cliphist",
    "base-devel", "git", "curl", "wget",
    "btop", "htop",
    "nautilus",
    "ufw",
    # UI components
    "waybar", "mako", "rofi-wayland", "kitty", "wlsunset",
    # Applications
    "zathura", "zathura-pdf-poppler", "imv", "neovim", "nwg-look",
    # Fonts
    "ttf-font-awesome", "ttf-jetbrains-mono-nerd", "noto-fonts", "ttf-dejavu",
    # Display manager
    "greetd", "greetd-tuigreet",
    # Icons
    "papirus-icon-theme",
]

AUR_PACKAGES = [
    "catppuccin-gtk-theme-mocha",
    "catppuccin-cursors-mocha",
    "waybar-cava",
]

USER_GROUPS = ["wheel", "video", "audio", "input"]

SYSTEM_SERVICES = ["NetworkManager", "bluetooth", "tlp", "ufw", "greetd"]
STARTED_SERVICES = ["NetworkManager", "bluetooth", "tlp"]
USER_SERVICES = ["pipewire", "pipewire-pulse", "wireplumber"]

WALLPAPER_URL = "https://source.unsplash.com/1920x1080/?nature,landscape"
AUR_HELPER_REPO = "https://aur.archlinux.org/yay.git"


def _str_list(raw: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = raw.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


@dataclass(frozen=True)
class ProvisionConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def official_packages(self) -> List[str]:
        packages = _section(self.raw, "packages")
        return _str_list(packages, "official", OFFICIAL_PACKAGES) + _str_list(packages, "extra", [])

    @property
    def aur_packages(self) -> List[str]:
        return _str_list(_section(self.raw, "packages"), "aur", AUR_PACKAGES)

    @property
    def aur_helper_repo(self) -> str:
        return str(self.raw.get("aur_helper_repo") or AUR_HELPER_REPO)

    @property
    def user_groups(self) -> List[str]:
        return _str_list(self.raw, "groups", USER_GROUPS)

    @property
    def system_services(self) -> List[str]:
        return _str_list(_section(self.raw, "services"), "enable", SYSTEM_SERVICES)

    @property
    def started_services(self) -> List[str]:
        return _str_list(_section(self.raw, "services"), "start", STARTED_SERVICES)

    @property
    def user_services(self) -> List[str]:
        return _str_list(_section(self.raw, "services"), "user", USER_SERVICES)

    @property
    def wallpaper_url(self) -> str:
        return str(self.raw.get("wallpaper_url") or WALLPAPER_URL)

    @property
    def log_dir(self) -> str:
        return str(_section(self.raw, "paths").get("log_dir") or DEFAULT_LOG_DIR)

    @property
    def backup_root(self) -> Optional[str]:
        value = _section(self.raw, "paths").get("backup_root")
        return str(value) if value else None


def load_config(path: Optional[str]) -> ProvisionConfig:
    """Load a YAML override file; no path means built-in defaults."""

    if not path:
        return ProvisionConfig()

    p = Path(path).expanduser()
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")

    cfg = ProvisionConfig(raw=raw)
    # Touch every accessor so type errors surface before any step runs.
    for prop in (
        "official_packages",
        "aur_packages",
        "user_groups",
        "system_services",
        "started_services",
        "user_services",
        "log_dir",
        "backup_root",
    ):
        getattr(cfg, prop)
    return cfg
