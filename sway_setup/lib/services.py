from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd, sudo_cmd

logger = logging.getLogger(__name__)


def _user_flag(user: bool) -> list[str]:
    return ["--user"] if user else []


def is_enabled(service: str, *, user: bool = False) -> bool:
    r = run_cmd(["systemctl", *_user_flag(user), "is-enabled", "--quiet", service], check=False)
    return r.ok


def is_active(service: str, *, user: bool = False) -> bool:
    r = run_cmd(["systemctl", *_user_flag(user), "is-active", "--quiet", service], check=False)
    return r.ok


def enable(service: str, *, dry_run: bool = False) -> None:
    sudo_cmd(["systemctl", "enable", service], dry_run=dry_run)


def start(service: str, *, dry_run: bool = False) -> None:
    sudo_cmd(["systemctl", "start", service], dry_run=dry_run)


def enable_user(service: str, *, dry_run: bool = False) -> None:
    run_cmd(["systemctl", "--user", "enable", service], dry_run=dry_run)


def all_enabled(services: Sequence[str], *, user: bool = False) -> bool:
    return all(is_enabled(s, user=user) for s in services)


def all_active(services: Sequence[str]) -> bool:
    return all(is_active(s) for s in services)


def firewall_active() -> bool:
    r = sudo_cmd(["ufw", "status"], check=False)
    return r.ok and "Status: active" in r.stdout


def enable_firewall(*, dry_run: bool = False) -> None:
    sudo_cmd(["ufw", "--force", "enable"], dry_run=dry_run)
