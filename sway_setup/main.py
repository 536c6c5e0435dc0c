from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import signal
from typing import Callable, List, Optional

from .config import ProvisionConfig, load_config
from .context import ProvisionContext, build_context
from .errors import ConfigError, PrivilegeViolation, UserDeclined
from .logging_utils import configure_logging
from .pipeline import RunResult, Step, run_pipeline
from .prompt import AssumeYes, Confirmer, TerminalConfirmer
from .steps import (
    AddUserGroupsStep,
    BackupConfigsStep,
    ConfigurePamStep,
    ConfigureSystemStep,
    CreateDirectoriesStep,
    DownloadWallpaperStep,
    EnableFirewallStep,
    EnableServicesStep,
    EnableUserServicesStep,
    EnrollFingerprintStep,
    InstallAurHelperStep,
    InstallAurPackagesStep,
    InstallConfigsStep,
    InstallPackagesStep,
)

logger = logging.getLogger(__name__)

BANNER = """\
=========================================
   Arch + Sway Complete Setup Script
=========================================
"""

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_steps() -> List[Step]:
    return [
        BackupConfigsStep(),
        InstallPackagesStep(),
        InstallAurHelperStep(),
        InstallAurPackagesStep(),
        CreateDirectoriesStep(),
        InstallConfigsStep(),
        ConfigureSystemStep(),
        ConfigurePamStep(),
        AddUserGroupsStep(),
        DownloadWallpaperStep(),
        EnableServicesStep(),
        EnableUserServicesStep(),
        EnableFirewallStep(),
        EnrollFingerprintStep(),
    ]


class AbortFlag:
    """Set by SIGINT/SIGTERM; the runner checks it between steps."""

    def __init__(self) -> None:
        self.requested = False

    def __call__(self) -> bool:
        return self.requested

    def install(self) -> dict:
        def _handler(signum, frame):
            if self.requested:
                raise KeyboardInterrupt
            self.requested = True
            logger.warning("Abort requested (signal %s); stopping after the current step", signum)

        previous = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(signum, _handler)
        return previous

    @staticmethod
    def restore(previous: dict) -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def check_not_root(euid: int) -> None:
    if euid == 0:
        raise PrivilegeViolation("This script should not be run as root!")


def confirm_start(confirmer: Confirmer) -> None:
    if not confirmer.confirm("This will install and configure Sway desktop. Continue?"):
        raise UserDeclined()


def render_summary(result: RunResult, ctx: ProvisionContext) -> str:
    lines: List[str] = [""]
    if result.failure is not None:
        lines.append(f"Installation FAILED at {result.failure.name}: {result.failure.cause}")
    elif not result.ok:
        lines.append("Installation aborted")
    elif result.has_warnings:
        lines.append("Installation completed with warnings")
    else:
        lines.append("Installation completed successfully!")

    lines.append(f"  Completed: {', '.join(result.completed) or '-'}")
    lines.append(f"  Skipped (already satisfied): {', '.join(result.skipped) or '-'}")
    if result.warnings:
        lines.append("  Warnings:")
        for name, cause in result.warnings:
            lines.append(f"    - {name}: {cause}")
    lines.append(f"  Log file: {ctx.log_path}")
    if len(ctx.manifest) and not ctx.dry_run:
        lines.append(f"  Backups of your old configs are stored in: {ctx.backup_dir}")
    return "\n".join(lines)


def render_next_steps(ctx: ProvisionContext) -> str:
    return "\n".join(
        [
            "",
            "Next steps:",
            f"  1. Review the log file: {ctx.log_path}",
            "  2. Reboot your system: sudo reboot",
            "  3. After reboot, you can:",
            "     - Use 'nmtui' to configure network",
            "     - Use 'bluetui' to configure bluetooth",
            "     - Test fingerprint with 'fprintd-verify'",
            "",
            "Note: wlsunset will automatically detect your location via GeoIP",
        ]
    )


def run(
    ctx: ProvisionContext,
    *,
    steps: Optional[List[Step]] = None,
    should_abort: Optional[Callable[[], bool]] = None,
) -> RunResult:
    """Run the provisioning steps against the host described by ctx."""

    result = run_pipeline(steps if steps is not None else build_steps(), ctx, should_abort=should_abort)
    if result.failure is not None:
        logger.error("Provisioning failed at %s: %s", result.failure.name, result.failure.cause)
    elif not result.ok:
        logger.error("Provisioning aborted")
    else:
        logger.info(
            "Provisioning finished (completed=%d skipped=%d warnings=%d)",
            len(result.completed),
            len(result.skipped),
            len(result.warnings),
        )
    return result


def main(
    argv: Optional[list[str]] = None,
    *,
    confirmer: Optional[Confirmer] = None,
    euid: Optional[int] = None,
    steps: Optional[List[Step]] = None,
) -> int:
    p = argparse.ArgumentParser(prog="arch-sway-setup", description="Install and configure a Sway desktop on Arch Linux")
    p.add_argument("--config", default=None, help="YAML file overriding packages, services and paths")
    p.add_argument("--dry-run", action="store_true", help="Log mutating commands instead of running them")
    p.add_argument("--yes", action="store_true", help="Answer yes to the initial confirmation")
    args = p.parse_args(argv)

    print(BANNER)

    config_error: Optional[ConfigError] = None
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        config_error = e
        cfg = ProvisionConfig()

    confirmer = confirmer or TerminalConfirmer()
    if args.yes:
        confirmer = AssumeYes(confirmer)

    ctx = build_context(config=cfg, confirmer=confirmer, dry_run=args.dry_run)
    actual_log_path = configure_logging(ctx.log_path)
    ctx = dataclasses.replace(ctx, log_path=actual_log_path)

    if config_error is not None:
        logger.error("%s", config_error)
        return EXIT_USAGE

    try:
        check_not_root(os.geteuid() if euid is None else euid)
        confirm_start(ctx.confirmer)
    except PrivilegeViolation as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except UserDeclined:
        logger.info("Installation cancelled by user")
        return EXIT_OK

    logger.info("Run started (user=%s dry_run=%s log=%s)", ctx.username, ctx.dry_run, ctx.log_path)

    abort = AbortFlag()
    previous = abort.install()
    try:
        result = run(ctx, steps=steps, should_abort=abort)
    finally:
        abort.restore(previous)

    print(render_summary(result, ctx))
    if not result.ok:
        return EXIT_FAILED
    print(render_next_steps(ctx))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
