from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = "/tmp"
LOG_PREFIX = "arch-sway-setup"
RUN_STAMP_FORMAT = "%Y%m%d-%H%M%S"

_HANDLER_MARK = "_sway_setup_handler"


def run_stamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(RUN_STAMP_FORMAT)


def log_path_for(stamp: str, log_dir: str = DEFAULT_LOG_DIR) -> str:
    return str(Path(log_dir) / f"{LOG_PREFIX}-{stamp}.log")


def reset_logging() -> None:
    """Detach and close the handlers installed by configure_logging."""

    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_MARK, False):
            root.removeHandler(h)
            h.close()


def configure_logging(
    log_path: str,
    level: int = logging.DEBUG,
    also_console: bool = True,
    console_level: int = logging.INFO,
) -> str:
    """Configure logging for one run.

    Every record goes to the run's log file; the console only gets INFO and
    above so captured command output stays in the file.

    Notes:
    - If the requested location is not writable we fall back to a file of
      the same name in the working directory and report that path instead.
    - Handlers installed by an earlier call are replaced, so each run writes
      to its own file.

    Returns the actual file path being used.
    """

    reset_logging()
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    chosen_path = log_path
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        chosen_path = str(Path.cwd() / Path(log_path).name)
        file_handler = logging.FileHandler(chosen_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        handlers.append(console)

    for h in handlers:
        setattr(h, _HANDLER_MARK, True)
        root.addHandler(h)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
