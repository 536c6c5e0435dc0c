from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from sway_setup.logging_utils import configure_logging, log_path_for, reset_logging, run_stamp


def test_run_stamp_and_log_path() -> None:
    stamp = run_stamp(datetime(2026, 3, 4, 5, 6, 7))
    assert stamp == "20260304-050607"
    assert log_path_for(stamp, "/tmp") == "/tmp/arch-sway-setup-20260304-050607.log"


def test_file_gets_debug_records(tmp_path: Path) -> None:
    path = str(tmp_path / "logs" / "run.log")
    assert configure_logging(path, also_console=False) == path

    logging.getLogger("sway_setup.test").debug("captured stdout line")
    text = Path(path).read_text(encoding="utf-8")
    assert "[DEBUG] sway_setup.test: captured stdout line" in text


def test_reconfigure_switches_files(tmp_path: Path) -> None:
    first = str(tmp_path / "one.log")
    second = str(tmp_path / "two.log")
    configure_logging(first, also_console=False)
    configure_logging(second, also_console=False)

    logging.getLogger("sway_setup.test").info("only in second")
    assert "only in second" not in Path(first).read_text(encoding="utf-8")
    assert "only in second" in Path(second).read_text(encoding="utf-8")

    reset_logging()
    assert not any(getattr(h, "_sway_setup_handler", False) for h in logging.getLogger().handlers)


def test_unwritable_dir_falls_back_to_cwd(tmp_path: Path, monkeypatch) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    actual = configure_logging(str(blocker / "run.log"), also_console=False)
    assert actual == str(workdir / "run.log")
    assert Path(actual).exists()
