"""
Pytest configuration and fixtures for sway_setup tests.

No test touches the real system: ``subprocess.run`` is replaced by a
recorder and every path lives under ``tmp_path``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Generator, List, Optional, Tuple

import pytest

from sway_setup.context import ProvisionContext
from sway_setup.lib import command
from sway_setup.logging_utils import reset_logging
from sway_setup.prompt import ScriptedConfirmer


# ============================================================================
# Fake process execution
# ============================================================================


@dataclass
class FakeCall:
    argv: List[str]
    input: Optional[str]
    cwd: Optional[str]


class FakeSubprocess:
    """Stands in for subprocess.run; answers by longest matching argv prefix."""

    def __init__(self) -> None:
        self.calls: List[FakeCall] = []
        self._rules: List[Tuple[List[str], Optional[int], str, str]] = []

    def on(self, *prefix: str, returncode: Optional[int] = 0, stdout: str = "", stderr: str = "") -> "FakeSubprocess":
        """returncode=None simulates a missing executable."""
        self._rules.append((list(prefix), returncode, stdout, stderr))
        return self

    def __call__(self, argv, input=None, text=None, stdout=None, stderr=None, cwd=None, env=None):
        argv = list(argv)
        self.calls.append(FakeCall(argv=argv, input=input, cwd=cwd))
        best = None
        for rule in self._rules:
            prefix = rule[0]
            if argv[: len(prefix)] == prefix and (best is None or len(prefix) >= len(best[0])):
                best = rule
        if best is None:
            return subprocess.CompletedProcess(argv, 0, "", "")
        _, rc, out, err = best
        if rc is None:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return subprocess.CompletedProcess(argv, rc, out, err)

    @property
    def argvs(self) -> List[List[str]]:
        return [c.argv for c in self.calls]

    def find(self, *prefix: str) -> List[FakeCall]:
        return [c for c in self.calls if c.argv[: len(prefix)] == list(prefix)]


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeSubprocess:
    fake = FakeSubprocess()
    monkeypatch.setattr(command.subprocess, "run", fake)
    return fake


@pytest.fixture(autouse=True)
def _isolated_logging() -> Generator[None, None, None]:
    yield
    reset_logging()


# ============================================================================
# Context fixtures
# ============================================================================


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def make_ctx(tmp_path: Path, home: Path) -> Callable[..., ProvisionContext]:
    def _make(**overrides) -> ProvisionContext:
        values = dict(
            username="alice",
            home=home,
            stamp="20260101-120000",
            log_path=str(tmp_path / "run.log"),
            confirmer=ScriptedConfirmer([]),
        )
        values.update(overrides)
        return ProvisionContext(**values)

    return _make


@pytest.fixture
def ctx(make_ctx) -> ProvisionContext:
    return make_ctx()


# ============================================================================
# Step fixtures
# ============================================================================


class RecordingStep:
    """A step whose outcome is scripted and whose calls are recorded."""

    def __init__(
        self,
        step_id: str,
        *,
        satisfied: bool = False,
        fails: bool = False,
        critical: bool = True,
        calls: Optional[List[str]] = None,
    ) -> None:
        self.step_id = step_id
        self.description = f"test step {step_id}"
        self.critical = critical
        self._satisfied = satisfied
        self._fails = fails
        self.calls = calls if calls is not None else []
        self.runs = 0

    def is_satisfied(self, ctx) -> bool:
        return self._satisfied

    def run(self, ctx) -> None:
        self.runs += 1
        self.calls.append(self.step_id)
        if self._fails:
            raise RuntimeError(f"{self.step_id} exploded")


class HostStateStep:
    """Idempotent against a shared dict standing in for persistent host state."""

    def __init__(self, step_id: str, host: Dict[str, bool], critical: bool = True) -> None:
        self.step_id = step_id
        self.description = f"set {step_id}"
        self.critical = critical
        self.host = host
        self.runs = 0

    def is_satisfied(self, ctx) -> bool:
        return self.host.get(self.step_id, False)

    def run(self, ctx) -> None:
        self.runs += 1
        self.host[self.step_id] = True


@pytest.fixture
def call_log() -> List[str]:
    return []
