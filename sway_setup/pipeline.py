from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple

from .errors import StepFailed
from .run_log import RunLog

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    description: str
    critical: bool

    def is_satisfied(self, ctx: Any) -> bool:
        ...

    def run(self, ctx: Any) -> None:
        ...


@dataclass(frozen=True)
class FunctionStep:
    """A step assembled from a predicate and an action."""

    step_id: str
    description: str
    satisfied: Callable[[Any], bool]
    action: Callable[[Any], None]
    critical: bool = True

    def is_satisfied(self, ctx: Any) -> bool:
        return bool(self.satisfied(ctx))

    def run(self, ctx: Any) -> None:
        self.action(ctx)


class RunStatus(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class RunResult:
    status: RunStatus = RunStatus.NOT_STARTED
    completed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    warnings: List[Tuple[str, str]] = field(default_factory=list)
    failure: Optional[StepFailed] = None
    log: RunLog = field(default_factory=RunLog)

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def warning_steps(self) -> List[str]:
        return [name for name, _ in self.warnings]


def run_pipeline(
    steps: Sequence[Step],
    ctx: Any,
    *,
    should_abort: Optional[Callable[[], bool]] = None,
) -> RunResult:
    """Run steps in order, skipping the ones whose predicate already holds.

    A critical step that raises stops the run and is reported through
    ``RunResult.failure``; a non-critical one is recorded as a warning.
    ``should_abort`` is polled before each step.
    """

    result = RunResult(status=RunStatus.RUNNING)
    log = result.log

    for step in steps:
        name = step.step_id

        if should_abort is not None and should_abort():
            log.error(f"{name}: aborted before start")
            result.status = RunStatus.ABORTED
            return result

        try:
            if step.is_satisfied(ctx):
                log.info(f"{name}: skipped (already satisfied)")
                result.skipped.append(name)
                continue

            logger.info("Running step %s: %s", name, step.description)
            step.run(ctx)
        except Exception as e:
            if step.critical:
                logger.debug("Step %s raised", name, exc_info=True)
                log.error(f"{name}: failed: {e}")
                result.failure = StepFailed(name, e)
                result.status = RunStatus.ABORTED
                return result
            log.warning(f"{name}: failed (continuing): {e}")
            result.warnings.append((name, str(e)))
            continue

        log.info(f"{name}: completed")
        result.completed.append(name)

    result.status = RunStatus.COMPLETED
    return result
