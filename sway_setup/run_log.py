from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, Literal

logger = logging.getLogger(__name__)

Level = Literal["info", "warning", "error"]

_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: Level
    message: str


@dataclass
class RunLog:
    """Append-only record of step outcomes for one invocation.

    Entries are mirrored into ``logging`` so the run's log file carries them
    alongside command output.
    """

    entries: List[LogEntry] = field(default_factory=list)

    def append(self, level: Level, message: str) -> LogEntry:
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        entry = LogEntry(timestamp=datetime.now(), level=level, message=message)
        self.entries.append(entry)
        logger.log(_LEVELS[level], message)
        return entry

    def info(self, message: str) -> LogEntry:
        return self.append("info", message)

    def warning(self, message: str) -> LogEntry:
        return self.append("warning", message)

    def error(self, message: str) -> LogEntry:
        return self.append("error", message)

    def by_level(self, level: Level) -> List[LogEntry]:
        return [e for e in self.entries if e.level == level]

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        return len(self.entries)
