from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Protocol

logger = logging.getLogger(__name__)


class Confirmer(Protocol):
    def confirm(self, question: str) -> bool:
        ...


class TerminalConfirmer:
    """Ask on the controlling terminal; anything but y/Y means no."""

    def __init__(self, read: Callable[[str], str] = input) -> None:
        self._read = read

    def confirm(self, question: str) -> bool:
        try:
            reply = self._read(f"{question} (y/N): ")
        except EOFError:
            reply = ""
        answer = reply.strip()[:1] in {"y", "Y"}
        logger.debug("Prompt %r answered %s", question, "yes" if answer else "no")
        return answer


class ScriptedConfirmer:
    """Replays a fixed list of answers; records the questions asked."""

    def __init__(self, answers: Iterable[bool]) -> None:
        self._answers = list(answers)
        self.asked: List[str] = []

    def confirm(self, question: str) -> bool:
        self.asked.append(question)
        if not self._answers:
            return False
        return self._answers.pop(0)


class AssumeYes:
    """Answers yes to the first question only, then defers."""

    def __init__(self, fallback: Confirmer) -> None:
        self._fallback = fallback
        self._used = False

    def confirm(self, question: str) -> bool:
        if not self._used:
            self._used = True
            logger.info("%s: yes (--yes)", question)
            return True
        return self._fallback.confirm(question)
