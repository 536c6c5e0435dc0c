from __future__ import annotations


class UserDeclined(Exception):
    """The user answered no to the initial confirmation."""


class PrivilegeViolation(RuntimeError):
    pass


class ConfigError(ValueError):
    pass


class CommandError(RuntimeError):
    def __init__(self, argv: list[str], returncode: int, stderr: str = "") -> None:
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {' '.join(argv)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


class StepFailed(RuntimeError):
    """A critical step failed; carries the step name and the underlying cause."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Step {name} failed: {cause}")
