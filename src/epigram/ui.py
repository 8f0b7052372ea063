"""UI module — console output and generation summaries."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class StepSummary:
    """Tracks and renders results for a generation run."""

    step_name: str
    _successes: int = 0
    _failures: list[str] = field(default_factory=list)

    def record_success(self) -> None:
        self._successes += 1

    def record_failure(self, reason: str) -> None:
        self._failures.append(reason)

    @property
    def succeeded(self) -> int:
        return self._successes

    @property
    def failed(self) -> int:
        return len(self._failures)

    @property
    def failures(self) -> list[str]:
        return list(self._failures)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def render(self) -> str:
        return (
            f"{self.step_name}: "
            f"{self.succeeded} succeeded, "
            f"{self.failed} failed "
            f"({self.total} total)"
        )


class Console:
    """Output wrapper that respects quiet/verbose modes."""

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self._quiet = quiet
        self._verbose = verbose

    def info(self, message: str, file=None) -> None:
        if self._quiet:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)

    def error(self, message: str, file=None) -> None:
        dest = file if file is not None else sys.stderr
        print(message, file=dest)

    def debug(self, message: str, file=None) -> None:
        if not self._verbose:
            return
        dest = file if file is not None else sys.stderr
        print(message, file=dest)
