"""Data models for TCPing probes."""

import sys
from dataclasses import dataclass
from enum import Enum

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class Target:
    """The (host, port) pair being probed."""

    host: str
    port: int

    def __post_init__(self):
        """Reject ports outside the TCP range."""
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise ValueError(f"port must be in range {MIN_PORT}-{MAX_PORT}, got {self.port}")


@dataclass
class AttemptResult:
    """Outcome of a single connect attempt."""

    seq: int
    succeeded: bool
    elapsed_ms: int  # measured on failures too


class SessionState(Enum):
    RUNNING = "running"
    INTERRUPTED = "interrupted"
    COMPLETED = "completed"


@dataclass
class Statistics:
    """Running totals across the attempts of one session.

    ``min_ms`` starts at a sentinel maximum and ``max_ms`` at zero so the
    first success sets both.
    """

    attempts_sent: int = 0
    successes: int = 0
    failures: int = 0
    total_success_ms: int = 0
    min_ms: int = sys.maxsize
    max_ms: int = 0

    def record(self, result: AttemptResult) -> None:
        """Fold one attempt into the totals."""
        self.attempts_sent += 1
        if result.succeeded:
            self.successes += 1
            self.total_success_ms += result.elapsed_ms
            self.min_ms = min(self.min_ms, result.elapsed_ms)
            self.max_ms = max(self.max_ms, result.elapsed_ms)
        else:
            self.failures += 1

    @property
    def has_latency(self) -> bool:
        return self.successes > 0

    @property
    def average_ms(self) -> float | None:
        """Mean latency over successful attempts, or None without any."""
        if not self.has_latency:
            return None
        return self.total_success_ms / self.successes

    def loss_percent(self, budget: int) -> float:
        """Failures as a percentage of the planned attempt budget.

        The budget, not ``attempts_sent``, is the denominator, so an
        interrupted run still reports loss against the full plan.
        """
        if budget <= 0:
            raise ValueError("budget must be positive")
        return self.failures * 100.0 / budget
