"""Measurement loop for TCPing."""

import logging
import threading
import time
from typing import Callable

from tcping.config import ProbeSettings
from tcping.models import AttemptResult, SessionState, Statistics, Target
from tcping.prober import Prober
from tcping.report import ConsoleReporter

logger = logging.getLogger(__name__)


class ProbeSession:
    """Runs the fixed-budget sequence of connect attempts against one target.

    State transitions:
    - RUNNING while attempts remain
    - INTERRUPTED when the cancellation token fires during the pause
      between attempts; the remaining attempts are abandoned
    - COMPLETED once the summary has been reported

    The session blocks the calling thread; use :class:`SessionWorker` to run
    it off the main thread.
    """

    def __init__(
        self,
        target: Target,
        prober: Prober,
        reporter: ConsoleReporter,
        settings: ProbeSettings | None = None,
        cancel_event: threading.Event | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        """Initialize a session.

        Args:
            target: Host and port to probe
            prober: Prober used for resolution and connect attempts
            reporter: Sink for console lines
            settings: Probing parameters (defaults to ProbeSettings())
            cancel_event: Cancellation token; setting it cuts the current pause short
            clock: Monotonic clock in nanoseconds used to time attempts
        """
        self.target = target
        self.prober = prober
        self.reporter = reporter
        self.settings = settings or ProbeSettings()
        self.cancel_event = cancel_event or threading.Event()
        self._clock = clock

        self.state = SessionState.RUNNING
        self.interrupted = False
        self.stats = Statistics()

    def cancel(self) -> None:
        """Request early termination at the next pause."""
        self.cancel_event.set()

    def run(self) -> Statistics:
        """Probe the target, report each attempt and the summary.

        Returns:
            The final statistics, covering only the attempts actually made
        """
        budget = self.settings.count
        address = self.prober.resolve(self.target.host)
        self.reporter.banner(self.target, address)

        logger.info(
            "Session started: host=%s, port=%d, count=%d, interval=%dms",
            self.target.host,
            self.target.port,
            budget,
            self.settings.interval_ms,
        )

        for seq in range(1, budget + 1):
            result = self._attempt(seq)
            self.stats.record(result)
            self.reporter.attempt(self.target, address, result)

            if seq < budget and self._pause():
                self.state = SessionState.INTERRUPTED
                self.interrupted = True
                logger.info("Session interrupted after %d of %d attempts", seq, budget)
                break

        self.reporter.summary(self.stats, budget)
        self.state = SessionState.COMPLETED

        logger.info(
            "Session completed: sent=%d, received=%d, lost=%d",
            self.stats.attempts_sent,
            self.stats.successes,
            self.stats.failures,
        )
        return self.stats

    def _attempt(self, seq: int) -> AttemptResult:
        started = self._clock()
        succeeded = self.prober.probe(self.target.host, self.target.port)
        elapsed_ms = (self._clock() - started) // 1_000_000

        logger.debug("Attempt %d: succeeded=%s, elapsed=%dms", seq, succeeded, elapsed_ms)
        return AttemptResult(seq=seq, succeeded=succeeded, elapsed_ms=elapsed_ms)

    def _pause(self) -> bool:
        """Wait out the interval; True if cancellation arrived meanwhile."""
        return self.cancel_event.wait(self.settings.interval_seconds)
