"""Worker classes for running the probe session in the background."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from tcping.session import ProbeSession

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """Signals for communicating between the worker thread and main thread."""

    completed = Signal(object)  # Emits final Statistics
    error = Signal(str)  # Emits error message
    finished = Signal()  # Emits when worker completes


class SessionWorker(QRunnable):
    """Worker that executes session.run() in a background thread."""

    def __init__(self, session: ProbeSession):
        super().__init__()
        self.session = session
        self.signals = WorkerSignals()

    def run(self):
        """Execute the probe session in background thread."""
        try:
            logger.debug(
                "Worker starting: host=%s, port=%d",
                self.session.target.host,
                self.session.target.port,
            )

            stats = self.session.run()
            self.signals.completed.emit(stats)

            logger.debug(
                "Worker completed: host=%s, interrupted=%s",
                self.session.target.host,
                self.session.interrupted,
            )

        except Exception as e:
            logger.exception(
                "Worker exception: host=%s, error=%s",
                self.session.target.host,
                str(e),
            )
            self.signals.error.emit(str(e))

        finally:
            # Always signal completion
            self.signals.finished.emit()
