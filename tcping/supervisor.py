"""Session supervision: worker lifecycle and orderly shutdown on signals."""

import logging
import signal

from PySide6.QtCore import QCoreApplication, QObject, QThreadPool, QTimer

from tcping.report import CLOSING_MESSAGE
from tcping.session import ProbeSession
from tcping.workers import SessionWorker

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

# Python signal handlers only run when the interpreter regains control,
# which never happens while Qt sits in exec() without a wake-up.
SIGNAL_POLL_MS = 100


class SessionSupervisor(QObject):
    """Runs a ProbeSession on a thread pool and handles termination signals.

    On SIGINT/SIGTERM the supervisor sets the session's cancellation token,
    waits a bounded grace period for the worker to wrap up, silences the
    reporter and quits the event loop. Whether the session ends normally or
    by signal, the closing message is printed once, after the summary.
    """

    def __init__(self, session: ProbeSession, grace_ms: int | None = None, parent=None):
        super().__init__(parent)

        self.session = session
        self.grace_ms = grace_ms if grace_ms is not None else session.settings.shutdown_grace_ms
        self.exit_code = EXIT_OK
        self.shutting_down = False

        self.thread_pool = QThreadPool()
        self.thread_pool.setMaxThreadCount(1)

        self.signal_timer = QTimer(self)
        self.signal_timer.timeout.connect(lambda: None)

        self._previous_handlers = {}

    def start(self):
        """Start the session worker and install signal handlers."""
        worker = SessionWorker(self.session)
        worker.signals.error.connect(self._on_worker_error)
        worker.signals.finished.connect(self._on_worker_finished)

        self.install_signal_handlers()
        self.signal_timer.start(SIGNAL_POLL_MS)
        self.thread_pool.start(worker)
        logger.debug("Session worker started")

    def install_signal_handlers(self):
        for signum in (signal.SIGINT, signal.SIGTERM):
            self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)

    def restore_signal_handlers(self):
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers.clear()

    def _handle_signal(self, signum, frame):
        logger.info("Received signal %d, shutting down", signum)
        self.request_shutdown()

    def request_shutdown(self):
        """Cancel the session and wait up to grace_ms for the worker to stop.

        Prints the closing message exactly once. A worker stuck in a connect
        past the grace period keeps running, but its output is dropped.
        """
        if self.shutting_down:
            return
        self.shutting_down = True

        self.session.cancel()
        if not self.thread_pool.waitForDone(self.grace_ms):
            logger.warning(
                "Worker did not stop within %dms, discarding further output", self.grace_ms
            )

        self.session.reporter.close(CLOSING_MESSAGE)
        self._quit()

    def _on_worker_error(self, error_msg):
        logger.error("Session failed: %s", error_msg)
        self.exit_code = EXIT_FAILURE

    def _on_worker_finished(self):
        logger.debug("Session worker finished")
        if not self.shutting_down:
            # Every run that reached probing ends with the closing line
            self.session.reporter.close(CLOSING_MESSAGE)
            self._quit()

    def _quit(self):
        self.signal_timer.stop()
        self.restore_signal_handlers()
        app = QCoreApplication.instance()
        if app is not None:
            app.exit(self.exit_code)
