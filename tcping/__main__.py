"""Entry point for TCPing."""

import logging
import sys

from PySide6.QtCore import QCoreApplication

from tcping.cli import parse_target
from tcping.config import ProbeSettings
from tcping.logging_config import configure_logging
from tcping.prober import Prober, create_prober
from tcping.report import ConsoleReporter
from tcping.session import ProbeSession
from tcping.supervisor import SessionSupervisor

logger = logging.getLogger(__name__)


def main(
    argv: list[str] | None = None,
    settings: ProbeSettings | None = None,
    prober: Prober | None = None,
) -> int:
    """Main entry point for the TCPing command.

    Returns:
        Process exit code
    """
    configure_logging()

    if argv is None:
        argv = sys.argv[1:]
    settings = settings or ProbeSettings()

    # Exits with a diagnostic before any probing on bad arguments
    target = parse_target(argv, settings)

    if prober is None:
        prober = create_prober(settings)

    app = QCoreApplication.instance() or QCoreApplication([sys.argv[0]])

    session = ProbeSession(target, prober, ConsoleReporter(), settings=settings)
    supervisor = SessionSupervisor(session)
    supervisor.start()

    exit_code = app.exec()
    logger.debug("Event loop exited: code=%d", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
