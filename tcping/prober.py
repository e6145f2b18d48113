"""Prober abstraction for TCPing connect attempts."""

import logging
import os
from typing import Protocol

from tcping.config import ProbeSettings

logger = logging.getLogger(__name__)


class Prober(Protocol):
    """Protocol defining the interface for connect probers."""

    def resolve(self, host: str) -> str:
        """Return a display address for host, never raising."""
        ...

    def probe(self, host: str, port: int) -> bool:
        """Attempt one connection and report whether it was established."""
        ...


def create_prober(settings: ProbeSettings) -> Prober:
    """Build the prober selected by the environment.

    ``TCPING_PROBER=fake`` swaps in the scripted FakeProber, which is handy
    for trying the console output without touching the network.
    """
    if os.environ.get("TCPING_PROBER", "").lower() == "fake":
        from tcping.fake_prober import FakeProber

        logger.info("Using FakeProber (TCPING_PROBER=fake)")
        return FakeProber()

    from tcping.prober_tcp import TcpProber

    return TcpProber(timeout_ms=settings.timeout_ms)
