"""Probe settings for TCPing."""

from dataclasses import dataclass


@dataclass
class ProbeSettings:
    """Fixed probing parameters.

    The command line does not expose these; they are grouped here so the
    loop reads them from one place instead of module constants.
    """

    timeout_ms: int = 5000
    count: int = 4
    interval_ms: int = 1000
    default_port: int = 80
    shutdown_grace_ms: int = 800

    def __post_init__(self):
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        if self.count <= 0:
            raise ValueError("count must be positive")
        if self.interval_ms < 0:
            raise ValueError("interval_ms must not be negative")
        if self.shutdown_grace_ms < 0:
            raise ValueError("shutdown_grace_ms must not be negative")

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0
