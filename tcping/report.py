"""Console output for TCPing.

The strings below are kept byte-for-byte with the existing tool so that
scripts parsing its output keep working.
"""

import logging
import sys
import threading
from decimal import ROUND_HALF_UP, Decimal
from typing import TextIO

from tcping.models import AttemptResult, Statistics, Target

logger = logging.getLogger(__name__)

CLOSING_MESSAGE = "\nTCPing завершен."


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    ``round()`` rounds halves to even, which would print 2 for 2.5ms.
    """
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_banner(target: Target, address: str) -> str:
    return f"TCPing {target.host} [{address}] с портом {target.port}:"


def format_attempt(target: Target, address: str, result: AttemptResult) -> str:
    """Format one per-attempt line.

    Successes show the resolved address, failures the host as typed.
    """
    if result.succeeded:
        return f"Ответ от {address}: время={result.elapsed_ms}мс"
    return f"Не удалось подключиться к {target.host} за {result.elapsed_ms}мс"


def format_summary(stats: Statistics, budget: int) -> list[str]:
    """Format the statistics block, or nothing if no attempt succeeded."""
    if not stats.has_latency:
        return []

    loss = round_half_up(stats.loss_percent(budget))
    average = round_half_up(stats.average_ms)
    return [
        "\nСтатистика TCPing:",
        f"    Пакетов: отправлено = {budget}, получено = {stats.successes}, "
        f"потеряно = {stats.failures} ({loss}% потерь)",
        "    Приблизительное время приема-передачи в мс:",
        f"        Минимальное = {stats.min_ms}мс, Максимальное = {stats.max_ms}мс, "
        f"Среднее = {average}мс",
    ]


class ConsoleReporter:
    """Writes session output to a text stream.

    Once :meth:`close` is called, further writes are dropped. The session
    runs on a worker thread, so a probe still in flight after shutdown must
    not print under the closing message.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._lock = threading.Lock()
        self._closed = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def closed(self) -> bool:
        return self._closed

    def write_line(self, line: str) -> None:
        with self._lock:
            if self._closed:
                logger.debug("Reporter closed, dropping line: %r", line)
                return
            print(line, file=self.stream, flush=True)

    def banner(self, target: Target, address: str) -> None:
        self.write_line(format_banner(target, address))

    def attempt(self, target: Target, address: str, result: AttemptResult) -> None:
        self.write_line(format_attempt(target, address, result))

    def summary(self, stats: Statistics, budget: int) -> None:
        for line in format_summary(stats, budget):
            self.write_line(line)

    def close(self, message: str | None = None) -> None:
        """Stop accepting output, optionally writing a final message first."""
        with self._lock:
            if self._closed:
                return
            if message is not None:
                print(message, file=self.stream, flush=True)
            self._closed = True
