"""Fake prober for TCPing testing and dry runs."""

import random
from collections import deque
from typing import Iterable


class FakeProber:
    """Returns scripted connect outcomes without opening sockets.

    Outcomes are consumed in order; once the script runs out, results are
    drawn from a seeded random generator using ``loss_probability``.
    """

    def __init__(
        self,
        outcomes: Iterable[bool] | None = None,
        address: str = "192.0.2.10",
        seed: int | None = None,
        loss_probability: float = 0.1,
    ):
        if not 0.0 <= loss_probability <= 1.0:
            raise ValueError("loss_probability must be between 0 and 1")

        self._outcomes = deque(outcomes or ())
        self._random = random.Random(seed)
        self.address = address
        self.loss_probability = loss_probability
        self.calls: list[tuple[str, int]] = []

    def resolve(self, host: str) -> str:
        return self.address

    def probe(self, host: str, port: int) -> bool:
        self.calls.append((host, port))
        if self._outcomes:
            return self._outcomes.popleft()
        return self._random.random() >= self.loss_probability
