import random
from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


class SyntheticValues:
    """Source of fabricated field values.

    Values are not derived from the document. Random amounts and
    timestamp-based identifiers are non-reproducible unless a seeded
    ``random.Random`` and a fixed clock are injected.
    """

    def __init__(self, rng: random.Random | None = None, now: Clock | None = None) -> None:
        self._rng = rng or random.Random()
        self._now = now or datetime.now

    def identifier(self, prefix: str) -> str:
        """``<prefix><milliseconds since epoch>``, e.g. ``INV-1710460800000``."""
        return f"{prefix}{int(self._now().timestamp() * 1000)}"

    def today(self) -> str:
        return self._now().date().isoformat()

    def amount(self, low: float, span: float) -> str:
        """Random amount in ``[low, low + span)`` formatted as ``$1234.56``."""
        return f"${low + self._rng.random() * span:.2f}"
