from __future__ import annotations

from typing import Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class TimestampReconciler:
    """Turns the device's free running counter into the output time column.

    The first counter value seen becomes the origin. Every timestamp is the
    anchor (epoch milliseconds, or 0 without one) plus the signed distance
    from that origin. The counter is assumed not to wrap within one log.
    """

    def __init__(self, anchor_offset_ms: Optional[int] = None) -> None:
        self.anchor_offset_ms = anchor_offset_ms
        self._first_raw_seen: Optional[int] = None

    @property
    def first_raw_seen(self) -> Optional[int]:
        return self._first_raw_seen

    def reconcile(self, raw_counter: int) -> int:
        if self._first_raw_seen is None:
            self._first_raw_seen = raw_counter

        base = self.anchor_offset_ms if self.anchor_offset_ms is not None else 0
        value = base + (int(raw_counter) - int(self._first_raw_seen))

        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"Timestamp {value} does not fit in 64 bits")
        return value
