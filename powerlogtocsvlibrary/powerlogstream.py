from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

from .entry import PowerSample
from .errors import MalformedStreamError

logger = logging.getLogger("DECODER")


class PowerLogStream:
    """Iterates over the fixed-size records of a power log.

    The log has no header, footer or record separator; it is just a run of
    ``PowerSample.length()`` byte records. Running out of bytes exactly on a
    record boundary ends the stream, anything else is a broken file.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.offset = 0

    def __iter__(self) -> Iterator[PowerSample]:
        while True:
            entry = self.read_next()
            if entry is None:
                return
            yield entry

    def _read_exactly(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining > 0:
            try:
                chunk = self.stream.read(remaining)
            except OSError as e:
                raise MalformedStreamError(
                    f"Read failed at byte {self.offset}: {e}", self.offset
                ) from e
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def read_next(self) -> Optional[PowerSample]:
        """Return the next sample, or None at a clean end of stream."""
        size = PowerSample.length()
        data = self._read_exactly(size)

        if not data:
            logger.debug(f"End of stream after {self.offset} bytes")
            return None

        if len(data) < size:
            raise MalformedStreamError(
                f"Truncated record at byte {self.offset}: "
                f"expected {size} bytes, got {len(data)}",
                self.offset,
            )

        self.offset += size
        return PowerSample.from_bytes(data)
