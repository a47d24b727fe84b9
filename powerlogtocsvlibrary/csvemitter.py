from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from .errors import SinkFailureError
from .powerlogstream import PowerLogStream
from .timestamps import TimestampReconciler
from .units import to_physical

logger = logging.getLogger("CSV")

# Excel only detects UTF-8 when the file starts with a BOM.
BOM = b"\xef\xbb\xbf"
HEADER = b'"timestamp","voltage","current"\n'


def format_row(timestamp: int, voltage: float, current: float) -> bytes:
    return f"{timestamp},{voltage:.5f},{current:.1f}\n".encode("utf-8")


def _write(output_sink: BinaryIO, data: bytes) -> None:
    try:
        output_sink.write(data)
    except OSError as e:
        raise SinkFailureError(f"Failed to write output: {e}") from e


def _flush(output_sink: BinaryIO) -> None:
    try:
        output_sink.flush()
    except OSError as e:
        raise SinkFailureError(f"Failed to flush output: {e}") from e


def write_header(output_sink: BinaryIO) -> None:
    _write(output_sink, BOM)
    _write(output_sink, HEADER)


def convert(
    input_stream: BinaryIO,
    output_sink: BinaryIO,
    anchor_offset_ms: Optional[int] = None,
) -> int:
    """Convert a binary power log into CSV and return the number of rows.

    The header is written and flushed before the first record is read, so a
    log that is broken from its first byte still leaves a header-only file.
    A malformed record aborts the whole run; nothing after it is written.
    """
    log_stream = PowerLogStream(input_stream)
    reconciler = TimestampReconciler(anchor_offset_ms)

    write_header(output_sink)
    _flush(output_sink)

    rows = 0
    for entry in log_stream:
        voltage, current = to_physical(entry.voltage_raw, entry.current_raw)
        row = format_row(reconciler.reconcile(entry.timestamp), voltage, current)
        _write(output_sink, row)
        rows += 1

    _flush(output_sink)
    logger.debug(f"Wrote {rows} rows ({log_stream.offset} bytes decoded)")
    return rows
