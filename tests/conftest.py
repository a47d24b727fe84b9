import logging
import struct

import pytest

BOM_HEADER = b'\xef\xbb\xbf"timestamp","voltage","current"\n'


def pack_records(*records):
    """Build a raw power log from (timestamp, voltage_raw, current_raw) tuples."""
    return b"".join(struct.pack("<Ihh", *record) for record in records)


@pytest.fixture(autouse=True)
def _drop_powerlog_handlers():
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_powerlog", False):
            root_logger.removeHandler(handler)
            handler.close()
