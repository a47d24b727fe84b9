"""Decode DC power monitor logs into Excel friendly CSV."""

from .anchor import extract_start_time, resolve_anchor, to_unix_millis
from .csvemitter import convert
from .entry import PowerSample
from .errors import (
    MalformedStreamError,
    PowerLogError,
    SinkFailureError,
    UnresolvedAnchorError,
)
from .powerlogstream import PowerLogStream
from .timestamps import TimestampReconciler
from .units import to_physical

__version__ = "0.1.0"
__all__ = [
    "convert",
    "extract_start_time",
    "resolve_anchor",
    "to_unix_millis",
    "to_physical",
    "PowerSample",
    "PowerLogStream",
    "TimestampReconciler",
    "PowerLogError",
    "MalformedStreamError",
    "SinkFailureError",
    "UnresolvedAnchorError",
]
