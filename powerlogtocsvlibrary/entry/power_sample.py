from __future__ import annotations

import struct

from ..units import to_milliamps, to_volts


class PowerSample:
    byte_code = "<Ihh"

    def __init__(self, timestamp: int, voltage_raw: int, current_raw: int) -> None:
        self.timestamp = timestamp
        self.voltage_raw = voltage_raw
        self.current_raw = current_raw

    @classmethod
    def from_bytes(cls, data: bytes) -> PowerSample:
        timestamp, voltage_raw, current_raw = struct.unpack(cls.byte_code, data)
        return cls(timestamp, voltage_raw, current_raw)

    @classmethod
    def length(cls) -> int:
        return struct.calcsize(cls.byte_code)

    @property
    def voltage(self) -> float:
        return to_volts(self.voltage_raw)

    @property
    def current(self) -> float:
        return to_milliamps(self.current_raw)

    def __repr__(self) -> str:
        return (
            f"PowerSample(timestamp={self.timestamp}, "
            f"voltage_raw={self.voltage_raw}, current_raw={self.current_raw})"
        )
