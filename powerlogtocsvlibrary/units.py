from __future__ import annotations

import struct

# Sensor calibration for the INA226 front end.
VOLTAGE_COEFFICIENT = 0.00125  # V per code
CURRENT_COEFFICIENT = 0.1  # mA per code

_FLOAT32 = struct.Struct("<f")


def to_float32(value: float) -> float:
    """Round a Python float to the nearest IEEE-754 single precision value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


_VOLTAGE_F32 = to_float32(VOLTAGE_COEFFICIENT)
_CURRENT_F32 = to_float32(CURRENT_COEFFICIENT)


def to_volts(voltage_raw: int) -> float:
    """Convert a raw voltage code to volts.

    The product of two single precision values is exact in double precision,
    so rounding it once to single precision gives the same result as a
    native float32 multiply.
    """
    return to_float32(float(voltage_raw) * _VOLTAGE_F32)


def to_milliamps(current_raw: int) -> float:
    return to_float32(float(current_raw) * _CURRENT_F32)


def to_physical(voltage_raw: int, current_raw: int) -> tuple[float, float]:
    """Convert raw ADC codes to (volts, milliamps)."""
    return to_volts(voltage_raw), to_milliamps(current_raw)
