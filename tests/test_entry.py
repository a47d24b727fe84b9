import struct

from powerlogtocsvlibrary.entry import PowerSample
from powerlogtocsvlibrary.units import to_physical


def test_length():
    assert PowerSample.length() == 8


def test_little_endian_layout():
    entry = PowerSample.from_bytes(b"\x01\x00\x00\x00\x02\x00\xfe\xff")
    assert entry.timestamp == 1
    assert entry.voltage_raw == 2
    assert entry.current_raw == -2


def test_any_bit_pattern_is_accepted():
    entry = PowerSample.from_bytes(b"\xff" * 8)
    assert entry.timestamp == 0xFFFFFFFF
    assert entry.voltage_raw == -1
    assert entry.current_raw == -1

    entry = PowerSample.from_bytes(struct.pack("<Ihh", 0, -32768, 32767))
    assert (entry.voltage_raw, entry.current_raw) == (-32768, 32767)


def test_physical_values():
    entry = PowerSample(1000, 800, -50)
    assert entry.voltage == 1.0
    assert entry.current == -5.0


def test_properties_match_unit_converter():
    entry = PowerSample(0, -32768, 32767)
    assert (entry.voltage, entry.current) == to_physical(-32768, 32767)
