"""Binary layout of the USBL positioning upload packet."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from itertools import islice
from typing import Sequence

HEAD_LENGTH = 13
CHANNEL_NUM = 9
END_LENGTH = 3
RAY_PACKET_LEN = 110
POSFIER_PACKET_LEN = 178

START_MARKER = b"$HEU"
POSITION_TAG = b"POS"
POSITION_TAG_OFFSET = 9
END_MARKER = b"*F"

# (field name, struct code, element count or None for a single value)
_SPEC: tuple[tuple[str, str, int | None], ...] = (
    ("header", f"{HEAD_LENGTH}s", None),
    ("beacon_index", "B", None),
    ("status", "B", None),
    ("sign", "2s", None),
    ("chan_is_valid", f"{CHANNEL_NUM}s", None),
    ("peak_num", "i", 9),
    ("peak_value", "i", 9),
    ("noise", "i", 9),
    ("noise_peak", "i", 9),
    ("time_delay_pos", "d", 9),
    ("time_delay_zero", "d", 9),
    ("time_delay_neg", "d", 9),
    ("time_delay", "d", 9),
    ("variance", "d", 2),
    ("depth", "d", None),
    ("gps_time", "8s", None),
    ("longitude", "d", None),
    ("latitude", "d", None),
    ("altitude", "d", None),
    ("nsew", "2s", None),
    ("compass1", "d", 3),
    ("compass2", "d", 3),
    ("board_coordinate", "d", 3),
    ("array_coordinate", "d", 3),
    ("utm_coordinate", "d", 3),
    ("slant_range", "d", None),
    ("magnify", "b", None),
    ("power_level", "B", None),
    ("work_mode", "B", None),
    ("calculate_mode", "B", None),
    ("compass_num", "B", None),
    ("parameter_wrap", "d", 6),
    ("sound_speed", "d", None),
    ("abs_noise_threshold", "i", None),
    ("rel_noise_threshold", "i", None),
    ("min_width_threshold", "i", None),
    ("max_width_threshold", "i", None),
    ("time_est_cycle", "i", None),
    ("system_parameter", "d", 9),
    ("abs_snr", "i", None),
    ("rel_snr", "i", None),
    ("actual_width", "i", None),
    ("angle_threshold", "d", None),
    ("trailer", f"{END_LENGTH}s", None),
)

_LAYOUT = struct.Struct(
    "<" + "".join(code if count is None else f"{count}{code}" for _, code, count in _SPEC)
)

PACKET_SIZE = _LAYOUT.size
RECORD_LENGTH = PACKET_SIZE + RAY_PACKET_LEN + POSFIER_PACKET_LEN

_DEFAULT_HEADER = START_MARKER + bytes(5) + POSITION_TAG + bytes(1)
_DEFAULT_TRAILER = bytes(1) + END_MARKER


def decode_double(data: bytes) -> float:
    """Decode eight little-endian bytes as an IEEE double."""
    if len(data) != 8:
        raise ValueError(f"a double needs 8 bytes, got {len(data)}")
    return struct.unpack("<d", data)[0]


def _zeros(count: int, value: float | int = 0.0) -> tuple:
    return (value,) * count


@dataclass(frozen=True)
class UploadComplexPacket:
    """One positioning packet as uploaded by the processing unit."""

    header: bytes = _DEFAULT_HEADER
    beacon_index: int = 0
    status: int = 0
    sign: bytes = bytes(2)
    chan_is_valid: bytes = bytes(CHANNEL_NUM)
    peak_num: Sequence[int] = _zeros(9, 0)
    peak_value: Sequence[int] = _zeros(9, 0)
    noise: Sequence[int] = _zeros(9, 0)
    noise_peak: Sequence[int] = _zeros(9, 0)
    time_delay_pos: Sequence[float] = _zeros(9)
    time_delay_zero: Sequence[float] = _zeros(9)
    time_delay_neg: Sequence[float] = _zeros(9)
    time_delay: Sequence[float] = _zeros(9)
    variance: Sequence[float] = _zeros(2)
    depth: float = 0.0
    gps_time: bytes = bytes(8)
    longitude: float = 0.0
    latitude: float = 0.0
    altitude: float = 0.0
    nsew: bytes = bytes(2)
    compass1: Sequence[float] = _zeros(3)
    compass2: Sequence[float] = _zeros(3)
    board_coordinate: Sequence[float] = _zeros(3)
    array_coordinate: Sequence[float] = _zeros(3)
    utm_coordinate: Sequence[float] = _zeros(3)
    slant_range: float = 0.0
    magnify: int = 0
    power_level: int = 0
    work_mode: int = 0
    calculate_mode: int = 0
    compass_num: int = 0
    parameter_wrap: Sequence[float] = _zeros(6)
    sound_speed: float = 0.0
    abs_noise_threshold: int = 0
    rel_noise_threshold: int = 0
    min_width_threshold: int = 0
    max_width_threshold: int = 0
    time_est_cycle: int = 0
    system_parameter: Sequence[float] = _zeros(9)
    abs_snr: int = 0
    rel_snr: int = 0
    actual_width: int = 0
    angle_threshold: float = 0.0
    trailer: bytes = _DEFAULT_TRAILER

    @classmethod
    def from_bytes(cls, data: bytes) -> "UploadComplexPacket":
        """Decode a packet from exactly PACKET_SIZE bytes."""
        if len(data) != PACKET_SIZE:
            raise ValueError(f"packet must be {PACKET_SIZE} bytes, got {len(data)}")
        values = iter(_LAYOUT.unpack(bytes(data)))
        kwargs = {}
        for name, _code, count in _SPEC:
            kwargs[name] = next(values) if count is None else tuple(islice(values, count))
        return cls(**kwargs)

    def to_bytes(self) -> bytes:
        """Encode the packet into its PACKET_SIZE-byte wire form."""
        flat: list = []
        for name, code, count in _SPEC:
            value = getattr(self, name)
            if count is None:
                if code.endswith("s"):
                    size = int(code[:-1])
                    if not isinstance(value, (bytes, bytearray)) or len(value) != size:
                        raise ValueError(f"{name} must be {size} bytes")
                    value = bytes(value)
                flat.append(value)
            else:
                items = tuple(value)
                if len(items) != count:
                    raise ValueError(f"{name} must hold {count} values, got {len(items)}")
                flat.extend(items)
        try:
            return _LAYOUT.pack(*flat)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc


assert {f.name for f in fields(UploadComplexPacket)} == {name for name, _, _ in _SPEC}