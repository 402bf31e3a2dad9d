"""Extract positioning fixes from a recorded USBL data stream."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime, timezone
from os import PathLike
from typing import Iterator

from usblview.packet import (
    END_MARKER,
    PACKET_SIZE,
    POSITION_TAG,
    POSITION_TAG_OFFSET,
    RECORD_LENGTH,
    START_MARKER,
    UploadComplexPacket,
)

BUFFER_SIZE = 2048
GPS_UNIX_OFFSET = 315964800
SECONDS_PER_WEEK = 7 * 24 * 60 * 60


def gps_time_text(raw: bytes) -> str:
    """Render a GPS week / seconds-of-week stamp as 'YYYY-MM-DD HH:MM:SS' UTC."""
    if len(raw) < 6:
        raise ValueError(f"a GPS time stamp needs at least 6 bytes, got {len(raw)}")
    week, seconds_of_week = struct.unpack_from("<HI", raw)
    unix_seconds = week * SECONDS_PER_WEEK + seconds_of_week + GPS_UNIX_OFFSET
    moment = datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class Fix:
    """Recovery-device position relative to the vehicle, with its GPS time."""

    x: float
    y: float
    z: float
    status: int
    time: str

    @property
    def valid(self) -> bool:
        """Whether the packet status marks the fix as usable (not an outlier)."""
        return self.status >= 1

    def display_text(self) -> str:
        """The four-line summary shown for this fix."""
        return (
            f"时间： {self.time}\n"
            f"东向: {self.x:.6f}\n"
            f"北向: {self.y:.6f}\n"
            f"天向: {self.z:.6f}"
        )

    @classmethod
    def from_packet(cls, packet: UploadComplexPacket) -> "Fix":
        """Build a fix, negating the array coordinates so the device is the origin."""
        x, y, z = (value * -1 for value in packet.array_coordinate)
        return cls(x=x, y=y, z=z, status=packet.status, time=gps_time_text(packet.gps_time))


class StreamDecoder:
    """Sliding-window packet scanner over a fixed-size receive buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray(BUFFER_SIZE)

    def feed(self, chunk: bytes) -> list[Fix]:
        """Push a chunk into the window and return the fixes completed by it."""
        size = len(chunk)
        if size > BUFFER_SIZE:
            raise ValueError(f"chunk of {size} bytes exceeds the {BUFFER_SIZE}-byte buffer")
        if size:
            del self._buffer[:size]
            self._buffer.extend(chunk)
        return list(self._scan())

    def _scan(self) -> Iterator[Fix]:
        buffer = self._buffer
        while True:
            start = buffer.find(START_MARKER)
            if start < 0:
                return
            tag_at = start + POSITION_TAG_OFFSET
            if buffer[tag_at:tag_at + len(POSITION_TAG)] != POSITION_TAG:
                return
            marker = buffer.find(END_MARKER, start)
            if marker < 0:
                return
            end = marker + len(END_MARKER)
            if end - start == PACKET_SIZE:
                packet = UploadComplexPacket.from_bytes(bytes(buffer[start:end]))
                yield Fix.from_packet(packet)
            buffer[start:end] = bytes(end - start)


def read_fixes(path: str | PathLike[str]) -> list[Fix]:
    """Decode every positioning packet in a recorded data file."""
    decoder = StreamDecoder()
    fixes: list[Fix] = []
    with open(path, "rb") as stream:
        while chunk := stream.read(RECORD_LENGTH):
            fixes.extend(decoder.feed(chunk))
    return fixes