"""UDP senders for positions and trajectories."""

from __future__ import annotations

import ipaddress
import logging
import socket
import struct
import time
from typing import Iterable

from usblview.trajectory import Point3

DEFAULT_HOST = "127.0.0.1"
POSITION_PORT = 12345
TRAJECTORY_PORT = 1623

log = logging.getLogger(__name__)


def _validated_host(host: str) -> str:
    try:
        return str(ipaddress.IPv4Address(host))
    except ipaddress.AddressValueError as exc:
        raise ValueError(f"invalid IPv4 address: {host!r}") from exc


def format_position(x: float, y: float, z: float) -> str:
    """Format a single-precision position as 'x,y,z' with six significant digits."""
    parts = (struct.unpack("<f", struct.pack("<f", float(v)))[0] for v in (x, y, z))
    return ",".join(f"{value:g}" for value in parts)


class _UdpClient:
    def __init__(self, host: str, port: int) -> None:
        self.address = (_validated_host(host), port)
        self._socket: socket.socket | None = None

    def _ensure_socket(self) -> socket.socket:
        if self._socket is None:
            self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        return self._socket

    def _send(self, payload: bytes) -> None:
        self._ensure_socket().sendto(payload, self.address)

    def close(self) -> None:
        """Close the socket; a later send opens a new one."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class PositionSender(_UdpClient):
    """Sends 'x,y,z' position datagrams."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = POSITION_PORT) -> None:
        super().__init__(host, port)

    def send_position(self, x: float, y: float, z: float) -> str:
        """Send one position and return the text that was sent."""
        data = format_position(x, y, z)
        self._send(data.encode("ascii"))
        log.debug("Sent: %s", data)
        return data

    def close(self) -> None:
        """Close the socket; a later send opens a new one."""
        super().close()


class TrajectorySender(_UdpClient):
    """Sends trajectory points one datagram at a time, with a pause between them."""

    def __init__(
        self, host: str = DEFAULT_HOST, port: int = TRAJECTORY_PORT, delay: float = 0.01
    ) -> None:
        super().__init__(host, port)
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay

    def send(self, points: Iterable[Point3]) -> list[str]:
        """Send every point in order and return the messages sent."""
        sent: list[str] = []
        for point in points:
            message = point.to_message()
            self._send(message.encode("ascii"))
            if self.delay:
                time.sleep(self.delay)
            log.debug("Send data: %s", message)
            sent.append(message)
        log.debug("trajectory sent: %d points", len(sent))
        return sent

    def close(self) -> None:
        """Close the socket; a later send opens a new one."""
        super().close()