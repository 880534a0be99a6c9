"""Message, address and router records exchanged between routers."""

from __future__ import annotations

import bisect
import struct
from dataclasses import dataclass, field
from enum import IntEnum

IP_FIELD_SIZE = 16
DATA_FIELD_SIZE = 200

# type, data, padding, destination (ip, port), source (ip, port)
_WIRE = struct.Struct(f"<B{DATA_FIELD_SIZE}s3x{IP_FIELD_SIZE}si{IP_FIELD_SIZE}si")
MESSAGE_SIZE = _WIRE.size


def _pack_text(text: str, size: int, what: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) >= size:
        raise ValueError(f"{what} too long: {len(raw)} bytes, at most {size - 1}")
    return raw


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Address:
    """A network address: IPv4 text and port."""

    ip: str = ""
    port: int = 0


class MessageType(IntEnum):
    CONTROL = 0
    DATA = 1


@dataclass
class Message:
    """A message sent between routers."""

    type: MessageType = MessageType.DATA
    data: str = ""
    destination: Address = field(default_factory=Address)
    source: Address = field(default_factory=Address)

    def to_bytes(self) -> bytes:
        """Encode the message into its fixed-size wire form."""
        return _WIRE.pack(
            int(self.type),
            _pack_text(self.data, DATA_FIELD_SIZE, "data"),
            _pack_text(self.destination.ip, IP_FIELD_SIZE, "destination ip"),
            self.destination.port,
            _pack_text(self.source.ip, IP_FIELD_SIZE, "source ip"),
            self.source.port,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Message:
        """Decode a message from its fixed-size wire form."""
        if len(data) != MESSAGE_SIZE:
            raise ValueError(f"expected {MESSAGE_SIZE} bytes, got {len(data)}")
        kind, text, dst_ip, dst_port, src_ip, src_port = _WIRE.unpack(data)
        return cls(
            type=MessageType(kind),
            data=_unpack_text(text),
            destination=Address(_unpack_text(dst_ip), dst_port),
            source=Address(_unpack_text(src_ip), src_port),
        )


@dataclass
class Router:
    """A neighbouring router with the cost of the link to it."""

    id: int
    link: int
    address: Address = field(default_factory=Address)


@dataclass
class CoreRouter:
    """The local router and its neighbours, kept sorted by id."""

    id: int
    address: Address = field(default_factory=Address)
    neighbors: list[Router] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.neighbors.sort(key=lambda r: r.id)

    def find_by_id(self, router_id: int) -> Router | None:
        """Return the neighbour with this id, or None."""
        ids = [r.id for r in self.neighbors]
        pos = bisect.bisect_left(ids, router_id)
        if pos < len(ids) and ids[pos] == router_id:
            return self.neighbors[pos]
        return None