"""SCION info field and its 8-byte wire format."""

from __future__ import annotations

import struct
from dataclasses import dataclass

INFO_LEN = 8

# flags, reserved, SegID, Timestamp
_FORMAT = struct.Struct(">BBHI")

_CONS_DIR = 0x1
_PEER = 0x2


@dataclass
class InfoField:
    """Info field used in SCION and one-hop paths.

    ``peer`` marks a peering path, ``cons_dir`` says the hop fields are in
    construction direction, ``seg_id`` takes part in MAC chaining, and
    ``timestamp`` is the beacon's Unix time in seconds.
    """

    peer: bool = False
    cons_dir: bool = False
    seg_id: int = 0
    timestamp: int = 0

    def to_bytes(self) -> bytes:
        """Serialize to the 8-byte wire format."""
        flags = 0
        if self.cons_dir:
            flags |= _CONS_DIR
        if self.peer:
            flags |= _PEER
        try:
            return _FORMAT.pack(flags, 0, self.seg_id, self.timestamp)
        except struct.error as exc:
            raise ValueError(f"info field value out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, buf: bytes) -> InfoField:
        """Read an info field from the first 8 bytes of ``buf``."""
        if len(buf) < INFO_LEN:
            raise ValueError(f"info field needs {INFO_LEN} bytes, got {len(buf)}")
        flags, _reserved, seg_id, timestamp = _FORMAT.unpack_from(buf)
        return cls(
            peer=bool(flags & _PEER),
            cons_dir=bool(flags & _CONS_DIR),
            seg_id=seg_id,
            timestamp=timestamp,
        )