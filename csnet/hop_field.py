"""SCION hop field and its 12-byte wire format."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MAC_LEN = 6
HOP_LEN = 12

# flags, ExpTime, ConsIngress, ConsEgress, MAC
_FORMAT = struct.Struct(">BBHH6s")

_EGRESS_ALERT = 0x1
_INGRESS_ALERT = 0x2


@dataclass
class HopField:
    """Information needed to build one data-plane hop.

    ``exp_time`` is relative: the absolute expiry is
    ``timestamp + (1 + exp_time) * 86400 / 256`` seconds, with the timestamp
    taken from the matching info field.
    """

    ingress_router_alert: bool = False
    egress_router_alert: bool = False
    exp_time: int = 0
    cons_ingress: int = 0
    cons_egress: int = 0
    mac: bytes = bytes(MAC_LEN)

    def __post_init__(self) -> None:
        self.mac = bytes(self.mac)
        if len(self.mac) != MAC_LEN:
            raise ValueError(f"MAC must be {MAC_LEN} bytes, got {len(self.mac)}")

    def to_bytes(self) -> bytes:
        """Serialize to the 12-byte wire format."""
        flags = 0
        if self.egress_router_alert:
            flags |= _EGRESS_ALERT
        if self.ingress_router_alert:
            flags |= _INGRESS_ALERT
        try:
            return _FORMAT.pack(flags, self.exp_time, self.cons_ingress, self.cons_egress, self.mac)
        except struct.error as exc:
            raise ValueError(f"hop field value out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, buf: bytes) -> HopField:
        """Read a hop field from the first 12 bytes of ``buf``."""
        if len(buf) < HOP_LEN:
            raise ValueError(f"hop field needs {HOP_LEN} bytes, got {len(buf)}")
        flags, exp_time, cons_ingress, cons_egress, mac = _FORMAT.unpack_from(buf)
        return cls(
            ingress_router_alert=bool(flags & _INGRESS_ALERT),
            egress_router_alert=bool(flags & _EGRESS_ALERT),
            exp_time=exp_time,
            cons_ingress=cons_ingress,
            cons_egress=cons_egress,
            mac=mac,
        )