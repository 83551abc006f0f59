"""AS entries and path segments as received from the control plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from csnet.hop_field import HopField


@dataclass
class LatencyInfo:
    """Latency metadata, keyed by interface: within the AS and on its links."""

    intra: dict[Any, Any] = field(default_factory=dict)
    inter: dict[Any, Any] = field(default_factory=dict)


@dataclass
class BandwidthInfo:
    """Bandwidth metadata, keyed by interface: within the AS and on its links."""

    intra: dict[Any, Any] = field(default_factory=dict)
    inter: dict[Any, Any] = field(default_factory=dict)


@dataclass
class StaticInfoExtension:
    """Static path metadata that an AS attaches to its entry."""

    latency: LatencyInfo | None = None
    bandwidth: BandwidthInfo | None = None
    geo: dict[Any, Any] = field(default_factory=dict)
    link_type: dict[Any, Any] = field(default_factory=dict)
    internal_hops: dict[Any, Any] = field(default_factory=dict)
    note: str | None = None


@dataclass
class PathSegmentExtensions:
    """Optional extensions of an AS entry."""

    static_info: StaticInfoExtension | None = None


@dataclass
class HopEntry:
    """Entry used to build regular data-plane paths."""

    hop_field: HopField = field(default_factory=HopField)
    ingress_mtu: int = 0


@dataclass
class PeerEntry:
    """Entry used to build peering data-plane paths.

    ``peer`` is the ISD-AS of the peering AS, ``peer_interface`` the interface
    ID on the remote side of the peering link and ``peer_mtu`` that link's MTU.
    """

    hop_field: HopField = field(default_factory=HopField)
    peer: int = 0
    peer_interface: int = 0
    peer_mtu: int = 0


@dataclass
class AsEntry:
    """One AS's contribution to a path segment.

    ``local`` is this AS's ISD-AS, ``next`` the downstream AS's, and ``mtu``
    the AS-internal MTU.
    """

    local: int = 0
    next: int = 0
    hop_entry: HopEntry = field(default_factory=HopEntry)
    peer_entries: list[PeerEntry] = field(default_factory=list)
    mtu: int = 0
    extensions: PathSegmentExtensions = field(default_factory=PathSegmentExtensions)


class SegmentType(IntEnum):
    """Kind of a path segment."""

    UNSPECIFIED = 0
    UP = 1
    DOWN = 2
    CORE = 3


@dataclass
class SegmentInfo:
    """Creation timestamp and segment identifier of a path segment."""

    timestamp: int = 0
    segment_id: int = 0


@dataclass
class PathSegment:
    """A path segment: its info and the ordered AS entries along it."""

    info: SegmentInfo = field(default_factory=SegmentInfo)
    as_entries: list[AsEntry] = field(default_factory=list)