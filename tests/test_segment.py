from csnet.hop_field import HopField
from csnet.isd_as import ia_parse
from csnet.segment import (
    AsEntry,
    BandwidthInfo,
    HopEntry,
    LatencyInfo,
    PathSegment,
    PathSegmentExtensions,
    PeerEntry,
    SegmentInfo,
    SegmentType,
    StaticInfoExtension,
)


def test_segment_type_lookup_by_value():
    assert SegmentType(1) is SegmentType.UP
    assert SegmentType(2) is SegmentType.DOWN
    assert SegmentType(3) is SegmentType.CORE
    assert SegmentType(0) is SegmentType.UNSPECIFIED


def test_as_entry_defaults_are_independent():
    first = AsEntry()
    second = AsEntry()
    first.peer_entries.append(PeerEntry(peer=ia_parse("1-ff00:0:110")))
    assert len(first.peer_entries) == 1
    assert second.peer_entries == []
    assert first.extensions is not second.extensions
    assert first.extensions.static_info is None


def test_hop_entry_hop_field_round_trip():
    hop = HopField(exp_time=63, cons_ingress=301, cons_egress=0, mac=bytes([0x60, 0xE4, 0xBA, 0xD9, 0xF1, 0xBE]))
    entry = HopEntry(hop_field=hop, ingress_mtu=1400)
    assert HopField.from_bytes(entry.hop_field.to_bytes()) == hop
    assert entry.ingress_mtu == 1400


def test_peer_entry_holds_peer_ia():
    peer_ia = ia_parse("2-ff00:0:222")
    entry = PeerEntry(peer=peer_ia, peer_interface=5, peer_mtu=1280)
    assert entry.peer == peer_ia
    assert entry.hop_field == HopField()


def test_static_info_extension_maps():
    latency = LatencyInfo(intra={1: 10}, inter={2: 20})
    bandwidth = BandwidthInfo(intra={1: 100}, inter={2: 200})
    info = StaticInfoExtension(latency=latency, bandwidth=bandwidth, note="note")
    entry = AsEntry(extensions=PathSegmentExtensions(static_info=info))
    assert entry.extensions.static_info.latency.intra == {1: 10}
    assert entry.extensions.static_info.bandwidth.inter == {2: 200}
    assert entry.extensions.static_info.geo == {}
    assert entry.extensions.static_info.note == "note"


def test_path_segment_keeps_entry_order_and_equality():
    locals_ = [ia_parse(s) for s in ("1-ff00:0:110", "1-ff00:0:111", "1-ff00:0:112")]
    entries = [AsEntry(local=ia, mtu=1400) for ia in locals_]
    seg = PathSegment(info=SegmentInfo(timestamp=1731596031, segment_id=0x3BFA), as_entries=entries)
    assert [e.local for e in seg.as_entries] == locals_
    other = PathSegment(info=SegmentInfo(timestamp=1731596031, segment_id=0x3BFA), as_entries=list(entries))
    assert seg == other
    other.info.segment_id = 0x3672
    assert seg != other
    assert PathSegment().as_entries == []