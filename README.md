# csnet

Building blocks for SCION networking in Python:

- **ISD-AS identifiers** (`csnet.isd_as`): combine, split, format and parse
  ISD-AS numbers such as `1-ff00:0:110` or `2-64512`.
- **Path fields** (`csnet.hop_field`, `csnet.info_field`): the 12-byte hop field
  and the 8-byte info field of a SCION path, with their wire format.
- **Path segments** (`csnet.segment`): AS entries, hop and peer entries, static
  info extensions and path segments as data classes.
- **Path collections** (`csnet.path_collection`): an ordered container of paths
  that can be searched, filtered, sorted and popped.
- **Bootstrapping** (`csnet.bootstrapper`): locate a discovery server through
  DNS (SRV, DNS-SD and NAPTR lookups) and download the local AS topology.

## Installation

```
pip install .
```

## ISD-AS numbers

```python
from csnet.isd_as import (
    InvalidIsdAsError, ia_parse, ia_str, ia_get_isd, ia_get_as,
    ia_from_isd_as, ia_to_wildcard, ia_is_wildcard,
)

ia = ia_parse("2-ff00:0:222")
assert ia == 0x2ff0000000222
assert ia_get_isd(ia) == 2
assert ia_get_as(ia) == 0xff0000000222
assert ia_str(ia) == "2-ff00:0:222"
assert ia_from_isd_as(2, 0xff0000000222) == ia

assert ia_is_wildcard(ia_to_wildcard(ia))

try:
    ia_parse("not-an-ia")
except InvalidIsdAsError:
    ...
```

AS numbers whose upper 16 bits are zero are written in decimal (`1-64512`);
all others as three colon-separated hexadecimal groups. `InvalidIsdAsError` is
a subclass of `ValueError`.

## Hop and info fields

```python
from csnet.hop_field import HopField
from csnet.info_field import InfoField

hop = HopField(exp_time=63, cons_ingress=301, cons_egress=0,
               mac=bytes.fromhex("60e4bad9f1be"))
raw = hop.to_bytes()            # 12 bytes
assert raw == bytes.fromhex("003f012d000060e4bad9f1be")
assert HopField.from_bytes(raw) == hop

info = InfoField(cons_dir=True, seg_id=0x3BFA, timestamp=1731596031)
assert info.to_bytes() == bytes.fromhex("01003bfa67360eff")
assert InfoField.from_bytes(info.to_bytes()) == info
```

Values that do not fit their wire fields, a MAC that is not 6 bytes, or a
buffer that is too short raise `ValueError`.

## Path segments

`csnet.segment` holds plain data classes: `PathSegment` (a `SegmentInfo` and a
list of `AsEntry`), `AsEntry` (with a `HopEntry`, `PeerEntry` list, MTU and
`PathSegmentExtensions`), `StaticInfoExtension` with `LatencyInfo` and
`BandwidthInfo`, and the `SegmentType` enumeration (`UNSPECIFIED`, `UP`,
`DOWN`, `CORE`).

## Path collections

`PathCollection` works with any path objects:

```python
from dataclasses import dataclass
from csnet.path_collection import PathCollection

@dataclass
class Path:
    hops: int
    mtu: int

paths = PathCollection([Path(9, 1280), Path(8, 1400), Path(9, 1472)])

paths.filter(lambda p: p.hops == 9)
paths.sort(key=lambda p: p.mtu, ascending=False)
assert len(paths) == 2
assert paths.first() == Path(9, 1472)
best = paths.pop()
assert paths.find(lambda p: p.mtu < 1300) == Path(9, 1280)
```

`pop()` and `first()` return `None` on an empty collection; sorting is stable.

## Bootstrapping a topology

```python
from csnet.bootstrapper import bootstrap, BootstrapError

try:
    bootstrap("topology.json", domain="example.com")
except BootstrapError as exc:
    print("bootstrapping failed:", exc)
```

Without `domain`, the first search domain of the resolver other than
`localdomain` is used. A `dns.resolver.Resolver` may be passed as `resolver`.

The bootstrapper tries, in order, a `_sciondiscovery._tcp.<domain>` SRV
lookup, a DNS-SD PTR lookup on the same name, and finally NAPTR records
(service `x-sciondiscovery:tcp`, flags `A`, `S` or empty, followed at most five
levels deep) on the domain itself. For each host, AAAA addresses are tried
before A addresses, on the SRV port or on port 8041 for NAPTR `A` records.
Each server is asked for `/topology` over HTTP, without environment proxies;
the first reply with status 200 is written to the output path.
`locate_and_fetch_topology()` returns the topology bytes instead of writing
them, and `fetch_topology()`, `discovery_url()`, `sort_srv_records()` and
`sort_naptr_records()` are available on their own.

## What this package does not do

It does not open sockets to send or receive SCION packets, fetch or build
end-to-end paths, load topology files, or provide a ping or any other command.
Path segments are data containers only; there is no decoding of control-plane
messages into them.

## Running the tests

```
pip install ".[test]"
pytest
```