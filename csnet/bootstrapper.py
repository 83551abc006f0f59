"""Locate a SCION discovery server through DNS and fetch the local topology.

Three DNS strategies are tried in order for the search domain: a plain SRV
lookup, DNS service discovery (PTR then SRV) and S-NAPTR. Every discovery
server found is asked for its topology over HTTP until one answers.
"""

from __future__ import annotations

import http.client
import ipaddress
import random
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import dns.exception
import dns.name
import dns.resolver

DISCOVERY_SERVER_DEFAULT_PORT = 8041
MAX_NAPTR_RECURSION_DEPTH = 5

_SERVICE_PREFIX = "_sciondiscovery._tcp."
_NAPTR_SERVICE = b"x-sciondiscovery:tcp"
_IGNORED_SEARCH_DOMAIN = "localdomain"

# Discovery servers live in the local network; environment proxies are not used.
_OPENER = urllib.request.build_opener(urllib.request.ProxyHandler({}))


class BootstrapError(Exception):
    """Raised when no topology could be obtained from a discovery server."""


@dataclass(frozen=True)
class NaptrRecord:
    """A NAPTR record pointing at a SCION discovery service."""

    order: int
    preference: int
    flag: str
    target: str


@dataclass(frozen=True)
class SrvRecord:
    """An SRV record of a SCION discovery server."""

    priority: int
    weight: int
    port: int
    target: str


def discovery_url(address: Any, port: int) -> str:
    """Return the topology URL of a discovery server at ``address``:``port``."""
    ip = ipaddress.ip_address(address)
    if ip.version == 6:
        return f"http://[{ip.compressed}]:{port}/topology"
    return f"http://{ip.compressed}:{port}/topology"


def sort_naptr_records(records: Iterable[NaptrRecord]) -> list[NaptrRecord]:
    """Order NAPTR records by ascending order, then ascending preference."""
    return sorted(records, key=lambda record: (record.order, record.preference))


def _weighted_shuffle(group: list[SrvRecord], rng: random.Random) -> list[SrvRecord]:
    remaining = sorted(group, key=lambda record: record.weight != 0)
    ordered: list[SrvRecord] = []
    while remaining:
        total = sum(record.weight for record in remaining)
        if total == 0:
            chosen = rng.randrange(len(remaining))
        else:
            threshold = rng.randint(0, total)
            running = 0
            chosen = len(remaining) - 1
            for position, record in enumerate(remaining):
                running += record.weight
                if running >= threshold:
                    chosen = position
                    break
        ordered.append(remaining.pop(chosen))
    return ordered


def sort_srv_records(records: Iterable[SrvRecord], rng: random.Random | None = None) -> list[SrvRecord]:
    """Order SRV records by priority; within a priority, randomly by weight."""
    rng = rng if rng is not None else random.Random()
    groups: dict[int, list[SrvRecord]] = {}
    for record in records:
        groups.setdefault(record.priority, []).append(record)
    ordered: list[SrvRecord] = []
    for priority in sorted(groups):
        ordered.extend(_weighted_shuffle(groups[priority], rng))
    return ordered


def fetch_topology(address: Any, port: int) -> bytes:
    """Download the topology from the discovery server at ``address``:``port``."""
    url = discovery_url(address, port)
    try:
        with _OPENER.open(url) as response:
            if response.status != 200:
                raise BootstrapError(f"{url} answered with status {response.status}")
            return response.read()
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        raise BootstrapError(f"could not fetch topology from {url}: {exc}") from exc


def _name_text(name: Any) -> str:
    if isinstance(name, dns.name.Name):
        return name.to_text(omit_final_dot=True)
    return str(name).rstrip(".")


def _query(resolver: Any, name: str, rdtype: str) -> list[Any]:
    try:
        return list(resolver.resolve(name, rdtype))
    except dns.exception.DNSException:
        return []


class _Locator:
    def __init__(self, resolver: Any) -> None:
        self.resolver = resolver

    def addresses(self, name: str, port: int, rdtype: str) -> bytes | None:
        for rdata in _query(self.resolver, name, rdtype):
            try:
                return fetch_topology(rdata.address, port)
            except BootstrapError:
                continue
        return None

    def host(self, name: str, port: int) -> bytes | None:
        for rdtype in ("AAAA", "A"):
            topology = self.addresses(name, port, rdtype)
            if topology is not None:
                return topology
        return None

    def srv(self, name: str) -> bytes | None:
        records = [
            SrvRecord(rd.priority, rd.weight, rd.port, _name_text(rd.target))
            for rd in _query(self.resolver, name, "SRV")
        ]
        for record in sort_srv_records(records):
            topology = self.host(record.target, record.port)
            if topology is not None:
                return topology
        return None

    def ptr(self, name: str) -> bytes | None:
        for rdata in _query(self.resolver, name, "PTR"):
            topology = self.srv(_name_text(rdata.target))
            if topology is not None:
                return topology
        return None

    def naptr(self, name: str, depth: int = 0) -> bytes | None:
        if depth > MAX_NAPTR_RECURSION_DEPTH:
            return None
        records = []
        for rdata in _query(self.resolver, name, "NAPTR"):
            flag = bytes(rdata.flags).decode("ascii", "replace")
            if flag not in ("", "A", "S"):
                continue
            if bytes(rdata.service) != _NAPTR_SERVICE or bytes(rdata.regexp) != b"":
                continue
            records.append(NaptrRecord(rdata.order, rdata.preference, flag, _name_text(rdata.replacement)))
        for record in sort_naptr_records(records):
            if record.flag == "A":
                topology = self.host(record.target, DISCOVERY_SERVER_DEFAULT_PORT)
            elif record.flag == "S":
                topology = self.srv(record.target)
            else:
                topology = self.naptr(record.target, depth + 1)
            if topology is not None:
                return topology
        return None


def _search_domain(resolver: Any) -> str | None:
    for entry in getattr(resolver, "search", None) or ():
        text = _name_text(entry)
        if text and text != _IGNORED_SEARCH_DOMAIN:
            return text
    return None


def locate_and_fetch_topology(domain: str | None = None, resolver: Any = None) -> bytes:
    """Find a discovery server for ``domain`` and return its topology.

    Without a domain, the first search domain of the resolver other than
    ``localdomain`` is used.
    """
    if resolver is None:
        resolver = dns.resolver.Resolver()
    if domain is None:
        domain = _search_domain(resolver)
    if not domain:
        raise BootstrapError("no search domain known to look up a discovery server")
    domain = domain.rstrip(".")

    locator = _Locator(resolver)
    service_name = _SERVICE_PREFIX + domain
    for attempt in (
        lambda: locator.srv(service_name),
        lambda: locator.ptr(service_name),
        lambda: locator.naptr(domain),
    ):
        topology = attempt()
        if topology is not None:
            return topology
    raise BootstrapError(f"no discovery server found for {domain}")


def bootstrap(topology_output_path: str | Path, domain: str | None = None, resolver: Any = None) -> None:
    """Fetch the topology from a discovery server and write it to a file."""
    topology = locate_and_fetch_topology(domain, resolver)
    Path(topology_output_path).write_bytes(topology)