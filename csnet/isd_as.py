"""ISD-AS identifiers: packing, unpacking, formatting and parsing."""

from __future__ import annotations

IA_BYTES = 8
ISD_BITS = 16
AS_BITS = 48
MAX_ISD = (1 << ISD_BITS) - 1
MAX_AS = (1 << AS_BITS) - 1

_UINT16_MAX = 0xFFFF
_UINT64_MASK = (1 << 64) - 1
_LONG_MAX = (1 << 63) - 1
_C_WHITESPACE = " \t\n\v\f\r"
_DIGITS = {10: "0123456789", 16: "0123456789abcdefABCDEF"}


class InvalidIsdAsError(ValueError):
    """Raised when a string is not a valid ISD-AS."""


def ia_from_isd_as(isd: int, as_: int) -> int:
    """Combine an ISD number and an AS number into one ISD-AS value."""
    return ((isd & MAX_ISD) << AS_BITS) | (as_ & MAX_AS)


def ia_get_isd(ia: int) -> int:
    """Return the ISD part of an ISD-AS value."""
    return ((ia & _UINT64_MASK) >> AS_BITS) & MAX_ISD


def ia_get_as(ia: int) -> int:
    """Return the AS part of an ISD-AS value."""
    return ia & MAX_AS


def ia_to_wildcard(ia: int) -> int:
    """Return the ISD-AS with the AS part set to zero."""
    return ia_from_isd_as(ia_get_isd(ia), 0)


def ia_is_wildcard(ia: int) -> bool:
    """Tell whether the ISD or the AS part is zero."""
    return ia_get_isd(ia) == 0 or ia_get_as(ia) == 0


def ia_str(ia: int) -> str:
    """Format an ISD-AS as text, e.g. ``1-ff00:0:110`` or ``1-64512``."""
    isd = ia_get_isd(ia)
    as_ = ia_get_as(ia)
    first = (as_ >> 32) & 0xFFFF
    second = (as_ >> 16) & 0xFFFF
    third = as_ & 0xFFFF
    if first == 0:
        return f"{isd}-{as_ & 0xFFFFFFFF}"
    return f"{isd}-{first:x}:{second:x}:{third:x}"


def _strtol(text: str, pos: int, base: int) -> tuple[int | None, int]:
    """Read a number the way C's strtol does, starting at ``pos``.

    Returns the value (or None when no digits were found) and the index
    just past the consumed characters (``pos`` when nothing was read).
    """
    i = pos
    n = len(text)
    while i < n and text[i] in _C_WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    digits = _DIGITS[base]
    if base == 16 and text[i : i + 2] in ("0x", "0X") and i + 2 < n and text[i + 2] in digits:
        i += 2
    start = i
    while i < n and text[i] in digits:
        i += 1
    if i == start:
        return None, pos
    return sign * int(text[start:i], base), i


def _parse_isd(text: str) -> int:
    value, end = _strtol(text, 0, 10)
    if value is None or end != len(text) or not 0 <= value <= _UINT16_MAX:
        raise InvalidIsdAsError(f"invalid ISD: {text!r}")
    return value


def _parse_as(text: str) -> int:
    if ":" not in text:
        # BGP-style AS number in decimal.
        value, _ = _strtol(text, 0, 10)
        if value is None or value < 0 or value > _LONG_MAX:
            raise InvalidIsdAsError(f"invalid AS: {text!r}")
        return value

    value, end = _strtol(text, 0, 16)
    if value is None or not 0 <= value <= _UINT16_MAX:
        raise InvalidIsdAsError(f"invalid AS: {text!r}")
    result = value << 32
    for shift in (16, 0):
        start = min(end + 1, len(text))
        value, end = _strtol(text, start, 16)
        if value is None:
            value, end = 0, start
        if not 0 <= value <= _UINT16_MAX:
            raise InvalidIsdAsError(f"invalid AS: {text!r}")
        result |= value << shift
    return result


def ia_parse(text: str) -> int:
    """Parse an ISD-AS string such as ``2-ff00:0:222``."""
    dash = text.find("-")
    if dash <= 0:
        raise InvalidIsdAsError(f"invalid ISD-AS: {text!r}")
    isd = _parse_isd(text[:dash])
    as_ = _parse_as(text[dash + 1 :])
    return ia_from_isd_as(isd, as_)