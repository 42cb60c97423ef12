"""Small string, date and collection helpers used by the converters."""

from __future__ import annotations

import re
import secrets
import string
from datetime import datetime, timedelta
from typing import Any, Mapping, Sequence, TypeVar

from ontoenrich.log import get_logger
from ontoenrich.messages import get_message

T = TypeVar("T", bound=Sequence[Any])

_ESCAPES = str.maketrans(
    {
        '"': '\\"',
        "\\": "\\\\",
        "/": "\\/",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:[.,](\d+))?(Z|[+-]\d{2}:\d{2})"
)

_HOST_EXTRA = set("-_.~!$&'()*+,;=:[]<>\"")
_USERINFO_EXTRA = set("-._:~!$&'()*+,;=%@")
_HEX = set(string.hexdigits)


def escape_string(s: str) -> str:
    """Escape quotes, backslashes, slashes and control characters."""
    return s.translate(_ESCAPES)


def _valid_escapes(s: str) -> bool:
    parts = s.split("%")
    return all(len(p) >= 2 and p[0] in _HEX and p[1] in _HEX for p in parts[1:])


def _split_scheme(raw: str) -> tuple[str, str] | None:
    for i, c in enumerate(raw):
        if c.isascii() and c.isalpha():
            continue
        if c.isascii() and (c.isdigit() or c in "+-."):
            if i == 0:
                return "", raw
            continue
        if c == ":":
            if i == 0:
                return None
            return raw[:i].lower(), raw[i + 1 :]
        return "", raw
    return "", raw


def _valid_host(host: str) -> bool:
    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            return False
        port = host[end + 1 :]
        if port and not (port.startswith(":") and port[1:].isdigit() or port == ":"):
            return False
        host = host[: end + 1]
    elif ":" in host:
        host, _, port = host.rpartition(":")
        if port and not (port.isascii() and port.isdigit()):
            return False
    if not _valid_escapes(host):
        return False
    return all(not c.isascii() or c.isalnum() or c in _HOST_EXTRA or c == "%" for c in host)


def _valid_authority(authority: str) -> bool:
    userinfo, at, host = authority.rpartition("@")
    if at and not all(not c.isascii() or c.isalnum() or c in _USERINFO_EXTRA for c in userinfo):
        return False
    return _valid_host(host)


def _parse_request_uri(raw: str) -> bool:
    if raw == "" or any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        return False
    if raw == "*":
        return True
    split = _split_scheme(raw)
    if split is None:
        return False
    scheme, rest = split
    rest = rest.partition("?")[0]
    if not rest.startswith("/"):
        return bool(scheme)
    if scheme and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        if not _valid_authority(authority):
            return False
        rest = slash + path
    return _valid_escapes(rest)


def is_valid_uri(uri: str) -> bool:
    """Return True if ``uri`` is an absolute URI or an absolute path."""
    valid = _parse_request_uri(uri)
    if not valid:
        get_logger().debug(get_message("InvalidURI"))
    return valid


def format_date(date: str) -> str:
    """Normalise an RFC 3339 timestamp, dropping fractional seconds.

    Raises ValueError if the date is not valid RFC 3339.
    """
    try:
        match = _RFC3339.fullmatch(date)
        if match is None:
            raise ValueError(f"cannot parse {date!r} as RFC 3339")
        year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
        parsed = datetime(year, month, day, hour, minute, second)
        zone = match.group(8)
        offset = timedelta(0)
        if zone != "Z":
            hours, minutes = int(zone[1:3]), int(zone[4:6])
            if hours > 23 or minutes > 59:
                raise ValueError(f"time zone offset out of range in {date!r}")
            offset = timedelta(hours=hours, minutes=minutes)
            if zone[0] == "-":
                offset = -offset
    except ValueError as exc:
        get_logger().warning(get_message("InvalidDateFormat") + ": %v", exc)
        raise ValueError(f"{get_message('ErrorParsingDate')}: {exc}") from exc

    if not offset:
        suffix = "Z"
    else:
        total = int(abs(offset).total_seconds()) // 60
        sign = "-" if offset < timedelta(0) else "+"
        suffix = f"{sign}{total // 60:02d}:{total % 60:02d}"
    return f"{parsed:%Y-%m-%dT%H:%M:%S}{suffix}"


def generate_unique_id() -> str:
    """Return 32 random hexadecimal characters."""
    return secrets.token_hex(16)


def split_into_chunks(data: T, chunk_size: int) -> list[T]:
    """Split ``data`` into consecutive slices of at most ``chunk_size`` items."""
    if chunk_size <= 0:
        raise ValueError("chunk size must be positive")
    return [data[i : i + chunk_size] for i in range(0, len(data), chunk_size)]


def merge_maps(*maps: Mapping[str, Any]) -> dict[str, Any]:
    """Merge mappings left to right; later keys override earlier ones."""
    result: dict[str, Any] = {}
    for m in maps:
        result.update(m)
    return result


def truncate_string(s: str, max_length: int) -> str:
    """Shorten ``s`` to ``max_length`` characters, ending with an ellipsis."""
    if len(s) <= max_length:
        return s
    if max_length < 3:
        raise ValueError("max_length must be at least 3 to truncate")
    return s[: max_length - 3] + "..."


def normalize_whitespace(s: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return " ".join(s.split())


def is_numeric(s: str) -> bool:
    """Return True if every character is an ASCII digit (True for '')."""
    return all("0" <= c <= "9" for c in s)