"""
Point Set Builder — from share records to interpolation points.

A record carries the threshold parameters under "keys" and one entry per
share, keyed by its 1-based index:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }
"""

import logging
from typing import NamedTuple

from . import base as base_codec
from .errors import InsufficientPointsError, InvalidBaseError, MalformedRecordError

logger = logging.getLogger(__name__)


class Share(NamedTuple):
    """One input record: x-coordinate, base and digit string."""
    index: int
    base: int
    value: str


class Point(NamedTuple):
    x: int
    y: int


def _to_int(raw) -> int:
    """int(raw), refusing bools and floats with a fractional part."""
    if isinstance(raw, bool):
        raise TypeError(f"{raw!r} is not an integer")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{raw!r} is not an integer")
    return int(raw)


def _parse_int(raw, what: str) -> int:
    try:
        return _to_int(raw)
    except (ValueError, TypeError):
        raise MalformedRecordError(f"{what} must be an integer, got {raw!r}")


def _share_index(key):
    """Index for a record key like "3", or None if the key is not one."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    if isinstance(key, str) and key.isdigit() and str(int(key)) == key:
        return int(key)
    return None


def parse_share(index: int, entry) -> Share:
    """Build a Share from a record entry like {"base": "2", "value": "111"}."""
    if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
        raise MalformedRecordError(f"Share {index} must have 'base' and 'value'")

    raw_base = entry['base']
    try:
        share_base = _to_int(raw_base)
    except (ValueError, TypeError):
        raise InvalidBaseError(raw_base)
    base_codec.check_base(share_base)

    value = entry['value']
    if not isinstance(value, str):
        raise MalformedRecordError(f"Share {index} value must be a string, got {value!r}")

    return Share(index, share_base, value)


def parse_record(record) -> tuple:
    """
    Parse a record into its parameters and shares.

    Only entries keyed by an index in 1..n are read. Anything else (extra
    metadata, shares beyond n) is ignored without being validated.

    Returns:
        (n, k, shares) where shares maps index -> Share

    Raises:
        MalformedRecordError: If keys are missing or 1 <= k <= n does not hold
        InvalidBaseError: If a share's base is not an integer in [2, 36]
    """
    if not isinstance(record, dict):
        raise MalformedRecordError("Record must be a JSON object")

    keys = record.get('keys')
    if not isinstance(keys, dict) or 'n' not in keys or 'k' not in keys:
        raise MalformedRecordError("Record must have keys.n and keys.k")

    n = _parse_int(keys['n'], 'n')
    k = _parse_int(keys['k'], 'k')
    if k < 1:
        raise MalformedRecordError(f"Threshold k must be >= 1, got {k}")
    if n < k:
        raise MalformedRecordError(f"Total shares n must be >= threshold k ({n} < {k})")

    shares = {}
    for key, entry in record.items():
        if key == 'keys':
            continue
        index = _share_index(key)
        if index is None or not 1 <= index <= n:
            logger.debug("Ignoring record entry %r (not a share index in 1..%d)", key, n)
            continue
        shares[index] = parse_share(index, entry)

    return n, k, shares


def build_points(shares: dict, n: int) -> list:
    """
    Decode shares 1..n into points, ascending by x.

    Indices missing from shares are skipped, so sparse input is fine.
    Shares with an index above n are ignored.
    """
    points = []
    for i in range(1, n + 1):
        share = shares.get(i)
        if share is None:
            continue
        y = base_codec.decode(share.value, share.base)
        logger.debug("Point %d: base %d, value %r -> decimal %d", i, share.base, share.value, y)
        points.append(Point(i, y))
    return points


def select_first_k(points: list, k: int) -> list:
    """Take the first k points, or raise InsufficientPointsError."""
    if len(points) < k:
        raise InsufficientPointsError(len(points), k)
    return list(points[:k])
