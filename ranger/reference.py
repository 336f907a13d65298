"""
Batch (sort-and-sweep) coalescing and a parser for canonical listings.

This is the straightforward O(n log n) way of getting the canonical form of a
set of integers. It does not support incremental inserts and is only used to
check `Ranger` against: in the tests and in `ranger.py verify`.
"""

from typing import Iterable, List, Tuple
import re

from ranger.domain import IntDomain, INT

Pairs = List[Tuple[int, int]]

_PIECE = re.compile(r'(-?\d+)(?:-(-?\d+))?')


def coalesce(values: Iterable[int], domain: IntDomain = INT) -> Pairs:
    merged: Pairs = []
    for value in sorted(set(domain.check(v) for v in values)):
        if not merged:
            merged.append((value, value))
            continue
        last_low, last_high = merged[-1]
        # Sorted and distinct, so value > last_high; extend the last range if it touches
        if domain.succ(last_high) == value:
            merged[-1] = (last_low, value)
        else:
            merged.append((value, value))
    return merged


def render(pairs: Pairs) -> str:
    return ','.join(str(low) if low == high else f"{low}-{high}" for low, high in pairs)


def is_canonical(pairs: Pairs) -> bool:
    """Every pair is well formed and consecutive pairs are at least 2 apart."""
    for low, high in pairs:
        if low > high:
            return False
    for (_, high), (low, _) in zip(pairs, pairs[1:]):
        if low - high < 2:
            return False
    return True


def parse_listing(text: str) -> Pairs:
    """Parses the output of `Ranger.to_canonical_string` back into pairs."""
    if text == '':
        return []

    pairs: Pairs = []
    for piece in text.split(','):
        match = _PIECE.fullmatch(piece)
        if not match:
            raise ValueError(f"Malformed unit {piece!r} in listing {text!r}")
        low = int(match.group(1))
        high = int(match.group(2)) if match.group(2) is not None else low
        if low > high:
            raise ValueError(f"Invalid unit {piece!r}: low ({low}) cannot be greater than high ({high})")
        if match.group(2) is not None and low == high:
            raise ValueError(f"Degenerate range {piece!r} should be written as {low}")
        pairs.append((low, high))

    if not is_canonical(pairs):
        raise ValueError(f"Listing is not canonical: {text!r}")
    return pairs


def listing_contains(pairs: Pairs, value: int) -> bool:
    return any(low <= value <= high for low, high in pairs)
