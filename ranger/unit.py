"""
Units: the closed integer intervals a Ranger is made of.

A unit is either a `Singleton` point or a `Span` with `low < high`. Units are
immutable; merging two of them produces a new unit.

Units deliberately carry no `<`/`>` operators. The relation a Ranger sorts by
(`compare`) treats overlapping or adjacent units as equal, which is only a total
order over a set whose members are pairwise disjoint and non-adjacent, so it is
handed to the set as a sort key (`ordering_key`) instead.
"""

from typing import Any, Callable
from dataclasses import dataclass
import functools

from ranger.domain import IntDomain


class Unit:
    low: int
    high: int

    def brackets(self, value: int) -> bool:
        return self.low <= value <= self.high

    def size(self) -> int:
        return self.high - self.low + 1


@dataclass(frozen=True)
class Singleton(Unit):
    value: int

    @property
    def low(self) -> int:  # type: ignore[override]
        return self.value

    @property
    def high(self) -> int:  # type: ignore[override]
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Span(Unit):
    low: int
    high: int

    def __post_init__(self):
        if self.low >= self.high:
            raise ValueError(f"Invalid span: low ({self.low}) must be less than high ({self.high})")

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"


def singleton(value: int) -> Singleton:
    return Singleton(value)


def span(low: int, high: int) -> Unit:
    if low > high:
        raise ValueError(f"Invalid range: low ({low}) cannot be greater than high ({high})")
    if low == high:
        return Singleton(low)
    return Span(low, high)


def touches(a: Unit, b: Unit, domain: IntDomain) -> bool:
    """True if `a` lies entirely left of `b` with no value between them."""
    return a.high < b.low and domain.succ(a.high) == b.low


def merge(a: Unit, b: Unit, domain: IntDomain) -> Unit:
    if not touches(a, b, domain):
        raise ValueError(f"Cannot merge {a} and {b}: units do not touch")
    return span(a.low, b.high)


def compare(a: Unit, b: Unit, domain: IntDomain) -> int:
    if domain.succ(a.high) < b.low:
        return -1
    if domain.succ(b.high) < a.low:
        return 1
    # overlapping or adjacent
    return 0


def ordering_key(domain: IntDomain) -> Callable[[Unit], Any]:
    return functools.cmp_to_key(lambda a, b: compare(a, b, domain))
