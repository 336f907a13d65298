from typing import Iterable, Iterator, List, Tuple
import logging

from sortedcontainers import SortedKeyList

from ranger.domain import IntDomain, INT
from ranger.unit import Unit, singleton, touches, merge, ordering_key


class Ranger:
    # Invariant: units are sorted ascending, and for any two consecutive units
    # a, b we have domain.succ(a.high) < b.low (no overlap, no adjacency).
    # Under that invariant `compare` is a total order over the members, and the
    # units comparing equal to a probe singleton(v) are exactly the ones that
    # bracket v or touch it: at most one on each side.

    def __init__(self, domain: IntDomain = INT) -> None:
        self.domain = domain
        self._units: SortedKeyList = SortedKeyList(key=ordering_key(domain))

    @classmethod
    def from_values(cls, values: Iterable[int], domain: IntDomain = INT) -> 'Ranger':
        ranger = cls(domain)
        ranger.update(values)
        return ranger

    def _equal_run(self, probe: Unit) -> Tuple[int, int]:
        lo = self._units.bisect_left(probe)
        hi = self._units.bisect_right(probe)
        assert hi - lo <= 2, f"Invariant violated: {hi - lo} units around {probe} in {self}"
        return lo, hi

    def insert(self, value: int) -> bool:
        """
        Adds `value` to the set, merging it with the unit on its left and/or the
        unit on its right when they touch it. Returns False if the value was
        already covered and nothing changed.
        """
        self.domain.check(value)
        probe = singleton(value)
        lo, hi = self._equal_run(probe)
        neighbours: List[Unit] = list(self._units[lo:hi])

        if any(unit.brackets(value) for unit in neighbours):
            return False

        result: Unit = probe
        consumed = 0
        if neighbours and touches(neighbours[0], result, self.domain):
            logging.debug(f"Merging {value} into {neighbours[0]} on the left")
            result = merge(neighbours[0], result, self.domain)
            consumed += 1
        if neighbours and touches(result, neighbours[-1], self.domain):
            logging.debug(f"Merging {result} with {neighbours[-1]} on the right")
            result = merge(result, neighbours[-1], self.domain)
            consumed += 1
        assert consumed == len(neighbours), f"Unmerged neighbours {neighbours} around {value}"

        for unit in neighbours:
            self._units.remove(unit)
        self._units.add(result)
        return True

    def update(self, values: Iterable[int]) -> None:
        for value in values:
            self.insert(value)

    def contains(self, value: object) -> bool:
        if value not in self.domain:
            return False
        assert isinstance(value, int)
        lo, hi = self._equal_run(singleton(value))
        return any(self._units[i].brackets(value) for i in range(lo, hi))

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def to_canonical_string(self) -> str:
        return ','.join(str(unit) for unit in self._units)

    def pairs(self) -> List[Tuple[int, int]]:
        return [(unit.low, unit.high) for unit in self._units]

    def cardinality(self) -> int:
        """Number of integers covered by the set."""
        return sum(unit.size() for unit in self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __bool__(self) -> bool:
        return len(self._units) > 0

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __repr__(self) -> str:
        return f"Ranger({self.domain.name}, {self.to_canonical_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ranger):
            return NotImplemented
        return self.domain == other.domain and list(self._units) == list(other._units)

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]
