from typing import Dict, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class IntDomain:
    """
    A totally ordered integral domain with saturating successor/predecessor.
    A bound of None leaves that side unbounded.
    """
    name: str
    min_value: Optional[int] = None
    max_value: Optional[int] = None

    def __post_init__(self):
        if self.min_value is not None and self.max_value is not None:
            if self.min_value > self.max_value:
                raise ValueError(f"Invalid domain {self.name}: min ({self.min_value}) > max ({self.max_value})")

    def succ(self, value: int) -> int:
        if self.max_value is not None and value >= self.max_value:
            return self.max_value
        return value + 1

    def pred(self, value: int) -> int:
        if self.min_value is not None and value <= self.min_value:
            return self.min_value
        return value - 1

    def __contains__(self, value: object) -> bool:
        # bool is an int subclass but not a value of any integral domain here
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def check(self, value: object) -> int:
        """Returns `value` if it belongs to the domain, raises otherwise."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}: {value!r}")
        if value not in self:
            raise ValueError(f"Value {value} is outside the {self.name} domain [{self.min_value}, {self.max_value}]")
        return value

    def __str__(self) -> str:
        return self.name


def unsigned(bits: int) -> IntDomain:
    return IntDomain(f"u{bits}", 0, (1 << bits) - 1)


def signed(bits: int) -> IntDomain:
    return IntDomain(f"i{bits}", -(1 << (bits - 1)), (1 << (bits - 1)) - 1)


U8, U16, U32, U64 = unsigned(8), unsigned(16), unsigned(32), unsigned(64)
I8, I16, I32, I64 = signed(8), signed(16), signed(32), signed(64)
INT = IntDomain("int")

DOMAINS: Dict[str, IntDomain] = {
    d.name: d for d in (U8, I8, U16, I16, U32, I32, U64, I64, INT)
}


def get_domain(name: str) -> IntDomain:
    key = name.strip().lower()
    if key not in DOMAINS:
        raise ValueError(f"Unknown domain: {name}. Expected one of: {', '.join(DOMAINS)}")
    return DOMAINS[key]
