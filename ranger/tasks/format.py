from typing import List

from ranger.domain import IntDomain
from ranger.rangeset import Ranger


def format_values(values: List[int], domain: IntDomain) -> str:
    ranger = Ranger(domain)
    ranger.update(values)
    return ranger.to_canonical_string()
