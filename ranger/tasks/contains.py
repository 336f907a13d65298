from typing import List

from ranger.domain import IntDomain
from ranger.rangeset import Ranger
from ranger.messages import verdict


def contains(probe: int, values: List[int], domain: IntDomain) -> bool:
    ranger = Ranger.from_values(values, domain)
    found = ranger.contains(probe)
    verdict(found, f"{probe} {'is' if found else 'is not'} in {{{ranger}}}")
    return found
