from typing import List, Tuple
import logging
import random

from ranger.domain import IntDomain
from ranger.rangeset import Ranger
from ranger.reference import coalesce, render, is_canonical, listing_contains
from ranger.messages import error, info, success


def insertion_orders(values: List[int], rounds: int, seed: int | None) -> List[Tuple[str, List[int]]]:
    orders = [
        ("given", list(values)),
        ("ascending", sorted(values)),
        ("descending", sorted(values, reverse=True)),
    ]
    rng = random.Random(seed)
    for i in range(rounds):
        shuffled = list(values)
        rng.shuffle(shuffled)
        orders.append((f"shuffle #{i + 1}", shuffled))
    return orders


def verify(values: List[int], domain: IntDomain, rounds: int, seed: int | None = None) -> bool:
    """
    Inserts `values` in many orders and checks every resulting Ranger against
    the batch-coalesced reference.
    """
    expected_pairs = coalesce(values, domain)
    expected = render(expected_pairs)
    orders = insertion_orders(values, rounds, seed)
    info(f"Checking {len(orders)} insertion orders of {len(values)} values in the {domain} domain")

    for name, order in orders:
        logging.debug(f"Verifying {name} order: {order}")
        ranger = Ranger(domain)
        ranger.update(order)

        listing = ranger.to_canonical_string()
        if listing != expected:
            error(f"Mismatch for {name} order {order}",
                  f"expected: {expected}",
                  f"got:      {listing}")
            return False

        if not is_canonical(ranger.pairs()):
            error(f"Non-canonical units for {name} order: {listing}")
            return False

        for value in values:
            if not ranger.contains(value):
                error(f"{value} missing from {listing} after {name} order")
                return False

        # The values right next to every unit must not be members
        for low, high in expected_pairs:
            for outside in (low - 1, high + 1):
                if outside in domain and ranger.contains(outside) != listing_contains(expected_pairs, outside):
                    error(f"Membership of {outside} disagrees with {listing}")
                    return False

    success(f"{len(orders)} insertion orders of {len(values)} values all give {expected!r}")
    return True
