from typing import List
import re

_RUN = re.compile(r'(-?\d+)\.\.(-?\d+)')


def parse_values(args: List[str]) -> List[int]:
    """
    Parses command line values: plain integers, or inclusive `a..b` runs.
    Runs are expanded in ascending order.
    """
    values: List[int] = []
    for arg in args:
        for token in arg.split(','):
            token = token.strip()
            if not token:
                continue
            match = _RUN.fullmatch(token)
            if match:
                start, stop = int(match.group(1)), int(match.group(2))
                if start > stop:
                    raise ValueError(f"Invalid run {token}: {start} is greater than {stop}")
                values.extend(range(start, stop + 1))
                continue
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"Not an integer or a..b run: {token!r}") from None
    return values
