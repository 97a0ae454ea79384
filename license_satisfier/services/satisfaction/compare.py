"""
License Version Comparator.

Orders two bare license identifiers of the same family by their position in
the compatibility ranges table: ``gt("GPL-3.0", "GPL-2.0")`` is True because
both appear in the GPL range and GPL-3.0 comes later.

Identifiers from unrelated families (or unknown to the table) are not
ordered: every comparison between them returns False.
"""

from typing import Callable

from .ranges import get_ranges, rank_in_range


def _check_simple(identifier: str) -> None:
    if not identifier or not isinstance(identifier, str):
        raise ValueError(f"{identifier!r} is not a simple license identifier")
    if identifier.endswith("+") or any(ch.isspace() for ch in identifier):
        raise ValueError(f"{identifier!r} is not a simple license identifier")


def _range_comparison(comparison: Callable[[int, int], bool]) -> Callable[[str, str], bool]:
    """
    Builds a comparator applying `comparison` to the ranks of both identifiers.

    The comparison only runs for ranges that contain both identifiers.
    """

    def compare(first: str, second: str) -> bool:
        _check_simple(first)
        _check_simple(second)
        for license_range in get_ranges():
            first_rank = rank_in_range(first, license_range)
            second_rank = rank_in_range(second, license_range)
            if first_rank != -1 and second_rank != -1 and comparison(first_rank, second_rank):
                return True
        return False

    return compare


gt = _range_comparison(lambda first, second: first > second)
lt = _range_comparison(lambda first, second: first < second)
eq = _range_comparison(lambda first, second: first == second)
