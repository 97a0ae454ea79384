"""
Atomic Compatibility Predicate.

Decides whether two atoms (single license references) are compatible.

Key Logic:
    - **Exceptions** must match exactly (no exception is its own value).
    - **bare vs bare**: identical identifiers only.
    - **bare vs range**: the bare version must be the range start or a later
      version of the same family ("GPL-3.0" satisfies "GPL-2.0+").
    - **range vs range**: identical starts, or both starts belong to the same
      family in the compatibility ranges table.
    - **NOASSERTION** is never compatible with anything.
"""

from . import compare
from .nodes import Atom, License
from .ranges import get_ranges, license_in_range


def ranges_are_compatible(first: License, second: License) -> bool:
    """
    Checks two "or later" ranges for overlap.

    Args:
        first (License): A ranged license.
        second (License): Another ranged license.

    Returns:
        bool: True if both start at the same identifier or belong to one family.
    """
    if first.license == second.license:
        return True
    return any(
        license_in_range(first.license, license_range) and license_in_range(second.license, license_range)
        for license_range in get_ranges()
    )


def identifier_in_range(identifier: License, range_start: License) -> bool:
    """
    Checks whether a fixed version lies within "range_start or any later version".

    Args:
        identifier (License): The fixed-version license.
        range_start (License): The license whose version opens the range.

    Returns:
        bool: True if the identifier is the range start or a later version of it.
    """
    if identifier.license == range_start.license:
        return True
    try:
        return compare.gt(identifier.license, range_start.license) or compare.eq(
            identifier.license, range_start.license
        )
    except ValueError:
        # Identifiers the comparator cannot order are outside every range
        return False


def licenses_are_compatible(first: Atom, second: Atom) -> bool:
    """
    Decides pairwise compatibility of two atoms.

    Args:
        first (Atom): An atom from the first expression.
        second (Atom): An atom from the second expression.

    Returns:
        bool: True if the atoms are compatible.
    """
    if not isinstance(first, License) or not isinstance(second, License):
        return False
    if not first.license or not second.license:
        return False
    if first.exception != second.exception:
        return False

    if first.plus and second.plus:
        return ranges_are_compatible(first, second)
    if second.plus:
        return identifier_in_range(first, second)
    if first.plus:
        return identifier_in_range(second, first)
    return first.license == second.license
