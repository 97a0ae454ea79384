"""
Compatibility Ranges Module.

This module loads the static table of license version families from
`ranges.json`. Each range is an ordered list of license identifiers, oldest
version first. An element may itself be a list of identifiers that share the
same rank, e.g.::

    ["MPL-1.0", "MPL-1.1", ["MPL-2.0", "MPL-2.0-no-copyleft-exception"]]

The table serves two purposes:
- ordering versions within a family (see `compare.py`);
- deciding whether two "or later" ranges overlap (both identifiers belong to
  the same family).

Key Features:
- Robust loading: reads from the filesystem first (the bundled file, or the
  path configured in `LICENSE_RANGES_PATH`), falling back to package resources.
- Malformed entries are skipped instead of failing the whole table.
- Singleton pattern: the table is loaded once at import time and is immutable.
"""

import os
import json
import logging
from importlib import resources
from typing import Any, List, Optional, Tuple, Union

from license_satisfier.utility.config import LICENSE_RANGES_PATH

_RANGES_FILENAME = "ranges.json"
_RANGES_PATH = LICENSE_RANGES_PATH or os.path.join(os.path.dirname(__file__), _RANGES_FILENAME)

logger = logging.getLogger(__name__)

# A range element is either one identifier or a group of same-rank identifiers
RangeElement = Union[str, Tuple[str, ...]]
LicenseRange = Tuple[RangeElement, ...]


def _read_from_filesystem() -> Optional[Any]:
    """
    Attempts to read the ranges JSON file directly from the filesystem.

    Returns:
        Optional[Any]: The parsed JSON data if successful, None otherwise.
    """
    try:
        if os.path.exists(_RANGES_PATH):
            with open(_RANGES_PATH, "r", encoding="utf-8") as file_handle:
                return json.load(file_handle)
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("An error occurred trying to read %s from filesystem", _RANGES_PATH)
    return None


def _read_from_resources() -> Optional[Any]:
    """
    Attempts to read the bundled ranges JSON file using package resources.

    Useful when the package is installed in a form (e.g. zipped) where plain
    filesystem paths do not work.

    Returns:
        Optional[Any]: The parsed JSON data if successful, None otherwise.
    """
    if not __package__:
        return None

    try:
        text = resources.files(__package__).joinpath(_RANGES_FILENAME).read_text(encoding="utf-8")
        return json.loads(text)
    except FileNotFoundError:
        return None
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("Error reading %s as package resource from %s", _RANGES_FILENAME, __package__)
        return None


def _read_ranges_json() -> Optional[Any]:
    """
    Orchestrates the reading strategy.

    1. Tries to read from the filesystem.
    2. Falls back to package resources if the file is not found.
    """
    data = _read_from_filesystem()
    if data:
        return data
    return _read_from_resources()


def _coerce_element(raw: Any) -> Optional[RangeElement]:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    if isinstance(raw, list) and raw and all(isinstance(x, str) and x.strip() for x in raw):
        return tuple(x.strip() for x in raw)
    return None


def _coerce_range(raw: Any) -> Optional[LicenseRange]:
    """
    Validates one raw range entry.

    Args:
        raw (Any): A range as found in the JSON file.

    Returns:
        Optional[LicenseRange]: The range as a tuple, or None if any element is invalid.
    """
    if not isinstance(raw, list) or not raw:
        return None

    elements: List[RangeElement] = []
    for item in raw:
        element = _coerce_element(item)
        if element is None:
            return None
        elements.append(element)
    return tuple(elements)


def load_ranges() -> Tuple[LicenseRange, ...]:
    """
    Loads and validates the compatibility ranges table.

    Accepts either a list of ranges at the root or a `{"ranges": [...]}` wrapper.

    Returns:
        Tuple[LicenseRange, ...]: The valid ranges. Empty if the file cannot be
        loaded or has an unknown structure.
    """
    try:
        data = _read_ranges_json()
        if not data:
            logger.info("File %s not found or empty. Path searched: %s", _RANGES_FILENAME, _RANGES_PATH)
            return ()

        if isinstance(data, dict) and isinstance(data.get("ranges"), list):
            data = data["ranges"]

        if not isinstance(data, list):
            logger.warning("Unrecognized structure in %s; ignoring it", _RANGES_PATH)
            return ()

        ranges: List[LicenseRange] = []
        for raw in data:
            coerced = _coerce_range(raw)
            if coerced is None:
                logger.warning("Skipping malformed license range: %r", raw)
                continue
            ranges.append(coerced)
        return tuple(ranges)

    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("Error during compatibility ranges normalization")

    return ()


def rank_in_range(license_id: str, license_range: LicenseRange) -> int:
    """
    Returns the position of a license within a range.

    Identifiers grouped in a nested element share that element's position.

    Args:
        license_id (str): A bare license identifier.
        license_range (LicenseRange): The range to search.

    Returns:
        int: The index of the matching element, or -1 if the license is absent.
    """
    for index, element in enumerate(license_range):
        if element == license_id or (isinstance(element, tuple) and license_id in element):
            return index
    return -1


def license_in_range(license_id: str, license_range: LicenseRange) -> bool:
    """True if the license appears in the range, directly or inside a nested group."""
    return rank_in_range(license_id, license_range) != -1


# Load the table once at module level (Singleton pattern)
_RANGES = load_ranges()


def get_ranges() -> Tuple[LicenseRange, ...]:
    """
    Retrieves the pre-loaded compatibility ranges.

    Returns:
        Tuple[LicenseRange, ...]: The immutable ranges table.
    """
    return _RANGES
