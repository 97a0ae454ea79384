"""
License Satisfier.

Decides whether the terms of one SPDX license expression are satisfied by
another::

    >>> from license_satisfier import satisfies
    >>> satisfies("(MIT OR ISC) AND GPL-3.0", "ISC AND GPL-3.0")
    True
"""

from license_satisfier.services.satisfaction import (
    LicenseParseError,
    explain,
    satisfies,
)

__all__ = [
    "satisfies",
    "explain",
    "LicenseParseError",
]
