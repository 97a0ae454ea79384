from .checker import explain, is_and_compatible, satisfies
from .compat_utils import parse_with_licensing
from .dnf import expand, flatten
from .errors import (
    ClauseLimitExceeded,
    ExpressionShapeError,
    LicenseParseError,
    SatisfactionError,
)
from .nodes import And, License, NoAssertion, Or, from_mapping, render, to_mapping
from .normalizer import normalize_gpl_identifiers
from .parser_spdx import parse_spdx
from .predicate import licenses_are_compatible

__all__ = [
    "satisfies",
    "explain",
    "is_and_compatible",
    "parse_spdx",
    "parse_with_licensing",
    "normalize_gpl_identifiers",
    "expand",
    "flatten",
    "licenses_are_compatible",
    "License",
    "NoAssertion",
    "And",
    "Or",
    "from_mapping",
    "to_mapping",
    "render",
    "SatisfactionError",
    "LicenseParseError",
    "ExpressionShapeError",
    "ClauseLimitExceeded",
]
