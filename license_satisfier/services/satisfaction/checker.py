"""
Satisfaction Checker Module.

This module is the public interface for deciding whether the license terms
of one expression ("first") are satisfied by another expression ("second").
It orchestrates the process by parsing both expressions, normalizing
GPL-style identifiers, expanding both trees into DNF clauses and comparing
the clauses pairwise.

A clause of the first expression is matched by a clause of the second only
when both have the same length and every position holds compatible atoms
(after each clause's canonical sort). Matching is positional, so "MIT" is not
satisfied by "MIT AND ISC".
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .dnf import Clause, clause_keys, expand
from .errors import ClauseLimitExceeded
from .nodes import Expression, from_mapping
from .normalizer import normalize_gpl_identifiers
from .parser_spdx import parse_spdx
from .predicate import licenses_are_compatible

logger = logging.getLogger(__name__)

ParseFn = Callable[[str], Any]


def _resolve_parser(options: Any) -> ParseFn:
    """
    Extracts the `parse` override from a mapping or an options object.

    Falls back to the default SPDX parser when no override is given.
    """
    if options is None:
        return parse_spdx
    if isinstance(options, dict):
        parser = options.get("parse")
    else:
        parser = getattr(options, "parse", None)
    return parser or parse_spdx


def _prepare(expression: str, parser: ParseFn) -> Tuple[Clause, ...]:
    """Parses, normalizes and expands one expression."""
    tree: Expression = from_mapping(parser(expression))
    return expand(normalize_gpl_identifiers(tree))


def is_and_compatible(first: Clause, second: Clause) -> bool:
    """
    Checks two AND-clauses position by position.

    Args:
        first (Clause): A sorted clause of the first expression.
        second (Clause): A sorted clause of the second expression.

    Returns:
        bool: True if both clauses have the same length and every pair of
        atoms at the same position is compatible.
    """
    if len(first) != len(second):
        return False
    return all(licenses_are_compatible(a, b) for a, b in zip(first, second))


def _matching_pairs(
    one: Tuple[Clause, ...], two: Tuple[Clause, ...]
) -> List[Tuple[Clause, Clause]]:
    return [(o, t) for o in one for t in two if is_and_compatible(o, t)]


def satisfies(first: str, second: str, options: Optional[Any] = None) -> bool:
    """
    Decides whether `first` is satisfied by `second`.

    Args:
        first (str): The license expression whose terms must be met.
        second (str): The license expression offered to meet them.
        options (Optional[Any]): A mapping or object whose optional `parse`
            attribute/key replaces the default SPDX parser. The parser may
            return expression nodes or AST mappings.

    Returns:
        bool: True if some clause of `first` is matched by some clause of
        `second`. False when no pair matches, when either side has no
        clauses, or when expansion exceeds the clause cap.

    Raises:
        Whatever the parser raises for malformed input (`LicenseParseError`
        for the default parser); it is propagated unchanged.
    """
    parser = _resolve_parser(options)

    try:
        one = _prepare(first, parser)
        two = _prepare(second, parser)
    except ClauseLimitExceeded as exc:
        logger.warning("Expression too large to compare (%s); treating as not satisfied", exc)
        return False

    result = any(is_and_compatible(o, t) for o in one for t in two)
    logger.debug("satisfies(%r, %r) -> %s", first, second, result)
    return result


def explain(first: str, second: str, options: Optional[Any] = None) -> Dict[str, Any]:
    """
    Runs the same decision as `satisfies` and reports how it was reached.

    Args:
        first (str): The license expression whose terms must be met.
        second (str): The license expression offered to meet them.
        options (Optional[Any]): Same as for `satisfies`.

    Returns:
        Dict[str, Any]: A dictionary containing:
            - "satisfied" (bool): The decision.
            - "first_clauses" (List[List[str]]): Rendered DNF clauses of `first`.
            - "second_clauses" (List[List[str]]): Rendered DNF clauses of `second`.
            - "matches" (List[Dict]): Every matching pair, as
              {"first": [...], "second": [...]}.

    Raises:
        ClauseLimitExceeded: If either expression expands past the clause cap.
    """
    parser = _resolve_parser(options)
    one = _prepare(first, parser)
    two = _prepare(second, parser)

    matches = [
        {"first": list(clause_keys(o)), "second": list(clause_keys(t))}
        for o, t in _matching_pairs(one, two)
    ]
    return {
        "satisfied": bool(matches),
        "first_clauses": [list(clause_keys(c)) for c in one],
        "second_clauses": [list(clause_keys(c)) for c in two],
        "matches": matches,
    }
