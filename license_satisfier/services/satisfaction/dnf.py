"""
DNF Expansion Module.

Converts an expression tree into disjunctive normal form: a collection of
AND-clauses that are OR'd together. Each clause is a tuple of atoms sorted by
their canonical key, so two clauses can be compared position by position.

For example, ``(MIT OR ISC) AND GPL-3.0`` expands to::

    ((GPL-3.0, MIT), (GPL-3.0, ISC))

Key Logic:
    - **Atoms**: one single-atom clause, keyed by the rendered atom.
    - **OR**: the clauses of both sides, side by side.
    - **AND**: the cross product of both sides, each pair merged key-wise.
      When both halves hold the same key, the right-hand atom wins.

Expansion is exponential for ANDs of ORs, so the number of clauses is capped
by `MAX_DNF_CLAUSES`.
"""

import logging
from typing import Dict, List, Optional, Tuple

from license_satisfier.utility.config import MAX_DNF_CLAUSES

from .errors import ClauseLimitExceeded
from .nodes import And, Atom, Expression, Or, render

logger = logging.getLogger(__name__)

Clause = Tuple[Atom, ...]

# Intermediate clause: rendered key -> atom, unsorted
_KeyedClause = Dict[str, Atom]


def _check_limit(size: int, limit: int) -> None:
    if size > limit:
        raise ClauseLimitExceeded(limit, size)


def _expand_inner(node: Expression, limit: int) -> List[_KeyedClause]:
    if isinstance(node, Or):
        clauses = _expand_inner(node.left, limit) + _expand_inner(node.right, limit)
        _check_limit(len(clauses), limit)
        return clauses

    if isinstance(node, And):
        left = _expand_inner(node.left, limit)
        right = _expand_inner(node.right, limit)
        _check_limit(len(left) * len(right), limit)
        return [{**lc, **rc} for lc in left for rc in right]

    key = render(node)
    # Unrenderable atoms contribute an empty clause, dropped by _sort_clauses
    return [{key: node}] if key is not None else [{}]


def _sort_clause(clause: _KeyedClause) -> Clause:
    return tuple(clause[key] for key in sorted(clause))


def _sort_clauses(clauses: List[_KeyedClause]) -> Tuple[Clause, ...]:
    """
    Drops empty clauses, sorts every clause by key and removes duplicates.

    Two clauses are duplicates when their sorted key sequences are identical.
    The first occurrence is kept, preserving expansion order.
    """
    seen = set()
    out: List[Clause] = []
    for clause in clauses:
        if not clause:
            continue
        keys = tuple(sorted(clause))
        if keys in seen:
            continue
        seen.add(keys)
        out.append(_sort_clause(clause))
    return tuple(out)


def expand(node: Expression, max_clauses: Optional[int] = None) -> Tuple[Clause, ...]:
    """
    Expands an expression into its deduplicated DNF clauses.

    Args:
        node (Expression): The (normalized) expression tree.
        max_clauses (Optional[int]): Clause cap; defaults to `MAX_DNF_CLAUSES`.

    Returns:
        Tuple[Clause, ...]: The AND-clauses, each sorted by canonical key.

    Raises:
        ClauseLimitExceeded: If any intermediate expansion exceeds the cap.
    """
    limit = MAX_DNF_CLAUSES if max_clauses is None else max_clauses
    clauses = _sort_clauses(_expand_inner(node, limit))
    logger.debug("Expanded expression into %d clause(s)", len(clauses))
    return clauses


def flatten(node: Expression, max_clauses: Optional[int] = None) -> Clause:
    """
    Merges every clause of the expansion into a single clause.

    This is the "every term at once" view of an expression: the union of all
    atoms it mentions, sorted by key. An expression with no renderable atom
    flattens to an empty clause.
    """
    limit = MAX_DNF_CLAUSES if max_clauses is None else max_clauses
    merged: _KeyedClause = {}
    for clause in _expand_inner(node, limit):
        merged.update(clause)
    return _sort_clause(merged)


def clause_keys(clause: Clause) -> Tuple[str, ...]:
    """Renders every atom of a clause."""
    return tuple(render(atom) or "" for atom in clause)
