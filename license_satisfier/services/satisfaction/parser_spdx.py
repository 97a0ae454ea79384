"""
SPDX Expression Parser.

This module implements a strict recursive descent parser for SPDX license
expressions. It constructs a tree of ``License``, ``NoAssertion``, ``And`` and
``Or`` nodes (see ``nodes.py``).

Supported Syntax:
- Logical Operators: AND, OR (AND has higher precedence, case-insensitive).
- Grouping: Parentheses `(...)`.
- Ranges: a trailing `+` on an identifier (e.g. 'GPL-2.0+').
- Exception Clauses: WITH (e.g. 'GPL-2.0 WITH Classpath-exception-2.0').
- The NOASSERTION marker.

Chains of the same operator build left-leaning binary trees:
'A OR B OR C' parses as Or(Or(A, B), C).

Malformed input raises ``LicenseParseError``; the parser never tries to
recover a partial tree.
"""

import re
from typing import List, Optional

from .errors import LicenseParseError
from .nodes import NOASSERTION, And, Expression, License, NoAssertion, Or

_IDENTIFIER = re.compile(r"^[A-Za-z0-9][A-Za-z0-9.\-:]*$")
_KEYWORDS = {"AND", "OR", "WITH"}


def _tokenize(expr: str) -> List[str]:
    """
    Splits the expression into identifiers, keywords and parentheses.

    Args:
        expr (str): The raw SPDX expression string.

    Returns:
        List[str]: The tokens, in order.
    """
    tokens: List[str] = []
    buf: List[str] = []

    for ch in expr:
        if ch in "()":
            if buf:
                tokens.append("".join(buf))
                buf = []
            tokens.append(ch)
        elif ch.isspace():
            if buf:
                tokens.append("".join(buf))
                buf = []
        else:
            buf.append(ch)

    if buf:
        tokens.append("".join(buf))

    return tokens


def _is_keyword(token: Optional[str], keyword: str) -> bool:
    return token is not None and token.upper() == keyword


def parse_spdx(expr: str) -> Expression:
    """
    Parses an SPDX expression string into an expression tree.

    Implements operator precedence:
    1. Parentheses `()`
    2. WITH
    3. AND
    4. OR

    Args:
        expr (str): The SPDX expression to parse.

    Returns:
        Expression: The root node of the tree.

    Raises:
        LicenseParseError: If the expression is empty or malformed.
    """
    if expr is None:
        raise LicenseParseError("", "expression is missing")

    tokens = _tokenize(expr)
    if not tokens:
        raise LicenseParseError(expr, "expression is empty")

    idx = 0

    # --- Inner Helper Functions (Closure) ---

    def peek() -> Optional[str]:
        """Returns the current token without consuming it."""
        return tokens[idx] if idx < len(tokens) else None

    def consume() -> str:
        """Returns the current token and advances the pointer."""
        nonlocal idx
        if idx >= len(tokens):
            raise LicenseParseError(expr, "unexpected end of expression", idx)
        t = tokens[idx]
        idx += 1
        return t

    def fail(detail: str) -> LicenseParseError:
        return LicenseParseError(expr, detail, idx)

    def parse_identifier() -> Expression:
        """Parses a license identifier, its '+' suffix and an optional WITH clause."""
        token = peek()
        if token is None:
            raise fail("expected a license identifier")
        if token in "()" or token.upper() in _KEYWORDS:
            raise fail(f"expected a license identifier, found {token!r}")
        consume()

        plus = token.endswith("+")
        name = token[:-1] if plus else token
        if not _IDENTIFIER.match(name):
            raise LicenseParseError(expr, f"invalid license identifier {token!r}", idx - 1)

        if name.upper() == NOASSERTION:
            if plus or _is_keyword(peek(), "WITH"):
                raise fail("NOASSERTION cannot be ranged or take an exception")
            return NoAssertion()

        exception = None
        if _is_keyword(peek(), "WITH"):
            consume()  # eat 'WITH'
            exc = peek()
            if exc is None or exc in "()" or exc.upper() in _KEYWORDS or not _IDENTIFIER.match(exc):
                raise fail("WITH must be followed by an exception identifier")
            exception = consume()

        return License(license=name, plus=plus, exception=exception)

    def parse_primary() -> Expression:
        """Parses a primary expression: an identifier or a parenthesized sub-expression."""
        if peek() == "(":
            consume()  # eat '('
            node = parse_or()
            if peek() != ")":
                raise fail("missing closing parenthesis")
            consume()  # eat ')'
            return node
        return parse_identifier()

    def parse_and() -> Expression:
        """Parses 'AND' sequences (higher precedence than OR)."""
        left = parse_primary()
        while _is_keyword(peek(), "AND"):
            consume()  # eat 'AND'
            left = And(left, parse_primary())
        return left

    def parse_or() -> Expression:
        """Parses 'OR' sequences (lowest precedence)."""
        left = parse_and()
        while _is_keyword(peek(), "OR"):
            consume()  # eat 'OR'
            left = Or(left, parse_and())
        return left

    # --- End Helpers ---

    root = parse_or()
    if idx < len(tokens):
        raise fail(f"unexpected token {tokens[idx]!r}")
    return root
