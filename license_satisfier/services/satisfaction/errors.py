"""
Satisfaction Errors Module.

Exception hierarchy raised by the satisfaction services. The API layer
translates these into HTTP errors; library callers receive them unchanged.
"""

from typing import Optional


class SatisfactionError(Exception):
    """Base class for every error raised by the satisfaction services."""


class LicenseParseError(SatisfactionError, ValueError):
    """
    Raised when a license expression string cannot be parsed.

    Attributes:
        expression (str): The expression that failed to parse.
        position (Optional[int]): Index of the offending token, when known.
        detail (str): Human-readable description of the problem.
    """

    def __init__(self, expression: str, detail: str, position: Optional[int] = None):
        self.expression = expression
        self.detail = detail
        self.position = position
        where = f" at token {position}" if position is not None else ""
        super().__init__(f"Invalid license expression{where}: {detail} ({expression!r})")


class ExpressionShapeError(SatisfactionError, ValueError):
    """Raised when a mapping does not describe a license atom or conjunction."""


class ClauseLimitExceeded(SatisfactionError):
    """
    Raised when DNF expansion produces more clauses than the configured cap.

    Attributes:
        limit (int): The configured maximum number of clauses.
        size (int): The number of clauses that triggered the error.
    """

    def __init__(self, limit: int, size: int):
        self.limit = limit
        self.size = size
        super().__init__(f"DNF expansion produced {size} clauses (limit {limit})")
