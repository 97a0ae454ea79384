"""
Compatibility Utilities Module.

Alternate parser backed by the `license_expression` library. It can be passed
as the `parse` option of `satisfies` in place of the built-in SPDX parser,
e.g. to reuse the library's tokenizer on scanner output.

The library builds n-ary AND/OR nodes; they are folded into the left-leaning
binary `And`/`Or` nodes used by the rest of the package.
"""

from functools import reduce

from license_expression import (
    ExpressionError,
    LicenseSymbol,
    LicenseWithExceptionSymbol,
    Licensing,
    ParseError,
)

from .errors import LicenseParseError
from .nodes import NOASSERTION, And, Expression, License, NoAssertion, Or

# Initialize the licensing parser
licensing = Licensing()


def _symbol_to_node(key: str, exception=None) -> Expression:
    plus = key.endswith("+")
    name = key[:-1] if plus else key
    if name.upper() == NOASSERTION and not plus and exception is None:
        return NoAssertion()
    return License(license=name, plus=plus, exception=exception)


def _convert(expression) -> Expression:
    """
    Recursively converts a `license_expression` tree into expression nodes.

    Args:
        expression: A LicenseSymbol, LicenseWithExceptionSymbol, AND or OR.

    Returns:
        Expression: The equivalent node tree.
    """
    if isinstance(expression, LicenseWithExceptionSymbol):
        return _symbol_to_node(
            expression.license_symbol.key, exception=expression.exception_symbol.key
        )
    if isinstance(expression, LicenseSymbol):
        return _symbol_to_node(expression.key)

    if isinstance(expression, (licensing.AND, licensing.OR)):
        cls = And if isinstance(expression, licensing.AND) else Or
        return reduce(cls, (_convert(arg) for arg in expression.args))

    raise LicenseParseError(str(expression), f"unsupported node {type(expression).__name__}")


def parse_with_licensing(expr: str) -> Expression:
    """
    Parses an SPDX expression with the `license_expression` library.

    Args:
        expr (str): The SPDX license expression to parse.

    Returns:
        Expression: The root node of the tree.

    Raises:
        LicenseParseError: If the expression is empty or the library rejects it.
    """
    try:
        tree = licensing.parse(expr)
    except (ExpressionError, ParseError) as exc:
        raise LicenseParseError(expr or "", str(exc)) from exc

    if tree is None:
        raise LicenseParseError(expr or "", "expression is empty")
    return _convert(tree)
