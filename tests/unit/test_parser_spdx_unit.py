"""
test: services/satisfaction/parser_spdx.py

`parser_spdx` module: strict parser for SPDX expressions.

Supports:
- logical operators: AND, OR (AND has priority over OR; case-insensitive)
- parentheses for grouping: (...)
- WITH construct: attached to the preceding license as its exception
- trailing '+' as the "or later" flag, and the NOASSERTION marker

Behavior:
- Raises `LicenseParseError` for empty or malformed expressions.
- Chains of one operator build left-leaning binary trees.
"""

import pytest

from license_satisfier.services.satisfaction import parser_spdx as ps
from license_satisfier.services.satisfaction.errors import LicenseParseError
from license_satisfier.services.satisfaction.nodes import And, License, NoAssertion, Or


def test_parse_simple_license_creates_leaf():
    assert ps.parse_spdx("MIT") == License("MIT")


def test_parse_plus_sets_range_flag():
    assert ps.parse_spdx("GPL-2.0+") == License("GPL-2.0", plus=True)


def test_parse_with_operator_precedence():
    """'A OR B AND C' must be parsed as Or(A, And(B, C))."""
    root = ps.parse_spdx("MIT OR Apache-2.0 AND GPL-3.0")
    assert root == Or(License("MIT"), And(License("Apache-2.0"), License("GPL-3.0")))


def test_parse_parentheses_override_precedence():
    root = ps.parse_spdx("(MIT OR ISC) AND GPL-3.0")
    assert root == And(Or(License("MIT"), License("ISC")), License("GPL-3.0"))


def test_parse_chains_are_left_leaning():
    root = ps.parse_spdx("A OR B OR C")
    assert root == Or(Or(License("A"), License("B")), License("C"))


def test_parse_with_attaches_exception():
    node = ps.parse_spdx("GPL-2.0+ WITH Classpath-exception-2.0")
    assert node == License("GPL-2.0", plus=True, exception="Classpath-exception-2.0")


def test_parse_operators_are_case_insensitive():
    root = ps.parse_spdx("mit or gpl-2.0 with foo-exception and isc")
    assert root == Or(License("mit"), And(License("gpl-2.0", exception="foo-exception"), License("isc")))


def test_parse_noassertion():
    assert ps.parse_spdx("NOASSERTION") == NoAssertion()
    assert ps.parse_spdx("MIT OR NOASSERTION") == Or(License("MIT"), NoAssertion())


def test_parser_handles_multiple_spaces_and_tabs():
    root = ps.parse_spdx("MIT    OR\tGPL-3.0")
    assert root == Or(License("MIT"), License("GPL-3.0"))


def test_parser_parses_deeply_nested_parentheses():
    root = ps.parse_spdx("A OR (B AND (C OR D))")
    assert root == Or(License("A"), And(License("B"), Or(License("C"), License("D"))))


def test_parse_license_ref_identifiers():
    assert ps.parse_spdx("LicenseRef-Custom") == License("LicenseRef-Custom")
    assert ps.parse_spdx("DocumentRef-x:LicenseRef-y") == License("DocumentRef-x:LicenseRef-y")


@pytest.mark.parametrize("expr", [
    "",
    "   ",
    "MIT AND",
    "OR MIT",
    "(MIT OR ISC",
    "MIT OR ISC)",
    "()",
    "GPL-2.0 WITH",
    "GPL-2.0 WITH (MIT)",
    "MIT ISC",
    "MIT++",
    "+",
    "NOASSERTION+",
    "NOASSERTION WITH foo",
    "MIT/ISC",
])
def test_parse_rejects_malformed_expressions(expr):
    with pytest.raises(LicenseParseError):
        ps.parse_spdx(expr)


def test_parse_error_reports_expression_and_position():
    with pytest.raises(LicenseParseError) as excinfo:
        ps.parse_spdx("MIT ISC")
    assert excinfo.value.expression == "MIT ISC"
    assert excinfo.value.position == 1
    assert isinstance(excinfo.value, ValueError)


def test_tokenize_splits_parentheses():
    assert ps._tokenize("(MIT OR ISC)AND X") == ["(", "MIT", "OR", "ISC", ")", "AND", "X"]
