"""
test: services/satisfaction/normalizer.py
"""

import pytest

from license_satisfier.services.satisfaction.nodes import And, License, NoAssertion, Or
from license_satisfier.services.satisfaction.normalizer import normalize_gpl_identifiers
from license_satisfier.services.satisfaction.parser_spdx import parse_spdx


def test_or_later_becomes_plus():
    assert normalize_gpl_identifiers(License("GPL-2.0-or-later")) == License("GPL-2.0", plus=True)


def test_only_becomes_bare():
    assert normalize_gpl_identifiers(License("GPL-3.0-only")) == License("GPL-3.0")


def test_only_clears_an_existing_plus():
    assert normalize_gpl_identifiers(License("GPL-3.0-only", plus=True)) == License("GPL-3.0")


def test_exception_is_preserved():
    node = License("GPL-2.0-or-later", exception="Classpath-exception-2.0")
    assert normalize_gpl_identifiers(node) == License("GPL-2.0", plus=True, exception="Classpath-exception-2.0")


def test_unrelated_atoms_pass_through_unchanged():
    atom = License("MIT")
    marker = NoAssertion()
    assert normalize_gpl_identifiers(atom) is atom
    assert normalize_gpl_identifiers(marker) is marker


@pytest.mark.parametrize("identifier", ["-or-later", "-only", "Only", "only-MIT", "MIT-or-later-2"])
def test_suffix_must_be_a_real_suffix(identifier):
    atom = License(identifier)
    assert normalize_gpl_identifiers(atom) is atom


def test_conjunctions_are_rebuilt_recursively():
    tree = parse_spdx("(GPL-2.0-or-later OR MIT) AND LGPL-2.1-only")
    assert normalize_gpl_identifiers(tree) == And(
        Or(License("GPL-2.0", plus=True), License("MIT")),
        License("LGPL-2.1"),
    )


def test_input_tree_is_not_modified():
    tree = parse_spdx("GPL-2.0-or-later AND GPL-3.0-only")
    snapshot = repr(tree)
    normalized = normalize_gpl_identifiers(tree)
    assert repr(tree) == snapshot
    assert normalized is not tree


@pytest.mark.parametrize("expr", [
    "MIT",
    "GPL-2.0-or-later",
    "GPL-2.0-only-or-later",
    "GPL-2.0-or-later-only",
    "(GPL-2.0-or-later OR LGPL-2.1-only) AND GPL-3.0+ WITH foo-exception",
    "NOASSERTION OR Apache-2.0",
])
def test_normalization_is_idempotent(expr):
    once = normalize_gpl_identifiers(parse_spdx(expr))
    assert normalize_gpl_identifiers(once) == once


def test_nested_suffixes_take_the_outermost_flag():
    assert normalize_gpl_identifiers(License("GPL-2.0-only-or-later")) == License("GPL-2.0", plus=True)
    assert normalize_gpl_identifiers(License("GPL-2.0-or-later-only")) == License("GPL-2.0")
