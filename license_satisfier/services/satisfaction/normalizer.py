"""
GPL Identifier Normalizer.

SPDX spells "any later version" two ways: the `+` suffix (``GPL-2.0+``) and
the textual GPL-family suffix (``GPL-2.0-or-later``). This module rewrites
the textual form into a bare identifier with the `plus` flag, so range logic
only has to handle one representation. ``-only`` identifiers become bare,
non-ranged identifiers.
"""

from .nodes import And, Expression, License, Or

OR_LATER_SUFFIX = "-or-later"
ONLY_SUFFIX = "-only"


def _strip_suffix(identifier: str, suffix: str) -> str:
    return identifier[: -len(suffix)]


def normalize_gpl_identifiers(node: Expression) -> Expression:
    """
    Returns a copy of the tree with "-or-later" / "-only" identifiers normalized.

    Args:
        node (Expression): The root of the tree to normalize. It is not modified.

    Returns:
        Expression: The normalized tree. Atoms that need no change (including
        NOASSERTION) are returned as the same objects.
    """
    if isinstance(node, (And, Or)):
        return type(node)(normalize_gpl_identifiers(node.left), normalize_gpl_identifiers(node.right))

    if not isinstance(node, License):
        return node

    identifier = node.license
    plus = node.plus
    changed = False
    # The outermost suffix decides the flag; inner ones are only stripped
    while True:
        if identifier.endswith(OR_LATER_SUFFIX) and len(identifier) > len(OR_LATER_SUFFIX):
            if not changed:
                plus = True
            identifier = _strip_suffix(identifier, OR_LATER_SUFFIX)
        elif identifier.endswith(ONLY_SUFFIX) and len(identifier) > len(ONLY_SUFFIX):
            if not changed:
                plus = False
            identifier = _strip_suffix(identifier, ONLY_SUFFIX)
        else:
            break
        changed = True

    if not changed:
        return node
    return License(identifier, plus=plus, exception=node.exception)
