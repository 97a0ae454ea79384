"""
License Expression Nodes.

Immutable tree types for parsed license expressions:

- ``License``: a single license reference, optionally ranged ("or later",
  the SPDX ``+`` suffix) and optionally qualified by a ``WITH`` exception.
- ``NoAssertion``: the SPDX ``NOASSERTION`` marker.
- ``And`` / ``Or``: binary conjunctions.

Nodes are frozen dataclasses, so transformations (normalization, expansion)
always build new nodes and never touch a tree someone else holds.

The module also converts between nodes and the plain-dictionary shape used by
JavaScript-style SPDX parsers and by the HTTP API::

    {"license": "GPL-2.0", "plus": True, "exception": "Classpath-exception-2.0"}
    {"noassertion": True}
    {"conjunction": "and", "left": {...}, "right": {...}}
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Union

from .errors import ExpressionShapeError

NOASSERTION = "NOASSERTION"


class Node:  # pylint: disable=too-few-public-methods
    """
    Abstract base class representing a generic node in the expression tree.
    """


@dataclass(frozen=True)
class License(Node):
    """
    Leaf node representing a single license reference.

    Attributes:
        license (str): The bare license identifier (e.g. "GPL-2.0").
        plus (bool): True when the reference means "this version or any later one".
        exception (Optional[str]): The exception attached with WITH, if any.
    """

    license: str
    plus: bool = False
    exception: Optional[str] = None

    @property
    def kind(self) -> str:
        """The tagged variant of this atom."""
        if self.plus:
            return "range-with-exception" if self.exception else "range"
        return "bare-with-exception" if self.exception else "bare"

    def __str__(self) -> str:
        return render(self) or ""


@dataclass(frozen=True)
class NoAssertion(Node):
    """The SPDX ``NOASSERTION`` marker: no license information is asserted."""

    def __str__(self) -> str:
        return NOASSERTION


@dataclass(frozen=True)
class And(Node):
    """
    Node representing a logical AND between two sub-expressions.

    Attributes:
        left (Expression): The left operand.
        right (Expression): The right operand.
    """

    conjunction: ClassVar[str] = "and"

    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or(Node):
    """
    Node representing a logical OR between two sub-expressions.

    Attributes:
        left (Expression): The left operand.
        right (Expression): The right operand.
    """

    conjunction: ClassVar[str] = "or"

    left: "Expression"
    right: "Expression"


Atom = Union[License, NoAssertion]
Expression = Union[License, NoAssertion, And, Or]


def render(atom: Atom) -> Optional[str]:
    """
    Returns the canonical key of an atom.

    Examples: ``"MIT"``, ``"GPL-2.0+"``,
    ``"GPL-2.0 WITH Classpath-exception-2.0"``, ``"NOASSERTION"``.

    Args:
        atom (Atom): The atom to render.

    Returns:
        Optional[str]: The rendered key, or None if the atom carries no
        license identifier and therefore cannot be rendered.
    """
    if isinstance(atom, NoAssertion):
        return NOASSERTION
    if not atom.license:
        return None
    key = f"{atom.license}+" if atom.plus else atom.license
    if atom.exception:
        key = f"{key} WITH {atom.exception}"
    return key


def from_mapping(data: Any) -> Expression:
    """
    Builds a node tree from its dictionary representation.

    Nodes passed in are returned as-is, so parsers may return either shape.
    An atom mapping without ``license`` (and without ``noassertion``) becomes a
    ``License`` with an empty identifier; expansion later discards it.

    Args:
        data (Any): A node, or a mapping shaped like a parser AST.

    Returns:
        Expression: The equivalent node tree.

    Raises:
        ExpressionShapeError: If the data is neither a node nor a valid mapping.
    """
    if isinstance(data, Node):
        return data
    if not isinstance(data, Mapping):
        raise ExpressionShapeError(f"Expected a mapping or node, got {type(data).__name__}")

    if "conjunction" in data:
        conjunction = str(data["conjunction"]).lower()
        if conjunction not in {"and", "or"}:
            raise ExpressionShapeError(f"Unknown conjunction: {data['conjunction']!r}")
        if "left" not in data or "right" not in data:
            raise ExpressionShapeError("Conjunction requires both 'left' and 'right'")
        cls = And if conjunction == "and" else Or
        return cls(from_mapping(data["left"]), from_mapping(data["right"]))

    if data.get("noassertion"):
        return NoAssertion()

    return License(
        license=str(data.get("license") or ""),
        plus=bool(data.get("plus", False)),
        exception=data.get("exception") or None,
    )


def to_mapping(node: Expression) -> Dict[str, Any]:
    """Inverse of ``from_mapping``; ``plus`` and ``exception`` appear only when set."""
    if isinstance(node, (And, Or)):
        return {
            "conjunction": node.conjunction,
            "left": to_mapping(node.left),
            "right": to_mapping(node.right),
        }
    if isinstance(node, NoAssertion):
        return {"noassertion": True}

    out: Dict[str, Any] = {"license": node.license}
    if node.plus:
        out["plus"] = True
    if node.exception:
        out["exception"] = node.exception
    return out
