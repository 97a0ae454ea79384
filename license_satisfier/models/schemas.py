"""
Schemas Module.

This module defines the Pydantic models used for data validation
in API requests and responses: satisfaction checks and DNF expansion.
"""

from typing import List, Literal
from pydantic import BaseModel

ParserName = Literal["spdx", "license-expression"]

# ------------------------------------------------------------------
# REQUEST MODELS
# ------------------------------------------------------------------

class SatisfiesRequest(BaseModel):
    """
    Represents the request payload for a satisfaction check.

    Attributes:
        first (str): The expression whose licensing terms must be met.
        second (str): The expression offered to meet them.
        parser (ParserName): Which parser to use ("spdx" or "license-expression").
    """
    first: str
    second: str
    parser: ParserName = "spdx"


class ExpandRequest(BaseModel):
    """
    Represents the request payload for expanding an expression into DNF.

    Attributes:
        expression (str): The SPDX expression to expand.
        parser (ParserName): Which parser to use.
    """
    expression: str
    parser: ParserName = "spdx"


# ------------------------------------------------------------------
# COMPONENT MODELS
# ------------------------------------------------------------------

class ClauseMatch(BaseModel):
    """
    A pair of AND-clauses that matched position by position.

    Attributes:
        first (List[str]): Rendered atoms of the clause from the first expression.
        second (List[str]): Rendered atoms of the clause from the second expression.
    """
    first: List[str]
    second: List[str]


# ------------------------------------------------------------------
# RESPONSE MODELS
# ------------------------------------------------------------------

class SatisfiesResponse(BaseModel):
    """
    Represents the response payload for the satisfaction endpoint.

    Attributes:
        first (str): The first expression, as received.
        second (str): The second expression, as received.
        satisfied (bool): Whether the first expression is satisfied by the second.
        matches (List[ClauseMatch]): Every matching clause pair.
    """
    first: str
    second: str
    satisfied: bool
    matches: List[ClauseMatch] = []


class ExpandResponse(BaseModel):
    """
    Represents the response payload for the expansion endpoint.

    Attributes:
        expression (str): The expression, as received.
        clauses (List[List[str]]): The normalized DNF clauses, rendered.
        flattened (List[str]): All atoms of the expression in a single clause.
    """
    expression: str
    clauses: List[List[str]]
    flattened: List[str]
