# license_satisfier/api/satisfaction.py
from fastapi import APIRouter, HTTPException, Body

from license_satisfier.models.schemas import (
    ExpandRequest,
    ExpandResponse,
    SatisfiesRequest,
    SatisfiesResponse,
)
from license_satisfier.services.satisfaction import (
    ClauseLimitExceeded,
    ExpressionShapeError,
    LicenseParseError,
    explain,
    expand,
    flatten,
    normalize_gpl_identifiers,
    parse_spdx,
    parse_with_licensing,
)
from license_satisfier.services.satisfaction.dnf import clause_keys

router = APIRouter()

_PARSERS = {
    "spdx": parse_spdx,
    "license-expression": parse_with_licensing,
}


# ------------------------------------------------------------------
# SATISFIES: is the first expression satisfied by the second?
# ------------------------------------------------------------------
@router.post("/satisfies", response_model=SatisfiesResponse)
def check_satisfies(payload: SatisfiesRequest = Body(...)):
    """
    Example body: {"first": "GPL-2.0-or-later", "second": "GPL-3.0"}
    """
    try:
        report = explain(payload.first, payload.second, {"parse": _PARSERS[payload.parser]})
    except LicenseParseError as pe:
        raise HTTPException(status_code=400, detail=str(pe))
    except (ExpressionShapeError, ClauseLimitExceeded) as se:
        raise HTTPException(status_code=422, detail=str(se))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return SatisfiesResponse(
        first=payload.first,
        second=payload.second,
        satisfied=report["satisfied"],
        matches=report["matches"],
    )


# ------------------------------------------------------------------
# EXPAND: normalized DNF view of a single expression
# ------------------------------------------------------------------
@router.post("/expand", response_model=ExpandResponse)
def expand_expression(payload: ExpandRequest = Body(...)):
    """
    Example body: {"expression": "(MIT OR ISC) AND GPL-3.0"}
    """
    try:
        tree = normalize_gpl_identifiers(_PARSERS[payload.parser](payload.expression))
        clauses = [list(clause_keys(c)) for c in expand(tree)]
        flattened = list(clause_keys(flatten(tree)))
    except LicenseParseError as pe:
        raise HTTPException(status_code=400, detail=str(pe))
    except ClauseLimitExceeded as se:
        raise HTTPException(status_code=422, detail=str(se))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return ExpandResponse(expression=payload.expression, clauses=clauses, flattened=flattened)
