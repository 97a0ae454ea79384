from .schemas import (
    SatisfiesRequest,
    ExpandRequest,
    ClauseMatch,
    SatisfiesResponse,
    ExpandResponse,
)

__all__ = [
    "SatisfiesRequest",
    "ExpandRequest",
    "ClauseMatch",
    "SatisfiesResponse",
    "ExpandResponse",
]
