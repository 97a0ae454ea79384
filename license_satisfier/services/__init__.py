from .satisfaction import explain, satisfies

__all__ = [
    "satisfies",
    "explain",
]
