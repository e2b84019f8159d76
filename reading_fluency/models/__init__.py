"""Result types produced by the alignment engine."""
from .alignment import (
    AlignmentOperation,
    AlignmentResult,
    OperationKind,
    RenderedWord,
    WordStatus,
)

__all__ = [
    "AlignmentOperation",
    "AlignmentResult",
    "OperationKind",
    "RenderedWord",
    "WordStatus",
]
