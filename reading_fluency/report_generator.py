from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .models.alignment import (
    AlignmentOperation,
    AlignmentResult,
    OperationKind,
    RenderedWord,
    render_operation,
)


def render_operations(operations: Iterable[AlignmentOperation]) -> List[RenderedWord]:
    """
    Classify each aligned position for display.

    Mapping:
    - match -> "correct" (reference word)
    - sub -> "said-differently" (reference word, spoken word kept in `spoken`)
    - del -> "missed" (reference word)
    - ins -> "extra" (spoken word)
    """
    return [render_operation(op) for op in operations]


def build_summary(result: AlignmentResult) -> Dict[str, Any]:
    counts = result.counts()
    return {
        "reference_count": result.reference_count,
        "hypothesis_count": result.hypothesis_count,
        "words_read": result.hypothesis_count,
        "error_count": result.error_count,
        "correct": counts[OperationKind.MATCH],
        "substituted": counts[OperationKind.SUBSTITUTION],
        "missed": counts[OperationKind.DELETION],
        "extra": counts[OperationKind.INSERTION],
        "accuracy": result.accuracy,
        "words_per_minute": result.words_per_minute,
        "elapsed_seconds": result.elapsed_seconds,
    }


def generate_report(result: AlignmentResult) -> Dict[str, Any]:
    """
    Word-level report handed to whatever stores or displays the reading.

    Returns:
        {"words": [{word, status[, spoken]}, ...], "summary": {...}}
    """
    return {
        "words": [w.to_dict() for w in render_operations(result.operations)],
        "summary": build_summary(result),
    }
