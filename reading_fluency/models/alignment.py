"""Data model for a word-level comparison between reference text and a transcript."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..errors import InvalidDurationError


class OperationKind(str, Enum):
    """Kind of one step in the alignment path."""

    MATCH = "match"
    SUBSTITUTION = "sub"
    DELETION = "del"
    INSERTION = "ins"


class WordStatus(str, Enum):
    """Semantic tag the presentation layer renders for each operation."""

    CORRECT = "correct"
    SAID_DIFFERENTLY = "said-differently"
    MISSED = "missed"
    EXTRA = "extra"


_STATUS_BY_KIND = {
    OperationKind.MATCH: WordStatus.CORRECT,
    OperationKind.SUBSTITUTION: WordStatus.SAID_DIFFERENTLY,
    OperationKind.DELETION: WordStatus.MISSED,
    OperationKind.INSERTION: WordStatus.EXTRA,
}


@dataclass(frozen=True)
class AlignmentOperation:
    """One step of the optimal alignment path.

    Attributes:
        kind: match, sub, del or ins
        reference_token: Token from the reference text (None for an insertion)
        hypothesis_token: Token from the transcript (None for a deletion)
    """
    kind: OperationKind
    reference_token: Optional[str]
    hypothesis_token: Optional[str]

    def __post_init__(self) -> None:
        ref, hyp = self.reference_token, self.hypothesis_token
        if self.kind is OperationKind.DELETION:
            ok = ref is not None and hyp is None
        elif self.kind is OperationKind.INSERTION:
            ok = ref is None and hyp is not None
        elif self.kind is OperationKind.MATCH:
            ok = ref is not None and hyp is not None and ref == hyp
        else:
            ok = ref is not None and hyp is not None and ref != hyp
        if not ok:
            raise ValueError(f"inconsistent {self.kind.value} operation: ref={ref!r}, hyp={hyp!r}")

    @property
    def is_error(self) -> bool:
        return self.kind is not OperationKind.MATCH

    @property
    def status(self) -> WordStatus:
        return _STATUS_BY_KIND[self.kind]


@dataclass(frozen=True)
class RenderedWord:
    """Classified unit ready for display.

    `word` is the reference token, except for "extra" where it is the spoken token.
    `spoken` is only set for "said-differently".
    """
    status: WordStatus
    word: str
    spoken: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"word": self.word, "status": self.status.value}
        if self.spoken is not None:
            out["spoken"] = self.spoken
        return out


def render_operation(op: AlignmentOperation) -> RenderedWord:
    if op.kind is OperationKind.MATCH or op.kind is OperationKind.DELETION:
        return RenderedWord(status=op.status, word=op.reference_token)  # type: ignore[arg-type]
    if op.kind is OperationKind.SUBSTITUTION:
        return RenderedWord(status=op.status, word=op.reference_token, spoken=op.hypothesis_token)  # type: ignore[arg-type]
    return RenderedWord(status=op.status, word=op.hypothesis_token)  # type: ignore[arg-type]


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of comparing a reference sequence with a hypothesis sequence.

    Attributes:
        operations: Alignment path, left to right
        reference_count: Number of reference tokens
        hypothesis_count: Number of hypothesis tokens (words read)
        elapsed_seconds: Reading time supplied by the caller, always > 0
    """
    operations: Tuple[AlignmentOperation, ...]
    reference_count: int
    hypothesis_count: int
    elapsed_seconds: float
    _counts: Dict[OperationKind, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not is_valid_duration(self.elapsed_seconds):
            raise InvalidDurationError(self.elapsed_seconds)
        counts = {kind: 0 for kind in OperationKind}
        for op in self.operations:
            counts[op.kind] += 1
        if counts[OperationKind.MATCH] + counts[OperationKind.SUBSTITUTION] + counts[OperationKind.DELETION] != self.reference_count:
            raise ValueError("operations do not cover the reference sequence")
        if counts[OperationKind.MATCH] + counts[OperationKind.SUBSTITUTION] + counts[OperationKind.INSERTION] != self.hypothesis_count:
            raise ValueError("operations do not cover the hypothesis sequence")
        object.__setattr__(self, "_counts", counts)

    def counts(self) -> Dict[OperationKind, int]:
        return dict(self._counts)

    @property
    def error_count(self) -> int:
        return len(self.operations) - self._counts[OperationKind.MATCH]

    @property
    def words_per_minute(self) -> float:
        """Words read per minute, exact halves rounded up."""
        wpm = self.hypothesis_count / (self.elapsed_seconds / 60.0)
        return float(Decimal(wpm).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    @property
    def accuracy(self) -> float:
        """Percentage of reference words read correctly (0.0 for an empty reference)."""
        if self.reference_count == 0:
            return 0.0
        return round(100.0 * self._counts[OperationKind.MATCH] / self.reference_count, 1)

    def render(self) -> List[RenderedWord]:
        return [render_operation(op) for op in self.operations]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operations": [
                {"op": op.kind.value, "ref": op.reference_token, "hyp": op.hypothesis_token}
                for op in self.operations
            ],
            "reference_count": self.reference_count,
            "hypothesis_count": self.hypothesis_count,
            "error_count": self.error_count,
            "words_per_minute": self.words_per_minute,
            "elapsed_seconds": self.elapsed_seconds,
        }


def is_valid_duration(value: Any) -> bool:
    """True for a real, finite number greater than zero (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0
