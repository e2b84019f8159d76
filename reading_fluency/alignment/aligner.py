"""Alignment orchestration between a reference passage and a transcript."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..config import FluencyConfig
from ..errors import InvalidDurationError, OversizedInputError
from ..models.alignment import AlignmentResult, is_valid_duration
from .edit_distance import align_sequences
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def _as_tokens(side: str, tokens: Sequence[str]) -> Tuple[str, ...]:
    if isinstance(tokens, str):
        raise TypeError(f"{side} must be a sequence of tokens, not a string; call tokenize() first")
    out = tuple(tokens)
    for tok in out:
        if not isinstance(tok, str):
            raise TypeError(f"{side} tokens must be str, got {type(tok).__name__}")
    return out


def align(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    elapsed_seconds: float,
    *,
    max_tokens: Optional[int] = None,
) -> AlignmentResult:
    """Align two token sequences and derive the fluency metrics.

    Args:
        reference: Tokens of the assigned passage
        hypothesis: Tokens of the transcribed reading
        elapsed_seconds: Reading time, must be > 0
        max_tokens: Optional limit on each side, checked before the cost table is built

    Returns:
        AlignmentResult with the operation path, counts, error count and words per minute

    Raises:
        InvalidDurationError: elapsed_seconds is not a finite number > 0
        OversizedInputError: a side has more than max_tokens tokens
    """
    if not is_valid_duration(elapsed_seconds):
        raise InvalidDurationError(elapsed_seconds)

    ref = _as_tokens("reference", reference)
    hyp = _as_tokens("hypothesis", hypothesis)

    if max_tokens is not None:
        for side, toks in (("reference", ref), ("hypothesis", hyp)):
            if len(toks) > max_tokens:
                raise OversizedInputError(side, len(toks), max_tokens)

    ops = align_sequences(ref, hyp)
    result = AlignmentResult(
        operations=tuple(ops),
        reference_count=len(ref),
        hypothesis_count=len(hyp),
        elapsed_seconds=elapsed_seconds,
    )
    logger.debug(
        "aligned %d reference / %d hypothesis tokens: %d errors",
        result.reference_count,
        result.hypothesis_count,
        result.error_count,
    )
    return result


def compare_texts(
    reference_text: str,
    hypothesis_text: str,
    elapsed_seconds: float,
    *,
    config: Optional[FluencyConfig] = None,
) -> AlignmentResult:
    """Tokenize a passage and a transcript, then align them.

    Args:
        reference_text: The passage the student was asked to read
        hypothesis_text: The transcript of what was read
        elapsed_seconds: Reading time, must be > 0
        config: Supplies max_tokens (defaults to FluencyConfig())

    Returns:
        AlignmentResult for the two texts
    """
    cfg = config or FluencyConfig()
    return align(
        tokenize(reference_text),
        tokenize(hypothesis_text),
        elapsed_seconds,
        max_tokens=cfg.max_tokens,
    )
