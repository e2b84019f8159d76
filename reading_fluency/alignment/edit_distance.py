"""Edit distance alignment algorithm for word sequences."""
from __future__ import annotations

from typing import List, Sequence

from ..models.alignment import AlignmentOperation, OperationKind

# backpointer codes
_DIAG = 0
_DEL = 1
_INS = 2


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[AlignmentOperation]:
    """Classic edit-distance alignment returning a path of operations.

    Unit cost for deletion, insertion and substitution, zero for a match.
    When several moves reach the minimum at a cell the diagonal (match/sub) wins,
    then deletion, then insertion, so ties resolve to word-for-word alignment.

      match -> correct words
      sub -> said differently
      del -> missed words
      ins -> extra words

    Args:
        ref: Reference sequence (list of tokens)
        hyp: Hypothesis sequence (list of tokens from the transcript)

    Returns:
        List of AlignmentOperation, left to right
    """
    n, m = len(ref), len(hyp)
    # dp costs
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    back = [[_DIAG] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = i
        back[i][0] = _DEL
    for j in range(1, m + 1):
        dp[0][j] = j
        back[0][j] = _INS

    for i in range(1, n + 1):
        ref_word = ref[i - 1]
        row, prev = dp[i], dp[i - 1]
        back_row = back[i]
        for j in range(1, m + 1):
            best = prev[j - 1] + (0 if ref_word == hyp[j - 1] else 1)
            step = _DIAG
            if prev[j] + 1 < best:
                best = prev[j] + 1
                step = _DEL
            if row[j - 1] + 1 < best:
                best = row[j - 1] + 1
                step = _INS
            row[j] = best
            back_row[j] = step

    # backtrack
    ops: List[AlignmentOperation] = []
    i, j = n, m
    while i > 0 or j > 0:
        step = back[i][j]
        if step == _DIAG:
            r, h = ref[i - 1], hyp[j - 1]
            kind = OperationKind.MATCH if r == h else OperationKind.SUBSTITUTION
            ops.append(AlignmentOperation(kind, r, h))
            i -= 1
            j -= 1
        elif step == _DEL:
            ops.append(AlignmentOperation(OperationKind.DELETION, ref[i - 1], None))
            i -= 1
        else:
            ops.append(AlignmentOperation(OperationKind.INSERTION, None, hyp[j - 1]))
            j -= 1
    ops.reverse()
    return ops
