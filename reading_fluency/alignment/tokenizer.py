"""Word tokenization for reference passages and transcripts."""
from __future__ import annotations

from typing import List

from .normalizer import normalize_text


def tokenize(text: str) -> List[str]:
    """Split text into normalized word tokens, left to right.

    Punctuation and symbols act as separators, apostrophes stay inside words.

    Example: "The cat's hat, 2025!" -> ["the", "cat's", "hat", "2025"]

    Args:
        text: Text to tokenize; empty or punctuation-only text gives []

    Returns:
        List of tokens
    """
    # str.split() with no argument drops empty fragments
    return normalize_text(text).split()
