"""Text normalization applied before tokenization."""
from __future__ import annotations

import re
import unicodedata

# \w covers Unicode letters, digits and "_"; "_" is not a word character here
_SEPARATOR_RE = re.compile(r"[^\w\s']|_")


def _drop_marks(text: str) -> str:
    # casefold can emit combining marks, e.g. "İ" -> "i" + U+0307
    if text.isascii():
        return text
    return "".join(ch for ch in text if unicodedata.category(ch) != "Mn")


def normalize_text(text: str) -> str:
    """Normalize free text so it can be split into comparable words.

    Every character that is not a letter, digit, whitespace or apostrophe becomes
    a space, then the result is case-folded.

    Example: "Don't STOP!" -> "don't stop "

    Args:
        text: Arbitrary text (reference passage or transcript)

    Returns:
        Normalized text ready for whitespace splitting
    """
    return _drop_marks(_SEPARATOR_RE.sub(" ", text).casefold())
