"""Alignment utilities for matching reference text to a reading transcript."""
from .aligner import align, compare_texts
from .edit_distance import align_sequences
from .normalizer import normalize_text
from .tokenizer import tokenize

__all__ = ["align", "align_sequences", "compare_texts", "normalize_text", "tokenize"]
