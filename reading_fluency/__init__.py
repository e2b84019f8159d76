"""
reading_fluency

Oral reading fluency scoring:
- Tokenize a reference passage and a reading transcript into comparable words
- Align them with a minimum edit-cost path (match / sub / del / ins)
- Derive words read, error count, accuracy and words per minute
- Classify each aligned word as correct, said-differently, missed or extra
"""
from .alignment import align, align_sequences, compare_texts, normalize_text, tokenize
from .config import FluencyConfig, load_config
from .errors import FluencyError, InvalidDurationError, OversizedInputError
from .models import (
    AlignmentOperation,
    AlignmentResult,
    OperationKind,
    RenderedWord,
    WordStatus,
)
from .report_generator import build_summary, generate_report, render_operations

__all__ = [
    "align",
    "align_sequences",
    "compare_texts",
    "normalize_text",
    "tokenize",
    "FluencyConfig",
    "load_config",
    "FluencyError",
    "InvalidDurationError",
    "OversizedInputError",
    "AlignmentOperation",
    "AlignmentResult",
    "OperationKind",
    "RenderedWord",
    "WordStatus",
    "build_summary",
    "generate_report",
    "render_operations",
]
