"""Tests for word classification and the stored report shape."""
from reading_fluency import (
    AlignmentOperation,
    OperationKind,
    RenderedWord,
    WordStatus,
    build_summary,
    compare_texts,
    generate_report,
    render_operations,
)


class TestRenderOperations:
    def test_tags(self):
        result = compare_texts("the cat sat on the mat", "the dog sat the mat today", 6)
        assert render_operations(result.operations) == [
            RenderedWord(WordStatus.CORRECT, "the"),
            RenderedWord(WordStatus.SAID_DIFFERENTLY, "cat", spoken="dog"),
            RenderedWord(WordStatus.CORRECT, "sat"),
            RenderedWord(WordStatus.MISSED, "on"),
            RenderedWord(WordStatus.CORRECT, "the"),
            RenderedWord(WordStatus.CORRECT, "mat"),
            RenderedWord(WordStatus.EXTRA, "today"),
        ]

    def test_explicit_operations(self):
        ops = [
            AlignmentOperation(OperationKind.MATCH, "a", "a"),
            AlignmentOperation(OperationKind.SUBSTITUTION, "b", "c"),
            AlignmentOperation(OperationKind.DELETION, "d", None),
            AlignmentOperation(OperationKind.INSERTION, None, "e"),
        ]
        assert [(w.status.value, w.word, w.spoken) for w in render_operations(ops)] == [
            ("correct", "a", None),
            ("said-differently", "b", "c"),
            ("missed", "d", None),
            ("extra", "e", None),
        ]

    def test_result_render_matches(self):
        result = compare_texts("The big cat", "The cat", 6)
        assert result.render() == render_operations(result.operations)

    def test_status_values(self):
        assert [s.value for s in WordStatus] == ["correct", "said-differently", "missed", "extra"]


class TestGenerateReport:
    def test_words(self):
        report = generate_report(compare_texts("The cat sat", "The dog sat", 6))
        assert report["words"] == [
            {"word": "the", "status": "correct"},
            {"word": "cat", "status": "said-differently", "spoken": "dog"},
            {"word": "sat", "status": "correct"},
        ]

    def test_extra_word_carries_spoken_token(self):
        report = generate_report(compare_texts("The cat sat", "The big cat sat", 6))
        assert {"word": "big", "status": "extra"} in report["words"]

    def test_missed_word_carries_reference_token(self):
        report = generate_report(compare_texts("The cat sat down", "The cat down", 6))
        assert {"word": "sat", "status": "missed"} in report["words"]

    def test_summary(self):
        summary = build_summary(compare_texts("the cat sat on the mat", "the dog sat the mat today", 12))
        assert summary == {
            "reference_count": 6,
            "hypothesis_count": 6,
            "words_read": 6,
            "error_count": 3,
            "correct": 4,
            "substituted": 1,
            "missed": 1,
            "extra": 1,
            "accuracy": 66.7,
            "words_per_minute": 30.0,
            "elapsed_seconds": 12,
        }

    def test_report_contains_summary(self):
        result = compare_texts("The cat sat", "the cat sat", 6)
        assert generate_report(result)["summary"] == build_summary(result)
