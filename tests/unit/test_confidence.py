import pytest

from docintake.extraction.confidence import score_confidence


class TestScoreConfidence:
    @pytest.mark.parametrize(
        ("length", "expected"),
        [
            (0, 0.50),
            (20, 0.50),
            (21, 0.70),
            (30, 0.70),
            (50, 0.70),
            (51, 0.85),
            (60, 0.85),
            (100, 0.85),
            (101, 0.95),
            (150, 0.95),
            (5000, 0.95),
        ],
    )
    def test_step_function_of_length(self, length: int, expected: float) -> None:
        assert score_confidence("x" * length) == expected

    def test_none_scores_minimum(self) -> None:
        assert score_confidence(None) == 0.50
