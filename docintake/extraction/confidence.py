"""Text-length confidence heuristic. Not a statistical estimate."""

# (exclusive lower bound on text length, score), checked top to bottom
CONFIDENCE_STEPS: tuple[tuple[int, float], ...] = (
    (100, 0.95),
    (50, 0.85),
    (20, 0.70),
)
MIN_CONFIDENCE = 0.50


def score_confidence(text: str | None) -> float:
    length = len(text or "")
    for threshold, score in CONFIDENCE_STEPS:
        if length > threshold:
            return score
    return MIN_CONFIDENCE
