"""Grade parsing and aggregation."""

import math
import re
from typing import Iterable, Optional

from .models import Band, GradeResult
from ..errors import ParseError


MIN_GRADE = 0.0
MAX_GRADE = 100.0

# Quality bands for presentation
RED_BELOW = 60
ORANGE_BELOW = 80

# A whole response that is just a decimal number, optionally signed or in exponent form
_PLAIN_NUMBER = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
_EMBEDDED_NUMBER = re.compile(r'(\d+(\.\d+)?)')


def parse_grade(text: Optional[str]) -> float:
    """
    Read a numeric grade from a grading response.

    Tries the whole trimmed text as a number first, then the first number
    embedded in it. The result is clamped to 0-100.

    Raises:
        ParseError: If the text holds no usable number
    """
    if text is None:
        raise ParseError("No grading response")

    text = text.strip()
    grade = float(text) if _PLAIN_NUMBER.fullmatch(text) else math.nan
    if not math.isfinite(grade):
        match = _EMBEDDED_NUMBER.search(text)
        if not match:
            raise ParseError(f"No numeric grade in response: {text!r}")
        grade = float(match.group(1))

    return min(max(grade, MIN_GRADE), MAX_GRADE)


def js_round(value: float) -> int:
    """Round half up, matching JavaScript's Math.round."""
    return math.floor(value + 0.5)


def aggregate_quality(results: Iterable[GradeResult]) -> Optional[int]:
    """
    Average all sentence grades into one quality score.

    Every sentence counts equally; unreadable grades count as 0.

    Returns:
        The rounded mean, or None when there is nothing to average
    """
    values = [r.value for r in results]
    if not values:
        return None
    return js_round(sum(values) / len(values))


def grade_band(score: float) -> Band:
    """Presentation band for a score: red below 60, orange below 80, else green."""
    if score < RED_BELOW:
        return "red"
    if score < ORANGE_BELOW:
        return "orange"
    return "green"


def format_grade(score: float) -> str:
    return f"{score:g}%"


def format_puzzle_label(index: int, puzzle: dict) -> str:
    """
    Label for a puzzle in a listing, e.g. "#2 - Autumn (85%)".

    The quality suffix appears only when the puzzle has a numeric quality.
    """
    label = f"#{index + 1} - {puzzle.get('title', '')}"
    quality = puzzle.get("quality")
    if isinstance(quality, (int, float)) and not isinstance(quality, bool):
        label += f" ({format_grade(quality)})"
    return label
