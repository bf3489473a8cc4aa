"""
Pydantic models for the scoring layer.

Grades are kept as explicit results: a sentence whose grade could not be
read carries an error instead of a score, and only collapses to zero when
the grades are aggregated.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field


# Type aliases
Role = Literal["system", "user", "assistant"]
Band = Literal["red", "orange", "green"]


class Message(BaseModel):
    """A single chat message."""
    role: Role
    content: str


class GradeResult(BaseModel):
    """Grade for one sentence."""
    sentence: str
    score: Optional[float] = None
    error: Optional[str] = None  # Why no score could be read
    raw_response: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.score is not None

    @property
    def value(self) -> float:
        """Score used for aggregation; unreadable grades count as 0."""
        return self.score if self.score is not None else 0.0


class GradingReport(BaseModel):
    """Outcome of grading every sentence of a puzzle."""
    title: Optional[str] = None
    vertical: List[GradeResult] = Field(default_factory=list)
    horizontal: List[GradeResult] = Field(default_factory=list)
    quality: Optional[int] = None

    @property
    def results(self) -> List[GradeResult]:
        return [*self.vertical, *self.horizontal]
