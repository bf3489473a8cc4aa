"""Request bodies for the HTTP surface."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..grid.models import GRID_ROWS, GRID_COLS
from ..store.models import Quality


class UpdateQualityRequest(BaseModel):
    title: str = Field(..., min_length=1)
    quality: Quality


class PromptRequest(BaseModel):
    prompt: str = Field(..., min_length=1)


class WordsRequest(BaseModel):
    words: List[str] = Field(default_factory=list)


class WordRequest(BaseModel):
    word: str = Field(..., min_length=1)
    synonyms: bool = True


class AnalyzeWordRequest(BaseModel):
    words: List[str]
    row: int = Field(..., ge=0, lt=GRID_ROWS)
    col: int = Field(..., ge=0, lt=GRID_COLS)


class GradePuzzleRequest(BaseModel):
    """Grade a stored puzzle, or the given words saved under `title`."""
    title: Optional[str] = None
    words: Optional[List[str]] = None
