"""Puzzle records as stored in the shared collection."""

from typing import Annotated, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator

from ..grid.models import GRID_CAPACITY


# 0-100; booleans and numeric strings are rejected
Quality = Union[
    Annotated[StrictInt, Field(ge=0, le=100)],
    Annotated[StrictFloat, Field(ge=0, le=100)],
]


class PuzzleUpdate(BaseModel):
    """
    Partial puzzle used for field-merge saves.

    Only fields that were explicitly provided are merged onto the stored
    record; extra fields are carried through as-is.
    """
    model_config = ConfigDict(extra='allow')

    title: str = Field(..., min_length=1)
    words: Optional[List[str]] = None
    quality: Optional[Quality] = None

    @field_validator('words')
    @classmethod
    def _check_capacity(cls, words: Optional[List[str]]) -> Optional[List[str]]:
        if words is not None and len(words) != GRID_CAPACITY:
            raise ValueError(f"words must hold exactly {GRID_CAPACITY} entries, got {len(words)}")
        return words

    def changes(self) -> dict:
        """Fields to merge onto the stored record."""
        return self.model_dump(exclude_unset=True)


class Puzzle(PuzzleUpdate):
    """A complete puzzle: title, row-major words and optional quality."""
    words: List[str]

    @classmethod
    def blank(cls, title: str) -> "Puzzle":
        """A new puzzle with every cell empty."""
        return cls(title=title, words=[""] * GRID_CAPACITY)
