"""Data models for the word grid."""

from typing import List, Optional, Sequence, NamedTuple
from pydantic import BaseModel, Field, model_validator


GRID_ROWS = 5
GRID_COLS = 3
GRID_CAPACITY = GRID_ROWS * GRID_COLS

# Token standing in for an empty cell or an empty sentence
PLACEHOLDER = "____"


class CellId(NamedTuple):
    """Stable address of a grid cell."""
    row: int
    col: int


class DerivedSentences(BaseModel):
    """Sentences read off a grid snapshot. Never persisted."""
    vertical: List[str] = Field(default_factory=list)
    horizontal: List[str] = Field(default_factory=list)

    @property
    def all(self) -> List[str]:
        """Vertical sentences followed by horizontal sentences."""
        return [*self.vertical, *self.horizontal]


class Grid(BaseModel):
    """
    Fixed-size matrix of word cells.

    Every cell always holds a string; empty cells hold "". The shape is
    fixed once the grid is built.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        cells: Row-major list of rows, each a list of cell values
    """

    rows: int = Field(default=GRID_ROWS, ge=1)
    cols: int = Field(default=GRID_COLS, ge=1)
    cells: List[List[str]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fill_cells(self) -> "Grid":
        if not self.cells:
            self.cells = [["" for _ in range(self.cols)] for _ in range(self.rows)]
        if len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise ValueError(f"Grid cells must be {self.rows}x{self.cols}")
        return self

    @classmethod
    def empty(cls, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> "Grid":
        """Create a grid with every cell empty."""
        return cls(rows=rows, cols=cols)

    @classmethod
    def from_words(
        cls,
        words: Sequence[Optional[str]],
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
    ) -> "Grid":
        """
        Build a grid from a row-major word list.

        Positions past the end of `words`, or holding None, become "".
        """
        cells = []
        for r in range(rows):
            row = []
            for c in range(cols):
                idx = r * cols + c
                word = words[idx] if idx < len(words) else ""
                row.append(word or "")
            cells.append(row)
        return cls(rows=rows, cols=cols, cells=cells)

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid")

    def get(self, row: int, col: int) -> str:
        self._check(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, value: Optional[str]) -> None:
        self._check(row, col)
        self.cells[row][col] = value or ""

    def clear(self) -> None:
        self.cells = [["" for _ in range(self.cols)] for _ in range(self.rows)]

    def cell_ids(self) -> List[CellId]:
        """All cell addresses in row-major order."""
        return [CellId(r, c) for r in range(self.rows) for c in range(self.cols)]

    def snapshot(self) -> List[List[str]]:
        """Trimmed copy of the cell values, one list per row."""
        return [[value.strip() for value in row] for row in self.cells]

    def words(self) -> List[str]:
        """Trimmed cell values in row-major order (length == capacity)."""
        return [value for row in self.snapshot() for value in row]
