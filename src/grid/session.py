"""
Editing session for a single grid.

Holds the state an editor needs between keystrokes: the grid, the loaded
lexicon, the selected cell and the sentences and word types derived from
the current grid contents.
"""

from typing import Dict, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .models import Grid, CellId, DerivedSentences, GRID_ROWS, GRID_COLS
from .sentences import derive_sentences
from ..lexicon import Lexicon, WordDetails
from ..store.models import Puzzle, PuzzleUpdate


class GridSession(BaseModel):
    """
    Grid plus everything derived from it.

    Every cell mutation recomputes the sentences first and the word-type
    annotations second. Nothing is persisted until a save snapshot is taken
    with `to_puzzle_update`.

    Attributes:
        grid: The grid being edited
        lexicon: Word list used for annotations (empty if none was loaded)
        selected: Cell chosen for the details view, if any
        sentences: Sentences derived from the current grid
        word_types: Part-of-speech annotation per cell
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    grid: Grid = Field(default_factory=Grid.empty)
    lexicon: Lexicon = Field(default_factory=Lexicon)
    selected: Optional[CellId] = None
    sentences: DerivedSentences = Field(default_factory=DerivedSentences)
    word_types: Dict[CellId, str] = Field(default_factory=dict)

    def model_post_init(self, __context) -> None:
        """Derive initial state from the starting grid."""
        self.refresh()

    @classmethod
    def create(
        cls,
        words: Optional[Sequence[Optional[str]]] = None,
        lexicon: Optional[Lexicon] = None,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
    ) -> "GridSession":
        """Start a session from stored words, or from an empty grid."""
        grid = Grid.from_words(words or [], rows=rows, cols=cols)
        return cls(grid=grid, lexicon=lexicon or Lexicon())

    def refresh(self) -> None:
        """Recompute sentences, then word types."""
        self.sentences = derive_sentences(self.grid.snapshot())
        self.word_types = {
            cell: self.lexicon.word_type(self.grid.get(*cell))
            for cell in self.grid.cell_ids()
        }

    def set_cell(self, row: int, col: int, value: str) -> None:
        self.grid.set(row, col, value)
        self.refresh()

    def clear(self) -> None:
        self.grid.clear()
        self.refresh()

    def load_puzzle(self, puzzle: Puzzle) -> None:
        """Replace the grid contents with a stored puzzle's words."""
        self.grid = Grid.from_words(puzzle.words, rows=self.grid.rows, cols=self.grid.cols)
        self.refresh()

    def select(self, row: int, col: int) -> WordDetails:
        """Select a cell and return its details."""
        self.grid.get(row, col)
        self.selected = CellId(row, col)
        return self.selected_details()

    def selected_details(self) -> Optional[WordDetails]:
        if self.selected is None:
            return None
        return self.lexicon.describe(self.grid.get(*self.selected))

    def replace_selected(self, word: str) -> bool:
        """
        Put a word (e.g. a chosen synonym) into the selected cell.

        Returns:
            False if no cell is selected
        """
        if self.selected is None:
            return False
        self.set_cell(self.selected.row, self.selected.col, word)
        return True

    def row_text(self, row: int) -> str:
        """Trimmed values of one row joined by spaces, punctuation intact."""
        return " ".join(self.grid.snapshot()[row])

    def column_text(self, col: int) -> str:
        """Trimmed values of one column joined by spaces, punctuation intact."""
        return " ".join(row[col] for row in self.grid.snapshot())

    def words(self) -> List[str]:
        return self.grid.words()

    def to_puzzle_update(self, title: str, quality: Optional[float] = None) -> PuzzleUpdate:
        """
        Snapshot the grid for a save request.

        The last known quality is carried along when given; otherwise the
        stored quality is left untouched by the merge.
        """
        if quality is None:
            return PuzzleUpdate(title=title, words=self.words())
        return PuzzleUpdate(title=title, words=self.words(), quality=quality)
