"""Word grid model and sentence derivation."""

from .models import Grid, CellId, DerivedSentences, GRID_ROWS, GRID_COLS, GRID_CAPACITY, PLACEHOLDER
from .sentences import derive_vertical, derive_horizontal, derive_sentences, split_into_sentences
from .render import render_grid, render_sentences

__all__ = [
    # Models
    "Grid",
    "CellId",
    "DerivedSentences",
    "GRID_ROWS",
    "GRID_COLS",
    "GRID_CAPACITY",
    "PLACEHOLDER",
    # Derivation
    "derive_vertical",
    "derive_horizontal",
    "derive_sentences",
    "split_into_sentences",
    # Rendering
    "render_grid",
    "render_sentences",
]
