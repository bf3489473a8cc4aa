"""Plain-text rendering of a grid and its derived sentences."""

from typing import Dict, List, Optional

from .models import Grid, CellId, DerivedSentences


def render_grid(grid: Grid, word_types: Optional[Dict[CellId, str]] = None) -> str:
    """
    Render the grid as aligned columns.

    Empty cells show as '.'; a cell's word type is appended when given.
    """
    labels: List[List[str]] = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            value = grid.get(r, c).strip() or '.'
            if word_types and word_types.get(CellId(r, c)):
                value = f"{value} {word_types[CellId(r, c)]}"
            row.append(value)
        labels.append(row)

    widths = [max(len(labels[r][c]) for r in range(grid.rows)) for c in range(grid.cols)]
    lines = [
        ' | '.join(label.ljust(width) for label, width in zip(row, widths)).rstrip()
        for row in labels
    ]
    return '\n'.join(lines)


def render_sentences(sentences: DerivedSentences) -> str:
    """Numbered vertical and horizontal sentence lists."""
    lines = ["Vertical:"]
    lines.extend(f"  {i}. {s}" for i, s in enumerate(sentences.vertical, start=1))
    lines.append("Horizontal:")
    lines.extend(f"  {i}. {s}" for i, s in enumerate(sentences.horizontal, start=1))
    return '\n'.join(lines)
