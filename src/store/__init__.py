"""Shared puzzle collection."""

from .models import Puzzle, PuzzleUpdate
from .puzzle_store import PuzzleStore

__all__ = [
    "Puzzle",
    "PuzzleUpdate",
    "PuzzleStore",
]
