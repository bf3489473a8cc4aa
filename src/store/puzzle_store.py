"""
Puzzle collection stored as a single JSON file.

Every mutation is a full read-modify-write of the whole collection. Stores
opened on the same resolved path share one lock, so two requests handled by
the same process cannot lose each other's update. Writers in separate
processes are not coordinated and can still overwrite each other.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError

from .models import Puzzle, PuzzleUpdate
from ..errors import ConflictError, NotFoundError, StorageError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# One lock per resolved collection path
_path_locks: Dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _path_locks_guard:
        return _path_locks.setdefault(path.resolve(), threading.Lock())


def _find_index(puzzles: List[Dict[str, Any]], title: str) -> int:
    for i, puzzle in enumerate(puzzles):
        if puzzle.get("title") == title:
            return i
    return -1


class PuzzleStore:
    """
    Read-modify-write client for the shared puzzle collection.

    Attributes:
        path: Location of the JSON collection file
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def initialize(self) -> None:
        """Create an empty collection if the file does not exist yet."""
        with self._lock:
            if not self.path.exists():
                self._write([])
                logger.info("Created empty puzzle collection at %s", self.path)

    def _read(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageError(f"Failed to read {self.path.name}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Invalid JSON in {self.path.name}") from e

        if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
            raise StorageError(f"Invalid JSON in {self.path.name}: expected a list of puzzles")
        return data

    def _write(self, puzzles: List[Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(puzzles, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {self.path.name}") from e

    def _modify(self, change: Callable[[List[Dict[str, Any]]], T]) -> T:
        """Run one locked read-modify-write cycle over the collection."""
        with self._lock:
            puzzles = self._read()
            result = change(puzzles)
            self._write(puzzles)
            return result

    def load_all(self) -> List[Dict[str, Any]]:
        """Return every stored puzzle record in file order."""
        with self._lock:
            return self._read()

    def titles(self) -> List[str]:
        return [p.get("title", "") for p in self.load_all()]

    def get(self, title: str) -> Optional[Puzzle]:
        """Find a puzzle by title, or None if there is no such puzzle."""
        puzzles = self.load_all()
        idx = _find_index(puzzles, title)
        if idx == -1:
            return None
        try:
            return Puzzle.model_validate(puzzles[idx])
        except PydanticValidationError as e:
            raise StorageError(f"Stored puzzle '{title}' is malformed: {e.error_count()} error(s)") from e

    def create(self, puzzle: Puzzle) -> None:
        """
        Append a new puzzle.

        Raises:
            ConflictError: If a puzzle with the same title exists
            StorageError: If the collection cannot be read or written
        """
        def change(puzzles: List[Dict[str, Any]]) -> None:
            if _find_index(puzzles, puzzle.title) != -1:
                raise ConflictError("Puzzle with this title already exists")
            puzzles.append(puzzle.changes())

        self._modify(change)
        logger.info("Created puzzle '%s'", puzzle.title)

    def save(self, puzzle: PuzzleUpdate) -> None:
        """
        Merge the provided fields onto an existing puzzle.

        Fields the caller did not set are left as stored.

        Raises:
            NotFoundError: If no puzzle has this title
            StorageError: If the collection cannot be read or written
        """
        def change(puzzles: List[Dict[str, Any]]) -> None:
            idx = _find_index(puzzles, puzzle.title)
            if idx == -1:
                raise NotFoundError("Puzzle not found")
            puzzles[idx] = {**puzzles[idx], **puzzle.changes()}

        self._modify(change)
        logger.info("Saved puzzle '%s'", puzzle.title)

    def update_quality(self, title: str, quality: float) -> None:
        """
        Set only the quality field of an existing puzzle.

        Raises:
            NotFoundError: If no puzzle has this title
            StorageError: If the collection cannot be read or written
        """
        def change(puzzles: List[Dict[str, Any]]) -> None:
            idx = _find_index(puzzles, title)
            if idx == -1:
                raise NotFoundError("Puzzle not found")
            puzzles[idx]["quality"] = quality

        self._modify(change)
        logger.info("Updated quality of '%s' to %s", title, quality)
