"""
Quality scoring pipeline.

Each derived sentence is sent to the grading model as its own request. By
default the requests run one at a time in order: the vertical sentences
first, then the horizontal ones. A concurrency above 1 sends up to that many
requests at once. Results keep the input order either way, and the
aggregate is a plain mean, so completion order does not affect it.
"""

import asyncio
import logging
from typing import List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .llm_client import LLMClient
from .models import GradeResult, GradingReport
from .parsing import parse_grade, aggregate_quality
from .prompts import build_grading_prompt
from ..errors import ParseError
from ..grid.models import DerivedSentences
from ..store import PuzzleStore


logger = logging.getLogger(__name__)


class QualityScorer(BaseModel):
    """
    Grades sentences and persists the aggregate quality of a puzzle.

    Attributes:
        llm_client: Client used for grading requests
        store: Puzzle collection receiving the aggregate (optional)
        concurrency: Maximum grading requests in flight at once
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient
    store: Optional[PuzzleStore] = None
    concurrency: int = Field(default=1, ge=1)

    async def grade_sentence(self, sentence: str) -> GradeResult:
        """
        Grade a single sentence.

        An unreadable grade is recorded on the result rather than raised.

        Raises:
            UpstreamError: If the grading request itself fails
        """
        text = await self.llm_client.complete_text(build_grading_prompt(sentence))
        try:
            score = parse_grade(text)
        except ParseError as e:
            logger.warning("Could not read grade for %r: %s", sentence, e.message)
            return GradeResult(sentence=sentence, error=e.message, raw_response=text)
        return GradeResult(sentence=sentence, score=score, raw_response=text)

    async def grade_all(self, sentences: Sequence[str]) -> List[GradeResult]:
        """Grade sentences, returning results in input order."""
        if self.concurrency == 1:
            results = []
            for sentence in sentences:
                results.append(await self.grade_sentence(sentence))
            return results

        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded(sentence: str) -> GradeResult:
            async with semaphore:
                return await self.grade_sentence(sentence)

        return list(await asyncio.gather(*(bounded(s) for s in sentences)))

    async def score_all(self, sentences: Sequence[str]) -> int:
        """Grade sentences and return their rounded mean (0 when empty)."""
        results = await self.grade_all(sentences)
        quality = aggregate_quality(results)
        return quality if quality is not None else 0

    async def grade_puzzle(self, title: Optional[str], sentences: DerivedSentences) -> GradingReport:
        """
        Grade every sentence of a puzzle and store the aggregate quality.

        Vertical and horizontal sentences are weighted equally in the mean.
        The quality is written under `title` when a store and title are
        available.

        Raises:
            UpstreamError: If a grading request fails; later sentences are not graded
            NotFoundError: If the store has no puzzle with this title
            StorageError: If the store cannot be updated
        """
        logger.info(
            "Grading %d vertical and %d horizontal sentences for '%s'",
            len(sentences.vertical), len(sentences.horizontal), title,
        )
        vertical = await self.grade_all(sentences.vertical)
        horizontal = await self.grade_all(sentences.horizontal)

        report = GradingReport(title=title, vertical=vertical, horizontal=horizontal)
        report.quality = aggregate_quality(report.results)

        if report.quality is not None and title and self.store is not None:
            await asyncio.to_thread(self.store.update_quality, title, report.quality)

        logger.info("Puzzle '%s' quality: %s", title, report.quality)
        return report
