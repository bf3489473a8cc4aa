"""Word-level helpers backed by the completion model."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from .llm_client import LLMClient
from .prompts import build_synonyms_prompt, build_analysis_prompt


class WordAssistant(BaseModel):
    """Synonyms, word analysis and free-form questions."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient

    async def synonyms(self, word: str) -> List[str]:
        """Synonyms for a word; empty when the model returns nothing."""
        text = await self.llm_client.complete_text(build_synonyms_prompt(word))
        if not text:
            return []
        return [s.strip() for s in text.split(",") if s.strip()]

    async def analyze(self, word: str, vertical_sentence: str, horizontal_sentence: str) -> Optional[str]:
        """Commentary on a word in its column and row, with alternatives."""
        prompt = build_analysis_prompt(word, vertical_sentence, horizontal_sentence)
        return await self.llm_client.complete_text(prompt)

    async def ask(self, question: str) -> Optional[str]:
        question = question.strip()
        if not question:
            return None
        return await self.llm_client.complete_text(question)
