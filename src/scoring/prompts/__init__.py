"""Prompt templates for grading and word assistance."""

from .system_prompt import SYSTEM_PROMPT
from .grading_prompt import GRADING_RUBRIC, build_grading_prompt
from .word_prompts import build_synonyms_prompt, build_analysis_prompt

__all__ = [
    "SYSTEM_PROMPT",
    "GRADING_RUBRIC",
    "build_grading_prompt",
    "build_synonyms_prompt",
    "build_analysis_prompt",
]
