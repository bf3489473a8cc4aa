"""Sentence grading and word assistance via an external completion model."""

from .models import Message, Role, Band, GradeResult, GradingReport
from .llm_client import LLMClient, extract_content, to_payload
from .parsing import parse_grade, aggregate_quality, js_round, grade_band, format_grade, format_puzzle_label
from .scorer import QualityScorer
from .assistant import WordAssistant

__all__ = [
    # Models
    "Message",
    "Role",
    "Band",
    "GradeResult",
    "GradingReport",
    # Client
    "LLMClient",
    "extract_content",
    "to_payload",
    # Parsing and aggregation
    "parse_grade",
    "aggregate_quality",
    "js_round",
    "grade_band",
    "format_grade",
    "format_puzzle_label",
    # Pipeline
    "QualityScorer",
    "WordAssistant",
]
