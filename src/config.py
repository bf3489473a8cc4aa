"""
Service configuration.

Settings come from an optional YAML file, then environment variables (a
.env file in the working directory is loaded first). Environment values win.

Example config.yaml:
  puzzles_path: public/word_puzzles.json
  lexicon_path: public/wordlist.csv
  port: 3000
  cors_origins:
    - http://localhost:8000
  llm:
    model: gpt-4
    temperature: 0.7
    max_tokens: 300
  scoring:
    concurrency: 1
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .scoring.llm_client import LLMClient
from .scoring.prompts import SYSTEM_PROMPT


class LLMConfig(BaseModel):
    """Completion model settings."""
    model_config = ConfigDict(extra='allow')

    model: str = "gpt-4"
    temperature: float = 0.7
    max_tokens: Optional[int] = 300
    system_prompt: str = SYSTEM_PROMPT
    api_key: Optional[str] = None
    # Additional kwargs are allowed and passed to LiteLLM


class ScoringConfig(BaseModel):
    """Grading pipeline settings."""
    concurrency: int = Field(default=1, ge=1)


class Settings(BaseModel):
    """Top-level service settings."""
    puzzles_path: Path = Path("public/word_puzzles.json")
    lexicon_path: Optional[Path] = Path("public/wordlist.csv")
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:8000"])
    log_level: str = "INFO"
    llm: LLMConfig = Field(default_factory=LLMConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)


# Environment variable -> dotted settings path
ENV_OVERRIDES = {
    "OPENAI_API_KEY": "llm.api_key",
    "PORT": "port",
    "WORDGRID_PUZZLES_PATH": "puzzles_path",
    "WORDGRID_LEXICON_PATH": "lexicon_path",
    "WORDGRID_LOG_LEVEL": "log_level",
}


def _apply_env(data: dict) -> dict:
    for env_name, dotted in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        target = data
        *parents, leaf = dotted.split(".")
        for key in parents:
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
        target[leaf] = value
    return data


def load_settings(config_path: Optional[str] = None, use_env: bool = True) -> Settings:
    """
    Load settings from a YAML file and the environment.

    Args:
        config_path: Optional path to a YAML configuration file
        use_env: Whether to read .env and environment overrides

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    data: dict = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    if use_env:
        load_dotenv(find_dotenv(usecwd=True))
        data = _apply_env(data)

    return Settings(**data)


def build_llm_client(settings: Settings) -> LLMClient:
    """Create the completion client described by the settings."""
    return LLMClient(**settings.llm.model_dump())
