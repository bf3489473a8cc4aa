"""Shared fixtures: a scripted completion client, a word list and a puzzle store."""

import json
from typing import Any, Callable, List, Optional

import pytest
from pydantic import Field

from src.lexicon import Lexicon
from src.scoring import LLMClient
from src.store import PuzzleStore


def completion_payload(content: Optional[str]) -> dict:
    """A completion response in dict form; None gives a response without choices."""
    if content is None:
        return {"id": "chatcmpl-test", "object": "chat.completion", "choices": []}
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-4",
        "choices": [
            {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}}
        ],
    }


class ScriptedLLMClient(LLMClient):
    """
    LLMClient that answers from a script instead of calling a provider.

    Replies are consumed in order, or produced by `responder(prompt)` when
    given. A reply that is an exception is raised.
    """

    api_key: Optional[str] = "test-key"
    replies: List[Any] = Field(default_factory=list)
    responder: Optional[Callable[[str], Any]] = None
    prompts: List[str] = Field(default_factory=list)

    async def completion(self, prompt: str, **kwargs: Any) -> Any:
        self.prompts.append(prompt)
        reply = self.responder(prompt) if self.responder else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return completion_payload(reply)


WORDLIST_CSV = """LEMMA,POS,FREQUENCY,INFLECTIONS
the,fw,1000,
run,v,120,"ran, running, runs"
cat,n,80,cats
quick,j,60,"quicker, quickest"
quickly,r,40,
wow,u,5,
five,m,30,
London,k,25,
etc,abbr,3,
dog,n,90,dogs
sprint,v,20,"sprinted, ran"
fox,zz,10,foxes
"""


@pytest.fixture
def wordlist_path(tmp_path):
    path = tmp_path / "wordlist.csv"
    path.write_text(WORDLIST_CSV, encoding="utf-8")
    return path


@pytest.fixture
def lexicon(wordlist_path):
    return Lexicon.from_csv(wordlist_path)


@pytest.fixture
def puzzles_path(tmp_path):
    path = tmp_path / "word_puzzles.json"
    path.write_text(json.dumps([
        {"title": "Morning", "words": ["The", "cat", "ran."] + [""] * 12, "quality": 72},
        {"title": "Evening", "words": [""] * 15, "author": "sam"},
    ], indent=2), encoding="utf-8")
    return path


@pytest.fixture
def store(puzzles_path):
    return PuzzleStore(puzzles_path)
