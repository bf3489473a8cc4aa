"""
HTTP surface for puzzle storage, completions and grading.

All routes are POST-only. Errors are returned as {"error": message} with the
status code of the matching error type; request validation failures are
reported as 400.
"""

import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models import (
    UpdateQualityRequest,
    PromptRequest,
    WordsRequest,
    WordRequest,
    AnalyzeWordRequest,
    GradePuzzleRequest,
)
from ..config import Settings, build_llm_client
from ..errors import WordGridError, UpstreamError, ValidationError, NotFoundError
from ..grid.models import Grid
from ..grid.session import GridSession
from ..lexicon import Lexicon, load_lexicon, clean_word
from ..scoring import LLMClient, QualityScorer, WordAssistant, to_payload
from ..store import Puzzle, PuzzleStore


logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PuzzleStore] = None,
    lexicon: Optional[Lexicon] = None,
    llm_client: Optional[LLMClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Collaborators not passed in are built from the settings.
    """
    settings = settings or Settings()
    if store is None:
        store = PuzzleStore(settings.puzzles_path)
        store.initialize()
    if lexicon is None:
        lexicon = load_lexicon(settings.lexicon_path)
    if llm_client is None:
        llm_client = build_llm_client(settings)

    scorer = QualityScorer(llm_client=llm_client, store=store, concurrency=settings.scoring.concurrency)
    assistant = WordAssistant(llm_client=llm_client)

    app = FastAPI(title="Word Grid Studio")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )
    app.state.store = store
    app.state.lexicon = lexicon
    app.state.llm_client = llm_client

    @app.exception_handler(WordGridError)
    async def handle_word_grid_error(request: Request, exc: WordGridError) -> JSONResponse:
        if isinstance(exc, UpstreamError):
            return JSONResponse(status_code=exc.status_code, content={"error": exc.body})
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    # Puzzle storage

    @app.post("/api/create-puzzle")
    def create_puzzle(puzzle: Puzzle):
        store.create(puzzle)
        return {"success": True}

    @app.post("/api/save-puzzle")
    def save_puzzle(puzzle: Puzzle):
        store.save(puzzle)
        return {"success": True}

    @app.post("/api/update-puzzle-quality")
    def update_puzzle_quality(body: UpdateQualityRequest):
        store.update_quality(body.title, body.quality)
        return {"success": True}

    @app.post("/api/puzzles")
    def list_puzzles():
        return {"puzzles": store.load_all()}

    # Completion proxy

    async def completion_proxy(body: PromptRequest):
        logger.info("Received prompt (%d chars)", len(body.prompt))
        response = await llm_client.completion(body.prompt)
        return to_payload(response)

    app.post("/api/openai")(completion_proxy)
    app.post("/openai")(completion_proxy)

    # Grid helpers

    @app.post("/api/derive-sentences")
    def derive_sentences(body: WordsRequest):
        session = GridSession.create(body.words, lexicon=lexicon)
        return {
            "vertical": session.sentences.vertical,
            "horizontal": session.sentences.horizontal,
            "wordTypes": [session.word_types[cell] for cell in session.grid.cell_ids()],
        }

    @app.post("/api/word-details")
    async def word_details(body: WordRequest):
        details = lexicon.describe(body.word)
        if not details.word:
            raise ValidationError("No word selected")
        result = details.model_dump()
        if body.synonyms:
            result["synonyms"] = await assistant.synonyms(details.word)
        return result

    @app.post("/api/analyze-word")
    async def analyze_word(body: AnalyzeWordRequest):
        session = GridSession.create(body.words, lexicon=lexicon)
        word = clean_word(session.grid.get(body.row, body.col).strip())
        if not word:
            raise ValidationError("No word in the selected cell")
        analysis = await assistant.analyze(
            word,
            vertical_sentence=session.column_text(body.col),
            horizontal_sentence=session.row_text(body.row),
        )
        return {"word": word, "analysis": analysis}

    # Grading pipeline

    @app.post("/api/grade-puzzle")
    async def grade_puzzle(body: GradePuzzleRequest):
        if body.words is not None:
            grid = Grid.from_words(body.words)
        elif body.title:
            puzzle = await asyncio.to_thread(store.get, body.title)
            if puzzle is None:
                raise NotFoundError("Puzzle not found")
            grid = Grid.from_words(puzzle.words)
        else:
            raise ValidationError("Missing title or words")

        session = GridSession(grid=grid, lexicon=lexicon)
        report = await scorer.grade_puzzle(body.title, session.sentences)
        return report.model_dump()

    return app
