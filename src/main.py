"""
Main entry point for Word Grid Studio.

Usage:
    python -m src.main serve --config config.yaml
    python -m src.main derive "Hello." World Foo! Bar
    python -m src.main derive --title "Autumn"
    python -m src.main lookup running
    python -m src.main create "Autumn"
    python -m src.main grade "Autumn" --verbose
"""

import argparse
import asyncio
import logging
import sys

from .config import Settings, load_settings, build_llm_client
from .errors import WordGridError, NotFoundError, ValidationError
from .grid import render_grid, render_sentences
from .grid.session import GridSession
from .lexicon import load_lexicon
from .scoring import QualityScorer, grade_band, format_grade, format_puzzle_label
from .store import Puzzle, PuzzleStore


logger = logging.getLogger("wordgrid")


def _open_store(settings: Settings) -> PuzzleStore:
    store = PuzzleStore(settings.puzzles_path)
    store.initialize()
    return store


def cmd_serve(settings: Settings, args: argparse.Namespace) -> int:
    import uvicorn
    from .api import create_app

    app = create_app(settings)
    logger.info("Server running on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


def cmd_list(settings: Settings, args: argparse.Namespace) -> int:
    for i, puzzle in enumerate(_open_store(settings).load_all()):
        print(format_puzzle_label(i, puzzle))
    return 0


def cmd_create(settings: Settings, args: argparse.Namespace) -> int:
    _open_store(settings).create(Puzzle.blank(args.title))
    print(f"Puzzle created: {args.title}")
    return 0


def _session_for(settings: Settings, args: argparse.Namespace) -> GridSession:
    lexicon = load_lexicon(settings.lexicon_path)
    if args.title:
        puzzle = _open_store(settings).get(args.title)
        if puzzle is None:
            raise NotFoundError(f"Puzzle not found: {args.title}")
        return GridSession.create(puzzle.words, lexicon=lexicon)

    session = GridSession.create(args.words, lexicon=lexicon)
    if len(args.words) > session.grid.capacity:
        raise ValidationError(f"At most {session.grid.capacity} words fit the grid, got {len(args.words)}")
    return session


def cmd_derive(settings: Settings, args: argparse.Namespace) -> int:
    session = _session_for(settings, args)
    print(render_grid(session.grid, session.word_types))
    print()
    print(render_sentences(session.sentences))
    return 0


def cmd_lookup(settings: Settings, args: argparse.Namespace) -> int:
    details = load_lexicon(settings.lexicon_path).describe(args.word)
    print(details.word)
    print(f"  Part of Speech: {details.part_of_speech}")
    print(f"  Frequency: {details.frequency}")
    print(f"  Inflections: {details.inflections}")
    return 0


def cmd_grade(settings: Settings, args: argparse.Namespace) -> int:
    store = _open_store(settings)
    puzzle = store.get(args.title)
    if puzzle is None:
        raise NotFoundError(f"Puzzle not found: {args.title}")

    session = GridSession.create(puzzle.words)
    scorer = QualityScorer(
        llm_client=build_llm_client(settings),
        store=None if args.dry_run else store,
        concurrency=settings.scoring.concurrency,
    )
    report = asyncio.run(scorer.grade_puzzle(args.title, session.sentences))

    for heading, results in (("Vertical", report.vertical), ("Horizontal", report.horizontal)):
        print(f"{heading}:")
        for i, result in enumerate(results, start=1):
            note = f" [{result.error}]" if args.verbose and result.error else ""
            print(f"  {i}. {result.sentence} ({format_grade(result.value)}, {grade_band(result.value)}){note}")

    print()
    print("=== Grading Summary ===")
    print(f"Puzzle: {args.title}")
    if report.quality is not None:
        print(f"Quality: {format_grade(report.quality)} ({grade_band(report.quality)})")
    if args.dry_run:
        print("Dry run: quality not saved")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build, inspect and grade word-grid puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  puzzles_path: public/word_puzzles.json
  lexicon_path: public/wordlist.csv
  llm:
    model: gpt-4
    temperature: 0.7
    max_tokens: 300
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging and show grading errors"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.set_defaults(func=cmd_serve)

    listing = sub.add_parser("list", help="List stored puzzles with their quality")
    listing.set_defaults(func=cmd_list)

    create = sub.add_parser("create", help="Create an empty puzzle")
    create.add_argument("title")
    create.set_defaults(func=cmd_create)

    derive = sub.add_parser("derive", help="Show the sentences formed by a grid")
    derive.add_argument("words", nargs="*", help="Row-major cell values (missing cells are empty)")
    derive.add_argument("--title", help="Use the words of a stored puzzle")
    derive.set_defaults(func=cmd_derive)

    lookup = sub.add_parser("lookup", help="Look a word up in the word list")
    lookup.add_argument("word")
    lookup.set_defaults(func=cmd_lookup)

    grade = sub.add_parser("grade", help="Grade a stored puzzle and save its quality")
    grade.add_argument("title")
    grade.add_argument("--dry-run", action="store_true", help="Do not save the quality")
    grade.set_defaults(func=cmd_grade)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(settings, args)
    except WordGridError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
