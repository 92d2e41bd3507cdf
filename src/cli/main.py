"""Command line lookup entry point.

Usage:
    PYTHONPATH=src python -m cli.main "食べました"
    PYTHONPATH=src python -m cli.main "안녕하세요" --language-mode mixed --json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from domain.model.config import LANGUAGE_MODES
from domain.model.entry import LookupResponse
from domain.model.errors import DomainError
from port.dictionary_api import DictionaryApiError
from services.lookup_service import TermLookupService
from utils.config import load_lookup_config
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up terms in the Sottaku dictionary")
    parser.add_argument("text", help="Text to scan")
    parser.add_argument("--language-mode", choices=LANGUAGE_MODES, help="Override SOTTAKU_LANGUAGE_MODE")
    parser.add_argument("--max-results", type=int, help="Override SOTTAKU_MAX_RESULTS")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def format_response(response: LookupResponse) -> str:
    lines = [f"matched length: {response.original_text_length}"]
    for entry in response.dictionary_entries:
        metadata = entry.metadata
        saved = " [saved]" if metadata.in_flashcards else ""
        lines.append(f"{metadata.language_flag} {entry.term} ({entry.reading}){saved}")
        for gloss in entry.glossary:
            lines.append(f"    {gloss}")
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> LookupResponse:
    config = load_lookup_config()
    overrides = {}
    if args.language_mode:
        overrides["language_mode"] = args.language_mode
    if args.max_results:
        overrides["max_results"] = args.max_results
    if overrides:
        config = config.with_updates(**overrides)

    service = TermLookupService()
    service.configure(config)
    return await service.find_terms(args.text)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_structured_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        response = asyncio.run(run(args))
    except (DomainError, DictionaryApiError) as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({
            "original_text_length": response.original_text_length,
            "entries": [entry.to_dict() for entry in response.dictionary_entries],
        }, ensure_ascii=False, indent=2))
    else:
        print(format_response(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
