#!/usr/bin/env python3
"""
SimpleSpell command line interface.

Usage:
    simplespell --corpus big.txt check "I saw teh fox"
    simplespell --corpus big.txt correct < draft.txt
    simplespell --config simplespell.yaml suggest teh speling
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from simplespell.config import SpellCheckConfig
from simplespell.exceptions import ConfigurationError, CorpusLoadError
from simplespell.speller import Speller

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplespell",
        description="Frequency-based spell checking and auto-correction",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--corpus", type=Path, help="Corpus file (overrides config corpus_path)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="List unknown words and suggestions as JSON")
    check_parser.add_argument("text", nargs="?", help="Text to check (default: stdin)")

    correct_parser = subparsers.add_parser("correct", help="Print auto-corrected text")
    correct_parser.add_argument("text", nargs="?", help="Text to correct (default: stdin)")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest alternatives for words")
    suggest_parser.add_argument("words", nargs="+", help="Words to look up")

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_text(arg: str | None) -> str:
    return arg if arg is not None else sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = SpellCheckConfig.from_yaml(args.config) if args.config else SpellCheckConfig()
        if args.corpus is not None:
            config.corpus_path = args.corpus
        if config.corpus_path is None:
            parser.error("a corpus is required: pass --corpus or set corpus_path in --config")

        speller = Speller.from_config(config)
    except (ConfigurationError, CorpusLoadError) as e:
        print(f"simplespell: {e}", file=sys.stderr)
        return 1

    if args.command == "check":
        items = speller.check(_read_text(args.text))
        print(json.dumps([item.to_dict() for item in items], indent=2))
    elif args.command == "correct":
        result = speller.auto_correct_with_report(_read_text(args.text))
        logger.info("Made %d correction(s)", result.corrections_made)
        sys.stdout.write(result.corrected_text)
        if not result.corrected_text.endswith("\n"):
            sys.stdout.write("\n")
    elif args.command == "suggest":
        for word in args.words:
            print(f"{word}: {', '.join(speller.suggest_alternatives(word))}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
