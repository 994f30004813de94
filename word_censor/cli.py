#!/usr/bin/env python3
"""
Word Censor CLI Entry Point

Usage:
    word-censor check "some text"       # exit status 1 if profane
    word-censor clean "some text"       # print redacted text
    word-censor list                    # print the effective blacklist

Text is read from stdin when no TEXT arguments are given.

Example:
    echo "you are a jerk" | word-censor clean
    word-censor --config censor.yaml check --all "some text"
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config import Config
from .error_handler import UserFriendlyError, get_friendly_message, safe_operation
from .logging_config import setup_logging
from .profanity import ProfanityFilter

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_PROFANE = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="word-censor",
        description="Detect and redact profanity in text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  word-censor check "hello world"
  word-censor clean --placeholder "#" "you are a jerk"
  word-censor clean --exclude jerk "you are a jerk"
  word-censor --config censor.yaml list
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides config file)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every classification decision"
    )

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--empty-list",
        action="store_true",
        help="Start with an empty blacklist"
    )
    common.add_argument(
        "--add", "-a",
        action="append",
        default=[],
        metavar="WORD",
        help="Add a word to the blacklist (repeatable)"
    )
    common.add_argument(
        "--exclude", "-x",
        action="append",
        default=[],
        metavar="WORD",
        help="Never treat this word as profane (repeatable)"
    )
    common.add_argument(
        "--wordlist", "-w",
        default=None,
        metavar="FILE",
        help="Extra blacklist words, one per line"
    )
    common.add_argument(
        "--placeholder", "-p",
        default=None,
        help="Character used to redact profane words (default: *)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser(
        "check", parents=[common], help="Report whether text contains profanity"
    )
    check.add_argument(
        "--all",
        action="store_true",
        help="List every profane word instead of the first one"
    )
    check.add_argument("text", nargs="*", help="Text to check (default: stdin)")

    clean = subparsers.add_parser(
        "clean", parents=[common], help="Print text with profane words redacted"
    )
    clean.add_argument("text", nargs="*", help="Text to clean (default: stdin)")

    subparsers.add_parser("list", parents=[common], help="Print the effective blacklist")

    return parser.parse_args(argv)


@safe_operation("loading configuration")
def load_config(args: argparse.Namespace) -> Config:
    """Load the config file and apply command line overrides."""
    config = Config.load(args.config)

    if args.empty_list:
        config.lists.empty_list = True
    if args.add:
        config.lists.add_words = list(config.lists.add_words or []) + args.add
    if args.exclude:
        config.lists.exclude = list(config.lists.exclude or []) + args.exclude
    if args.wordlist:
        config.lists.custom_wordlist_path = args.wordlist
    if args.placeholder is not None:
        config.filter = replace(config.filter, placeholder=args.placeholder)
    if args.log_level:
        config.logging.level = args.log_level

    return config


@safe_operation("setting up logging")
def start_logging(config: Config, debug: bool) -> None:
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.log_file or None,
        debug_mode=debug,
    )


@safe_operation("building filter")
def build_filter(config: Config) -> ProfanityFilter:
    return ProfanityFilter.from_config(config)


def _read_text(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def run(args: argparse.Namespace) -> int:
    config = load_config(args)

    start_logging(config, args.debug)

    profanity_filter = build_filter(config)
    logger.debug(f"Filter ready: {profanity_filter.lexicon}")

    if args.command == "list":
        for word in profanity_filter.words:
            print(word)
        return EXIT_CLEAN

    text = _read_text(args)

    if args.command == "check":
        if args.all:
            matches = profanity_filter.find_profane_words(text)
            for word in matches:
                print(word)
            return EXIT_PROFANE if matches else EXIT_CLEAN

        match = profanity_filter.is_profane(text)
        if match:
            print(match)
            return EXIT_PROFANE
        return EXIT_CLEAN

    # clean
    cleaned = profanity_filter.clean(text)
    if args.text:
        print(cleaned)
    else:
        sys.stdout.write(cleaned)
    return EXIT_CLEAN


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the word-censor command."""
    args = parse_args(argv)

    try:
        return run(args)
    except UserFriendlyError as e:
        title, message = get_friendly_message(e.__cause__ or e)
        print(f"{title}: {message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
