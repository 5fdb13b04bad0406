#!/usr/bin/env python3
"""
commit-ai command-line interface

Usage:
    cai [options]                 generate a commit message for local changes
    cai review <source> <target>  review the changes of <target> since <source>

Options:
    -d, --debug     Output debug information
    -s, --stage     Stage all changes before generating
    -c, --commit    Commit with the generated message
    -f, --force     Commit even if review issues are found
    --setup         Configure the OpenAI API key
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from commit_ai import __version__
from commit_ai.code_review import review_code
from commit_ai.commit_generator import generate_commit_message
from commit_ai.config import ConfigStore, Settings
from commit_ai.console import log
from commit_ai.logging_setup import configure_logging
from commit_ai.setup_wizard import run_setup
from commit_ai.utils.constants import SETUP_COMMAND
from commit_ai.utils.diff_utils import commit, open_repository
from commit_ai.utils.display import show_setup_hint


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cai",
        description="AI-powered git commit message generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--debug", action="store_true", help="output debug information")
    parser.add_argument("-s", "--stage", action="store_true", help="stage all changes")
    parser.add_argument(
        "-c", "--commit",
        action="store_true",
        help="automatically commit with generated message",
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="commit even if review issues are found",
    )
    parser.add_argument(
        "--setup",
        action="store_true",
        help="run the setup process to configure API key",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(title="commands")
    review = subparsers.add_parser("review", aliases=["r"], help="review changes between two branches")
    review.add_argument("source", help="source branch")
    review.add_argument("target", help="target branch")
    review.set_defaults(handler=run_review)

    return parser


def run_generate(settings: Settings, args: argparse.Namespace) -> int:
    try:
        repo = open_repository()
        result = generate_commit_message(settings, stage=args.stage, debug=args.debug, repo=repo)

        if result.has_sensitive_info and args.commit:
            log.error("\n❌ Automatic commit blocked due to sensitive information.\n")
            return 1

        if result.has_review_issues and args.commit and not args.force:
            log.warning("\n⚠️ Code review found potential issues.")
            log.warning("Use --force flag to commit anyway, or review the issues above and make changes.\n")
            return 1

        log.success("\n📝 Suggested commit message:")
        log.cyan(result.message)

        if args.commit:
            commit(repo, result.message)
            log.success("\n✅ Changes committed successfully!\n")
        else:
            log.info("\nTo use this message, run:")
            log.cyan(f'git commit -m "{result.message}"\n')
        return 0

    except Exception as e:
        logger.opt(exception=e).debug("Commit message generation failed")
        log.error(f"\n❌ Error: {e}")
        show_setup_hint(str(e))
        return 1


def run_review(settings: Settings, args: argparse.Namespace) -> int:
    try:
        review_code(settings, args.source, args.target)
    except Exception as e:
        # review_code already reported the failure
        logger.opt(exception=e).debug("Code review failed")
        return 1
    return 0


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        store = ConfigStore()
        if args.setup:
            return run_setup(store)

        try:
            settings = Settings.load(store)
        except ValidationError as e:
            log.error(f"\n❌ Invalid configuration: {e}")
            log.warning(f"Fix the COMMIT_AI_* environment variables or run: {SETUP_COMMAND}")
            return 1

        handler = getattr(args, "handler", run_generate)
        return handler(settings, args)

    except KeyboardInterrupt:
        log.warning("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main_cli())
