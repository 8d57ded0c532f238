"""
Command line entry point.

    readerrecs "I'm 13, I like: sci-fi, fantasy"     # answer once
    readerrecs                                        # interactive loop

The catalog is loaded before any profile is read; if that fails the process
exits with status 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, TextIO

from loguru import logger

from readerrecs.catalog import CatalogError, CatalogStore, load_catalog
from readerrecs.config import settings
from readerrecs.presenter import EXAMPLE_PROFILE, render
from readerrecs.profile import parse_profile
from readerrecs.recommend import recommend

PROMPT = "> "


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def answer(line: str, catalog: CatalogStore) -> str:
    return render(recommend(parse_profile(line), catalog))


def run_loop(
    catalog: CatalogStore,
    lines: Iterable[str],
    out: TextIO,
    *,
    exit_token: str = settings.EXIT_TOKEN,
    prompt: str = PROMPT,
) -> int:
    """Answer profile lines until the exit token or end of input. Returns the number answered."""
    print(f"Describe the reader, e.g. {EXAMPLE_PROFILE}. Type '{exit_token}' to quit.", file=out)
    answered = 0
    out.write(f"\n{prompt}")
    out.flush()
    for raw in lines:
        line = raw.strip()
        if line.lower() == exit_token.lower():
            break
        if line:
            print(answer(line, catalog), file=out)
            answered += 1
        out.write(f"\n{prompt}")
        out.flush()
    print("\nDone. See you next time!", file=out)
    return answered


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="readerrecs", description="Age-aware book recommendations.")
    ap.add_argument("profile", nargs="?", default=None, help="answer a single profile and exit")
    ap.add_argument("--catalog", type=Path, default=None, help=f"catalog JSON (default {settings.CATALOG_PATH})")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL, help="loguru level for stderr logs")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    if args.profile is not None:
        print(answer(args.profile, catalog))
        return 0

    run_loop(catalog, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
