"""rawhide-check CLI — entry-point.

Usage:
    python cli/main.py --help
    cut -d' ' -f1,2 crates.txt | python cli/main.py check

Commands:
    check     → look up ``rust-<name>-devel`` for each input line
    version   → print the installed version
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from rawhide_check.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import logging
from typing import Iterable, Optional

import typer

from rawhide_check import __version__
from rawhide_check.checker import CheckSummary, run_checks
from rawhide_check.config import settings
from rawhide_check.log import LogOptions, build_logger
from rawhide_check.scraper import PageFetcher, ScrapeError

app = typer.Typer(
    name="rawhide-check",
    help="Check which Rust crates have a devel package in Fedora Rawhide.",
    no_args_is_help=True,
)


async def _run(
    lines: Iterable[str],
    *,
    base_url: str,
    distribution: str,
    keep_going: bool,
    logger: logging.Logger,
) -> CheckSummary:
    async with PageFetcher(base_url) as fetcher:
        return await run_checks(
            lines,
            fetcher,
            distribution=distribution,
            logger=logger,
            keep_going=keep_going,
        )


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------
@app.command("check")
def check(
    input_file: typer.FileText = typer.Option(
        "-",
        "--input",
        "-i",
        encoding="utf-8",
        help="Read '<name> <version>' lines from a file ('-' for stdin).",
    ),
    distribution: Optional[str] = typer.Option(
        None, help="Distribution name to look for (default: settings / 'Fedora Rawhide')."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Package tracker root the package pages live under."
    ),
    keep_going: bool = typer.Option(
        False, "--keep-going", help="Log fetch errors per package and carry on."
    ),
    fail_on_missing: bool = typer.Option(
        False, "--fail-on-missing", help="Exit with status 2 if any package is missing."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors."),
) -> None:
    """Check each '<name> <version>' input line for a Rawhide devel package."""
    level = settings.log_level
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logger = build_logger(LogOptions(level=level))

    if base_url is None:
        base_url = settings.base_url
    if distribution is None:
        distribution = settings.distribution

    # click owns input_file and closes it when the command returns.
    try:
        summary = asyncio.run(
            _run(
                input_file,
                base_url=base_url,
                distribution=distribution,
                keep_going=keep_going,
                logger=logger,
            )
        )
    except ScrapeError as exc:
        logger.error("aborted: %s", exc)
        raise typer.Exit(1)

    if fail_on_missing and summary.missing:
        raise typer.Exit(2)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------
@app.command("version")
def version() -> None:
    """Print the rawhide-check version."""
    typer.echo(f"rawhide-check {__version__}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
