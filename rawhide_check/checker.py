"""Check a stream of ``<name> <version>`` lines against the package tracker.

For every line the pipeline is::

    parse line → derive FetchTarget → fetch page → extract versions → filter

Lines are processed strictly one after another; the only await point per
package is the page fetch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from rawhide_check.scraper.errors import FetchError
from rawhide_check.scraper.extractor import extract_versions
from rawhide_check.scraper.fetcher import PageFetcher
from rawhide_check.scraper.models import FetchTarget, VersionRecord


@dataclass(frozen=True)
class PackageLine:
    name: str
    version: str


@dataclass(frozen=True)
class CheckResult:
    package: str
    target: FetchTarget
    matches: tuple[VersionRecord, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.matches)


@dataclass
class CheckSummary:
    """Counters for a whole run."""

    checked: int = 0
    missing: int = 0
    skipped: int = 0
    failed: int = 0
    results: list[CheckResult] = field(default_factory=list)


def parse_line(line: str) -> Optional[PackageLine]:
    """Split ``"<name> <version>"`` on its first space.

    Returns ``None`` for lines without a space.
    """
    name, sep, version = line.rstrip("\r\n").partition(" ")
    if not sep:
        return None
    return PackageLine(name=name, version=version)


def filter_records(
    records: Iterable[VersionRecord], distribution: str
) -> list[VersionRecord]:
    """Keep the records listed under exactly *distribution* (case-sensitive)."""
    return [record for record in records if record.distribution == distribution]


def format_records(records: Sequence[VersionRecord]) -> str:
    return "[" + ", ".join(f"{r.distribution}: {r.version}" for r in records) + "]"


async def check_package(
    package: str,
    fetcher: PageFetcher,
    *,
    distribution: str,
) -> CheckResult:
    """Fetch the devel page for *package* and keep rows for *distribution*.

    A missing page gives a result with no matches.  Fetch failures propagate.
    """
    target = FetchTarget.for_package(package)
    document = await fetcher.fetch(target.primary, target.secondary)
    records = extract_versions(document) if document is not None else []
    matches = filter_records(records, distribution)
    return CheckResult(package=package, target=target, matches=tuple(matches))


async def run_checks(
    lines: Iterable[str],
    fetcher: PageFetcher,
    *,
    distribution: str,
    logger: logging.Logger,
    keep_going: bool = False,
) -> CheckSummary:
    """Check every package named in *lines* and log found/missing per package.

    With ``keep_going`` a :class:`FetchError` for one package is logged and
    counted as ``failed``; otherwise it aborts the run.  Configuration errors
    always propagate.
    """
    summary = CheckSummary()

    for line in lines:
        package = parse_line(line)
        if package is None:
            summary.skipped += 1
            logger.debug("skipping malformed line: %r", line.rstrip("\r\n"))
            continue

        name = package.name
        try:
            result = await check_package(name, fetcher, distribution=distribution)
        except FetchError as exc:
            if not keep_going:
                raise
            summary.failed += 1
            logger.error("%s: %s", name, exc)
            continue

        summary.checked += 1
        summary.results.append(result)
        if result.found:
            logger.info("%s: found: %s", name, format_records(result.matches))
        else:
            summary.missing += 1
            logger.warning("%s: missing", name)
        logger.debug("%s: result: %s", name, format_records(result.matches))

    logger.info("%d missing packages", summary.missing)
    if summary.failed:
        logger.error("%d packages could not be checked", summary.failed)
    return summary
