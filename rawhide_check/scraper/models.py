"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionRecord:
    """One row of a package page's version table."""

    distribution: str
    version: str


@dataclass(frozen=True)
class FetchTarget:
    """The two path segments that locate a package page on the tracker."""

    primary: str
    secondary: str

    @classmethod
    def for_package(cls, name: str) -> FetchTarget:
        """Return the target for the Rust devel subpackage of crate *name*.

        ``foo`` maps to ``rust-foo`` / ``rust-foo-devel``.
        """
        primary = f"rust-{name}"
        return cls(primary=primary, secondary=f"{primary}-devel")
