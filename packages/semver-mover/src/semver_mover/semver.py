# SPDX-License-Identifier: MIT
"""Mutable semantic version values.

A Version holds the core triple, an optional prerelease, and layered build
metadata: an opaque ``raw_metadata`` string plus structured timestamp, flavor
and build number tags that can each be set or cleared on their own.

The rendered form is::

    MAJOR.MINOR.PATCH[-PRERELEASE][+RAW[.TIMESTAMP][-FLAVOR][.BUILD_NUMBER]]

where the separator before a build piece is only written if something precedes
it. Every mutation leaves ``str(version)`` acceptable to the validator, or
raises and leaves the version unchanged.

Example:
    >>> v = new_version(4, 1, 1)
    >>> v.tag_with_prerelease(ALPHA)
    >>> v.bump_prerelease()
    >>> str(v)
    '4.1.1-alpha.1'
    >>> v.tag_with_flavor(DEV)
    >>> v.tag_with_build_number(711)
    >>> str(v)
    '4.1.1-alpha.1+dev.711'
"""

from __future__ import annotations

import functools
import re
import time
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from .compare import Ordering, compare
from .errors import (
    InvalidBuildNumberError,
    InvalidFlavorError,
    InvalidMetadataError,
    InvalidTagError,
    InvalidVersionError,
    MutationError,
    NoPrereleaseSetError,
    ValidationError,
)
from .grammar import IDENTIFIER_PATTERN, validate

log = structlog.get_logger(__name__)

# Flavors
DEBUG = "debug"
TEST = "test"
DEV = "dev"

# Prerelease stages
RC = "rc"
BETA = "beta"
ALPHA = "alpha"

FLAVOR_PATTERN = re.compile(r"[A-Za-z]+")


def _is_count(value: Any) -> bool:
    """True for non-negative ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _check_step(n: Any) -> None:
    if not _is_count(n):
        raise ValueError(f"Bump amount must be a non-negative integer, got {n!r}")


@functools.total_ordering
@dataclass(eq=False)
class Version:
    """A semantic version that can be bumped and tagged in place.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Optional prerelease (e.g. "rc.1"); participates in ordering
        raw_metadata: Optional opaque build metadata, never decomposed
        timestamp: Optional epoch seconds build tag
        flavor: Optional alphabetic build flavor (e.g. "debug")
        build_number: Optional build number tag
        logger: Optional structlog-style logger used instead of the module one

    Equality and ordering follow compare(): build metadata is ignored.
    Versions are mutable and therefore unhashable.
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    raw_metadata: Optional[str] = None
    timestamp: Optional[int] = None
    flavor: Optional[str] = None
    build_number: Optional[int] = None
    logger: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for attr in ("major", "minor", "patch", "timestamp", "build_number"):
            value = getattr(self, attr)
            is_tag = attr in ("timestamp", "build_number")
            if is_tag and value is None:
                continue
            if not _is_count(value):
                raise InvalidVersionError(
                    self.base_version,
                    f"{attr} must be a non-negative integer, got {value!r}",
                    reason=None if is_tag else ValidationError.MALFORMED_CORE,
                )
        if self.flavor is not None and not FLAVOR_PATTERN.fullmatch(self.flavor):
            raise InvalidVersionError(str(self), f"Invalid flavor: {self.flavor!r}")

        result = validate(str(self), logger=self._log)
        if not result.ok:
            raise InvalidVersionError(str(self), reason=result.error)

    @property
    def _log(self) -> Any:
        return self.logger if self.logger is not None else log

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def build(self) -> Optional[str]:
        """The assembled build metadata, or None if no build tag is set."""
        build = self.raw_metadata
        if self.timestamp is not None:
            build = f"{build}.{self.timestamp}" if build is not None else str(self.timestamp)
        if self.flavor is not None:
            build = f"{build}-{self.flavor}" if build is not None else self.flavor
        if self.build_number is not None:
            build = f"{build}.{self.build_number}" if build is not None else str(self.build_number)
        return build

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        build = self.build
        if build is not None:
            version += f"+{build}"
        return version

    def get(self) -> str:
        """Same as str(version)."""
        return str(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other, logger=self._log) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other, logger=self._log) is Ordering.LESS

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _apply(self, error_cls: type[MutationError], what: str, **changes: Any) -> None:
        """Set fields, then roll back and raise if the result does not validate."""
        before = str(self)
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)

        result = validate(str(self), logger=self._log)
        if not result.ok:
            for name, value in previous.items():
                setattr(self, name, value)
            self._log.debug("mutation_rejected", version=before, mutation=what, reason=str(result.error))
            raise error_cls(before, f"Invalid {what} for {before}: {result.error}")

        self._log.debug("version_mutated", version=str(self), mutation=what)

    def reinitialize(self, text: str) -> None:
        """Reset this version from a version string.

        All tags are cleared first; the structured build tags are not recovered
        from the string, which only yields the opaque prerelease and raw
        metadata.

        Raises:
            InvalidVersionError: If text is not a valid version; the version
                is left untouched
        """
        result = validate(text, logger=self._log)
        if not result.ok:
            raise InvalidVersionError(str(text), reason=result.error)

        self.untag()
        self.major = result.major
        self.minor = result.minor
        self.patch = result.patch
        self.prerelease = result.prerelease
        self.raw_metadata = result.build_metadata
        self._log.debug("version_reinitialized", version=str(self))

    def bump_major(self, n: int = 1) -> None:
        """Bump major by n. Resets minor and patch to 0."""
        _check_step(n)
        self.major += n
        self.minor = 0
        self.patch = 0
        self._log.debug("version_mutated", version=str(self), mutation="major")

    def bump_minor(self, n: int = 1) -> None:
        """Bump minor by n. Resets patch to 0."""
        _check_step(n)
        self.minor += n
        self.patch = 0
        self._log.debug("version_mutated", version=str(self), mutation="minor")

    def bump_patch(self, n: int = 1) -> None:
        """Bump patch by n."""
        _check_step(n)
        self.patch += n
        self._log.debug("version_mutated", version=str(self), mutation="patch")

    def bump_prerelease(self, n: int = 1) -> None:
        """Bump the trailing number of the prerelease by n.

        If the last ``.``-separated field is numeric it is incremented;
        otherwise ``.n`` is appended. Given 3.1.7-rc, ``bump_prerelease(7)``
        gives 3.1.7-rc.7; given 3.1.7-rc.1-debug.2 it gives 3.1.7-rc.1-debug.9.

        Raises:
            NoPrereleaseSetError: If no prerelease is set
        """
        _check_step(n)
        if self.prerelease is None:
            raise NoPrereleaseSetError(str(self), f"Cannot bump unset prerelease of {self}")

        fields = self.prerelease.split(".")
        if fields[-1].isdigit():
            fields[-1] = str(int(fields[-1]) + n)
        else:
            fields.append(str(n))
        self._apply(InvalidTagError, "prerelease", prerelease=".".join(fields))

    def bump_build_number(self, n: int = 1) -> None:
        """Bump the build number by n, starting from 0 if none is set."""
        _check_step(n)
        current = self.build_number if self.build_number is not None else 0
        self._apply(InvalidBuildNumberError, "build number", build_number=current + n)

    def tag_with_prerelease(self, tag: str) -> None:
        """Replace the prerelease with tag. Use one of RC, BETA, ALPHA where possible.

        Raises:
            InvalidTagError: If tag is not a valid prerelease
        """
        if not isinstance(tag, str) or not IDENTIFIER_PATTERN.fullmatch(tag):
            raise InvalidTagError(str(self), f"Invalid prerelease tag: {tag!r}")
        self._apply(InvalidTagError, "prerelease tag", prerelease=tag)

    def tag_with_flavor(self, flavor: str) -> None:
        """Replace the flavor tag. Use one of DEBUG, TEST, DEV where possible.

        Raises:
            InvalidFlavorError: If flavor is not purely alphabetic
        """
        if not isinstance(flavor, str) or not FLAVOR_PATTERN.fullmatch(flavor):
            raise InvalidFlavorError(str(self), f"Invalid flavor tag: {flavor!r}")
        self._apply(InvalidFlavorError, "flavor", flavor=flavor)

    def tag_with_timestamp(self, timestamp: Optional[int] = None) -> None:
        """Replace the timestamp tag with timestamp, or the current epoch seconds."""
        if timestamp is None:
            timestamp = int(time.time())
        elif not _is_count(timestamp):
            raise ValueError(f"Timestamp must be a non-negative integer, got {timestamp!r}")
        self._apply(InvalidMetadataError, "timestamp", timestamp=timestamp)

    def tag_with_build_number(self, number: int) -> None:
        """Replace the build number tag.

        Raises:
            InvalidBuildNumberError: If number is not a non-negative integer
        """
        if not _is_count(number):
            raise InvalidBuildNumberError(
                str(self), f"Invalid build number: {number!r} (must be a non-negative integer)"
            )
        self._apply(InvalidBuildNumberError, "build number", build_number=number)

    def tag_with(self, raw: str) -> None:
        """Replace the raw build metadata with raw.

        Timestamp, flavor and build number tags are kept; call untag() first to
        drop them.

        Raises:
            InvalidMetadataError: If the version would no longer validate
        """
        if not isinstance(raw, str):
            raise InvalidMetadataError(str(self), f"Invalid build metadata: {raw!r}")
        self._apply(InvalidMetadataError, "build metadata", raw_metadata=raw)

    def untag(self, build_meta_only: bool = False) -> None:
        """Drop all build metadata, and the prerelease unless build_meta_only."""
        self.raw_metadata = None
        self.timestamp = None
        self.flavor = None
        self.build_number = None
        if not build_meta_only:
            self.prerelease = None
        self._log.debug("version_untagged", version=str(self), build_meta_only=build_meta_only)


def new_version(
    major: int,
    minor: int,
    patch: int,
    prerelease: Optional[str] = None,
    build_metadata: Optional[str] = None,
    logger: Any = None,
) -> Version:
    """Create a Version from its core numbers and optional opaque strings.

    Raises:
        InvalidVersionError: If a number is negative or the strings do not
            form a valid version
    """
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        raw_metadata=build_metadata,
        logger=logger,
    )


def parse_version(version_string: str, logger: Any = None) -> Version:
    """Parse a version string into a Version object.

    Only the core triple, the prerelease and the opaque build metadata are
    recovered; the build metadata lands in ``raw_metadata``.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build]
        logger: Optional structlog-style logger for the returned Version

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string is not a valid version; ``reason``
            names the rule that failed

    Examples:
        >>> parse_version("3.2.56-rc.1+34892948-2f-1.1.10")
        Version(major=3, minor=2, patch=56, prerelease='rc.1', raw_metadata='34892948-2f-1.1.10', timestamp=None, flavor=None, build_number=None)
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
            reason=ValidationError.MALFORMED_CORE,
        )

    result = validate(version_string, logger=logger)
    if not result.ok:
        raise InvalidVersionError(version_string, reason=result.error)

    return Version(
        major=result.major,
        minor=result.minor,
        patch=result.patch,
        prerelease=result.prerelease,
        raw_metadata=result.build_metadata,
        logger=logger,
    )
