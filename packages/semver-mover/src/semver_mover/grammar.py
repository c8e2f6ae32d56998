# SPDX-License-Identifier: MIT
"""Grammar validation for ``MAJOR.MINOR.PATCH[-PREREL][+BUILD]`` strings.

The validator never raises. It reports whether a string is a valid version and
returns whatever fields it managed to parse, so callers can check arbitrary
input without aborting a larger pipeline:

    >>> result = validate("3.2.56-rc.1+34892948-2f-1.1.10")
    >>> result.ok, result.prerelease, result.build_metadata
    (True, 'rc.1', '34892948-2f-1.1.10')
    >>> validate("3.2.56-").error
    <ValidationError.TRAILING_SEPARATOR: 'TrailingSeparator'>

Suffix rules:
- the text after the core triple must start with ``-`` (prerelease) or ``+``
  (build metadata)
- ``+`` may appear only once
- the suffix may not end in one of ``. - +``
- no two of ``. - +`` may be adjacent, in any order
- everything else must be ASCII alphanumerics
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

import structlog

from .errors import ValidationError

log = structlog.get_logger(__name__)

SEPARATORS = ".-+"

CORE_PATTERN = re.compile(r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)")
PRERELEASE_PATTERN = re.compile(r"-(?P<prerelease>[0-9A-Za-z.\-]+)")
BUILD_PATTERN = re.compile(r"\+(?P<build>[0-9A-Za-z.\-]+)\Z")
IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z.\-]+")

_ADJACENT_SEPARATORS = re.compile(r"[.+\-]{2}")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a version string.

    Attributes:
        ok: True if the whole string is a valid version
        major: Major number, or None if the core triple did not parse
        minor: Minor number, or None if the core triple did not parse
        patch: Patch number, or None if the core triple did not parse
        prerelease: Prerelease string; always None when ``ok`` is False
        build_metadata: Opaque build metadata; always None when ``ok`` is False
        error: Why the string was rejected, None when ``ok`` is True
    """

    ok: bool
    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Optional[str] = None
    build_metadata: Optional[str] = None
    error: Optional[ValidationError] = None

    def __bool__(self) -> bool:
        return self.ok


def split_fields(text: Optional[str], sep: str = ".") -> list[str]:
    """Split text on sep, dropping empty pieces. None yields an empty list."""
    if not text:
        return []
    return [field for field in text.split(sep) if field]


def _check_suffix(suffix: str) -> Optional[ValidationError]:
    """Run the structural suffix checks in order; return the first failure."""
    if suffix[0] not in "-+":
        return ValidationError.INVALID_SUFFIX_START
    if suffix.count("+") > 1:
        return ValidationError.MULTIPLE_BUILD_SEPARATORS
    if suffix[-1] in SEPARATORS:
        return ValidationError.TRAILING_SEPARATOR
    if _ADJACENT_SEPARATORS.search(suffix):
        return ValidationError.INVALID_SEPARATOR_SEQUENCE
    return None


def validate(text: Any, logger: Any = None) -> ValidationResult:
    """Validate a version string and decompose it into its fields.

    Only the core triple is decoded into integers; the prerelease and the
    build metadata are returned as opaque strings.

    Args:
        text: Candidate version string
        logger: Optional structlog-style logger; defaults to the module logger

    Returns:
        A ValidationResult. When ``ok`` is False, ``error`` names the first
        rule that failed and the core fields hold whatever parsed.
    """
    _log = logger if logger is not None else log

    if not isinstance(text, str):
        _log.debug("version_rejected", version=repr(text), reason=str(ValidationError.MALFORMED_CORE))
        return ValidationResult(ok=False, error=ValidationError.MALFORMED_CORE)

    core = CORE_PATTERN.match(text)
    if core is None:
        _log.debug("version_rejected", version=text, reason=str(ValidationError.MALFORMED_CORE))
        return ValidationResult(ok=False, error=ValidationError.MALFORMED_CORE)

    try:
        major = int(core.group("major"))
        minor = int(core.group("minor"))
        patch = int(core.group("patch"))
    except ValueError:
        # Beyond the interpreter's int string conversion limit
        _log.debug("version_rejected", version=text[:64], reason=str(ValidationError.MALFORMED_CORE))
        return ValidationResult(ok=False, error=ValidationError.MALFORMED_CORE)
    suffix = text[core.end():]

    if not suffix:
        return ValidationResult(ok=True, major=major, minor=minor, patch=patch)

    def reject(reason: ValidationError) -> ValidationResult:
        _log.debug("version_rejected", version=text, suffix=suffix, reason=str(reason))
        return ValidationResult(ok=False, major=major, minor=minor, patch=patch, error=reason)

    reason = _check_suffix(suffix)
    if reason is not None:
        return reject(reason)

    prerelease_match = PRERELEASE_PATTERN.match(suffix)
    build_match = BUILD_PATTERN.search(suffix)
    prerelease = prerelease_match.group("prerelease") if prerelease_match else None
    build_metadata = build_match.group("build") if build_match else None

    if prerelease is None and build_metadata is None:
        return reject(ValidationError.EMPTY_SUFFIX_FIELDS)

    consumed = ""
    if prerelease is not None:
        consumed += f"-{prerelease}"
    if build_metadata is not None:
        consumed += f"+{build_metadata}"
    if consumed != suffix:
        return reject(ValidationError.INVALID_CHARACTER)

    return ValidationResult(
        ok=True,
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build_metadata=build_metadata,
    )


def is_valid_semver(text: Any) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("3.2.56.81-whatever")
        False
    """
    return validate(text).ok
