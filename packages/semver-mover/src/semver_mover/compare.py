# SPDX-License-Identifier: MIT
"""Version precedence.

Build metadata is ignored in comparisons and in equality.

Prerelease ordering rules:
- a version with a prerelease sorts before the same version without one
- prereleases are compared field by field on ``.``
- numeric fields compare as integers and sort before alphanumeric fields
- alphanumeric fields compare by code point
- when all shared fields are equal, the prerelease with more fields is greater
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Union

import structlog

from .errors import InvalidVersionError
from .grammar import split_fields, validate

log = structlog.get_logger(__name__)


class Ordering(IntEnum):
    """Result of comparing two versions, usable anywhere an int cmp is."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _coerce(version: Any, logger: Any = None) -> Any:
    """Accept a version string or any object carrying the core fields."""
    if isinstance(version, str):
        result = validate(version, logger=logger)
        if not result.ok:
            raise InvalidVersionError(version, reason=result.error)
        return result
    return version


def _token(field: str) -> Union[tuple[int, str], str]:
    """Numeric fields become (digit count, digits) with leading zeros dropped.

    That orders numbers of any length by value without int() conversion.
    """
    if not field.isdigit():
        return field
    digits = field.lstrip("0")
    return (len(digits), digits)


def _cmp(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_prerelease(pre1: Optional[str], pre2: Optional[str], logger: Any = None) -> Ordering:
    """Compare two prerelease strings.

    A missing prerelease (final release) outranks any prerelease.
    """
    _log = logger if logger is not None else log

    if pre1 is None and pre2 is None:
        return Ordering.EQUAL
    if pre1 is None:
        return Ordering.GREATER
    if pre2 is None:
        return Ordering.LESS

    fields1 = split_fields(pre1, ".")
    fields2 = split_fields(pre2, ".")

    for index, field in enumerate(fields1):
        # Everything so far matched and pre2 ran out of fields
        if index >= len(fields2):
            return Ordering.GREATER

        tok1 = _token(field)
        tok2 = _token(fields2[index])
        _log.debug("comparing_prerelease_fields", left=field, right=fields2[index])

        if isinstance(tok1, tuple) and isinstance(tok2, str):
            return Ordering.LESS
        if isinstance(tok1, str) and isinstance(tok2, tuple):
            return Ordering.GREATER

        outcome = _cmp(tok1, tok2)
        if outcome is not Ordering.EQUAL:
            return outcome

    if len(fields1) < len(fields2):
        _log.debug(
            "prerelease_field_count_differs",
            left=pre1,
            right=pre2,
            left_fields=len(fields1),
            right_fields=len(fields2),
        )
        return Ordering.LESS
    return Ordering.EQUAL


def compare(a: Any, b: Any, logger: Any = None) -> Ordering:
    """Compare two versions by semver precedence.

    Args:
        a: First version (string, Version, or anything with major, minor,
            patch and prerelease attributes)
        b: Second version
        logger: Optional structlog-style logger; defaults to the module logger

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        InvalidVersionError: If either argument is an invalid version string

    Examples:
        >>> compare("11.11.11", "11.11.11-rc")
        <Ordering.GREATER: 1>
        >>> compare("4.1.75-rc.111", "4.1.75-rc.beta")
        <Ordering.LESS: -1>
        >>> compare("4.1.77", "4.1.77+metadata")
        <Ordering.EQUAL: 0>
    """
    v1 = _coerce(a, logger)
    v2 = _coerce(b, logger)

    for attr in ("major", "minor", "patch"):
        outcome = _cmp(getattr(v1, attr), getattr(v2, attr))
        if outcome is not Ordering.EQUAL:
            return outcome

    return compare_prerelease(v1.prerelease, v2.prerelease, logger=logger)


def equals(a: Any, b: Any, logger: Any = None) -> bool:
    """True if neither version precedes the other. Build metadata is ignored."""
    return compare(a, b, logger=logger) is Ordering.EQUAL


def version_key(version: Any) -> tuple:
    """Return a sort key whose ordering matches compare().

    Examples:
        >>> sorted(["1.0.0", "1.0.0-rc.1", "1.0.0-rc"], key=version_key)
        ['1.0.0-rc', '1.0.0-rc.1', '1.0.0']
    """
    v = _coerce(version)

    # Final releases get (1,) so they sort after every (0, ...) prerelease key
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for field in split_fields(v.prerelease, "."):
            token = _token(field)
            parts.append((0, token) if isinstance(token, tuple) else (1, token))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
