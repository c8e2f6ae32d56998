# SPDX-License-Identifier: MIT
"""Error types for version validation and mutation."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ValidationError(str, Enum):
    """Reason a version string was rejected by the grammar validator."""

    MALFORMED_CORE = "MalformedCore"
    INVALID_SUFFIX_START = "InvalidSuffixStart"
    MULTIPLE_BUILD_SEPARATORS = "MultipleBuildSeparators"
    TRAILING_SEPARATOR = "TrailingSeparator"
    INVALID_SEPARATOR_SEQUENCE = "InvalidSeparatorSequence"
    EMPTY_SUFFIX_FIELDS = "EmptySuffixFields"
    INVALID_CHARACTER = "InvalidCharacter"

    def __str__(self) -> str:
        return self.value


class SemverError(Exception):
    """Base class for all errors raised by semver_mover."""


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow the version grammar."""

    def __init__(
        self,
        version: str,
        message: str = "",
        reason: Optional[ValidationError] = None,
    ):
        self.version = version
        self.reason = reason
        if not message:
            message = f"Invalid semantic version: {version}"
            if reason is not None:
                message += f" ({reason})"
        self.message = message
        super().__init__(self.message)


class MutationError(SemverError):
    """Raised when a tag or bump cannot be applied to a version.

    The version is left exactly as it was before the failed call.
    """

    kind = "MutationError"

    def __init__(self, version: str, message: str):
        self.version = version
        self.message = message
        super().__init__(message)


class NoPrereleaseSetError(MutationError):
    """Raised when bumping the prerelease of a version that has none."""

    kind = "NoPrereleaseSet"


class InvalidTagError(MutationError):
    """Raised for a prerelease tag outside ``[0-9A-Za-z.-]+``."""

    kind = "InvalidTag"


class InvalidFlavorError(MutationError):
    """Raised for a flavor that is not purely alphabetic."""

    kind = "InvalidFlavor"


class InvalidBuildNumberError(MutationError):
    """Raised for a build number that is not a non-negative integer."""

    kind = "InvalidBuildNumber"


class InvalidMetadataError(MutationError):
    """Raised when raw build metadata would make the version invalid."""

    kind = "InvalidMetadata"
