# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison, bumping and tagging.

Versions have the shape ``MAJOR.MINOR.PATCH[-PREREL][+BUILD]``. A Version can
be bumped and tagged in place; build metadata is layered (raw text plus
timestamp, flavor and build number tags) and never affects ordering.

Example:
    >>> from semver_mover import parse_version, compare, validate
    >>>
    >>> version = parse_version("4.1.1")
    >>> version.tag_with_prerelease("rc")
    >>> version.bump_prerelease(7)
    >>> str(version)
    '4.1.1-rc.7'
    >>>
    >>> validate("3.2.56.81-whatever").ok
    False
    >>>
    >>> compare("4.1.75-dev", "4.1.75")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .errors import (
    ValidationError,
    SemverError,
    InvalidVersionError,
    MutationError,
    NoPrereleaseSetError,
    InvalidTagError,
    InvalidFlavorError,
    InvalidBuildNumberError,
    InvalidMetadataError,
)
from .grammar import (
    ValidationResult,
    validate,
    is_valid_semver,
    split_fields,
)
from .compare import (
    Ordering,
    compare,
    compare_prerelease,
    equals,
    version_key,
)
from .semver import (
    Version,
    new_version,
    parse_version,
    DEBUG,
    TEST,
    DEV,
    RC,
    BETA,
    ALPHA,
)

__all__ = [
    # Errors
    "ValidationError",
    "SemverError",
    "InvalidVersionError",
    "MutationError",
    "NoPrereleaseSetError",
    "InvalidTagError",
    "InvalidFlavorError",
    "InvalidBuildNumberError",
    "InvalidMetadataError",
    # Validation
    "ValidationResult",
    "validate",
    "is_valid_semver",
    "split_fields",
    # Comparison
    "Ordering",
    "compare",
    "compare_prerelease",
    "equals",
    "version_key",
    # Version values
    "Version",
    "new_version",
    "parse_version",
    # Tag constants
    "DEBUG",
    "TEST",
    "DEV",
    "RC",
    "BETA",
    "ALPHA",
]
