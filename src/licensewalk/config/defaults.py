"""Default configuration values for licensewalk.

This module centralizes the fixed names and markers the scanner relies on
(manifest file, nested dependency directory, license candidates, sentinel
text). All modules should import these constants instead of hard-coding
values.

Usage:
    from licensewalk.config import (
        MANIFEST_FILENAME,
        NO_LICENSE_FILE,
        LICENSE_CANDIDATES,
    )
"""

from __future__ import annotations

# =============================================================================
# Package layout
# =============================================================================

MANIFEST_FILENAME = "package.json"
NESTED_DEPENDENCIES_DIRNAME = "node_modules"

# Prefix of scoped namespace directories (node_modules/@scope/name)
SCOPE_PREFIX = "@"

REGISTRY_URL_BASE = "https://www.npmjs.com/package/"


# =============================================================================
# License resolution
# =============================================================================

NO_LICENSE_FILE = "NO LICENSE FILE"
README_EXCERPT_PREFIX = "FROM README:\n"

# Dedicated license files, highest priority first
LICENSE_CANDIDATES = (
    "LICENSE",
    "LICENCE",
    "LICENSE.md",
    "LICENSE.txt",
    "LICENSE-MIT",
    "LICENSE-BSD",
    "MIT-LICENSE.txt",
)

# README files, highest priority first (lowest priority of all candidates)
README_CANDIDATES = (
    "Readme.md",
    "README.md",
    "README.markdown",
)

CANDIDATE_ENCODING = "utf-8"


# =============================================================================
# Output
# =============================================================================

LINE_ENDING_CHOICES = ("lf", "crlf", "cr")

REPORT_HEADER = "# LICENSE FILE REPORT FOR "

# Verbosity thresholds for diagnostic output
VERBOSITY_INFO = 1
VERBOSITY_DEBUG = 2
