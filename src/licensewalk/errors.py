"""Exceptions raised while scanning a dependency tree.

Structural errors (manifest, directory listing) make the tree unreliable and
abort the scan. Content errors (candidate reads, report writes) are logged and
the scan carries on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class LicenseWalkError(Exception):
    """Base class for licensewalk errors."""

    fatal = True

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ManifestError(LicenseWalkError):
    """A package manifest is missing or invalid."""


class DirectoryListError(LicenseWalkError):
    """A nested dependencies directory could not be listed."""


class CandidateReadError(LicenseWalkError):
    """A license or README candidate exists but could not be read."""

    fatal = False


class ReportWriteError(LicenseWalkError):
    """The report could not be written to its destination."""

    fatal = False
