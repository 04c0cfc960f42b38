"""
licensewalk - report the license text of every package in a dependency tree.

Walks a package's nested node_modules tree concurrently, resolves each
package's license file (falling back to a README "License" section) and
flags packages that ship no license text.
"""

from __future__ import annotations

__version__ = "0.1.0"

from licensewalk.config import NO_LICENSE_FILE, ScanConfig
from licensewalk.errors import (
    CandidateReadError,
    DirectoryListError,
    LicenseWalkError,
    ManifestError,
    ReportWriteError,
)
from licensewalk.models import LicenseResolution, LicenseSummary, ModuleRecord, ResolutionKind
from licensewalk.package_filter import is_package, list_packages
from licensewalk.report import build_report, summarize, write_report
from licensewalk.resolver import LicenseResolver, find_license_heading
from licensewalk.tracker import CompletionTracker
from licensewalk.walker import TreeWalker, walk_tree

__all__ = [
    "NO_LICENSE_FILE",
    "ScanConfig",
    "CandidateReadError",
    "DirectoryListError",
    "LicenseWalkError",
    "ManifestError",
    "ReportWriteError",
    "LicenseResolution",
    "LicenseSummary",
    "ModuleRecord",
    "ResolutionKind",
    "is_package",
    "list_packages",
    "build_report",
    "summarize",
    "write_report",
    "LicenseResolver",
    "find_license_heading",
    "CompletionTracker",
    "TreeWalker",
    "walk_tree",
]
