"""Configuration for licensewalk: fixed defaults and per-run settings."""

from __future__ import annotations

from licensewalk.config.defaults import (
    CANDIDATE_ENCODING,
    LICENSE_CANDIDATES,
    LINE_ENDING_CHOICES,
    MANIFEST_FILENAME,
    NESTED_DEPENDENCIES_DIRNAME,
    NO_LICENSE_FILE,
    README_CANDIDATES,
    README_EXCERPT_PREFIX,
    REGISTRY_URL_BASE,
    REPORT_HEADER,
    SCOPE_PREFIX,
    VERBOSITY_DEBUG,
    VERBOSITY_INFO,
)
from licensewalk.config.settings import ScanConfig, get_scan_config, set_scan_config

__all__ = [
    "CANDIDATE_ENCODING",
    "LICENSE_CANDIDATES",
    "LINE_ENDING_CHOICES",
    "MANIFEST_FILENAME",
    "NESTED_DEPENDENCIES_DIRNAME",
    "NO_LICENSE_FILE",
    "README_CANDIDATES",
    "README_EXCERPT_PREFIX",
    "REGISTRY_URL_BASE",
    "REPORT_HEADER",
    "SCOPE_PREFIX",
    "VERBOSITY_DEBUG",
    "VERBOSITY_INFO",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
]
