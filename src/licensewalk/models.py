"""
Shared dataclasses for license scanning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from licensewalk.config.defaults import NO_LICENSE_FILE


class ResolutionKind(str, Enum):
    """How a package's license text was (or was not) obtained."""

    LICENSE_FILE = "license_file"
    README = "readme"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LicenseResolution:
    kind: ResolutionKind
    text: str = ""
    source: Optional[str] = None  # candidate filename the text came from
    errors: Tuple[str, ...] = ()

    @classmethod
    def not_found(cls, errors: Tuple[str, ...] = ()) -> "LicenseResolution":
        if errors:
            return cls(kind=ResolutionKind.FAILED, errors=errors)
        return cls(kind=ResolutionKind.NOT_FOUND)

    @property
    def found(self) -> bool:
        return self.kind in (ResolutionKind.LICENSE_FILE, ResolutionKind.README)

    @property
    def resolved_text(self) -> str:
        """Extracted text, or the ``NO LICENSE FILE`` sentinel."""
        return self.text if self.found else NO_LICENSE_FILE


@dataclass
class ModuleRecord:
    """One visited package directory."""
    name: str
    version: str
    registry_url: str
    local_path: str
    declared_license: Optional[str]
    resolution: LicenseResolution = field(default_factory=LicenseResolution.not_found)

    @property
    def resolved_license_text(self) -> str:
        return self.resolution.resolved_text

    @property
    def improperly_licensed(self) -> bool:
        return self.resolved_license_text == NO_LICENSE_FILE

    @property
    def unlicensed(self) -> bool:
        return self.improperly_licensed and not self.declared_license


@dataclass(frozen=True)
class LicenseSummary:
    total: int
    improperly_licensed: int
    unlicensed: int
