"""Scan configuration.

Provides the per-run settings of a license scan, loaded from environment
variables and overridden by CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from licensewalk.config.defaults import REGISTRY_URL_BASE
from licensewalk.newlines import LineEnding, host_line_ending

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ScanConfig:
    """Configuration for a single dependency license scan."""

    root: Path = field(default_factory=lambda: Path.cwd().resolve())
    line_ending: LineEnding = field(default_factory=host_line_ending)
    verbosity: int = 0
    output: Optional[Path] = None

    # Where registry pages live; the package name is appended
    registry_url_base: str = REGISTRY_URL_BASE

    # Descend into @scope wrapper directories of node_modules
    include_scoped: bool = True

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """Create config from environment variables."""
        eol = os.environ.get("LICENSEWALK_EOL")
        output = os.environ.get("LICENSEWALK_OUTPUT")
        return cls(
            line_ending=LineEnding.parse(eol) if eol else host_line_ending(),
            verbosity=int(os.environ.get("LICENSEWALK_VERBOSITY", "0")),
            output=Path(output) if output else None,
            registry_url_base=os.environ.get("LICENSEWALK_REGISTRY_URL", REGISTRY_URL_BASE),
            include_scoped=os.environ.get("LICENSEWALK_INCLUDE_SCOPED", "1").strip().lower() in _TRUTHY,
        )

    def with_overrides(self, **overrides) -> "ScanConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "line_ending" in changes:
            changes["line_ending"] = LineEnding.parse(changes["line_ending"])
        if "root" in changes:
            changes["root"] = Path(changes["root"]).resolve()
        if "output" in changes:
            changes["output"] = Path(changes["output"])
        return replace(self, **changes)

    def registry_url(self, name: str) -> str:
        return f"{self.registry_url_base}{name}"


# Global config instance
_config: Optional[ScanConfig] = None


def get_scan_config() -> ScanConfig:
    """Get global scan config."""
    global _config
    if _config is None:
        _config = ScanConfig.from_env()
    return _config


def set_scan_config(config: Optional[ScanConfig]) -> None:
    """Set global scan config (``None`` reloads from the environment on next get)."""
    global _config
    _config = config
