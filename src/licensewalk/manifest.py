"""Package manifest (package.json) loading and validation.

``read_manifest`` never raises: it returns ``ManifestOk`` or
``ManifestFailure``. ``load_manifest`` is the strict variant used by the
tree walker, where a bad manifest aborts the scan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import aiofiles
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from licensewalk.config.defaults import MANIFEST_FILENAME
from licensewalk.errors import ManifestError

logger = logging.getLogger(__name__)


class PackageManifest(BaseModel):
    """The subset of package.json the scanner reads.

    Only the JSON document itself must be an object; field values npm
    tolerates (missing name, numeric version, legacy license shapes) are
    accepted and coerced.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field("", description="Package name")
    version: str = Field("", description="Package version")
    license: Any = Field(None, description="SPDX expression or legacy {type, url} object")
    licenses: Any = Field(None, description="Legacy license list (or single entry)")

    @field_validator("name", "version", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @property
    def declared_license(self) -> Optional[str]:
        """The declared license as a single string, if the manifest has one."""
        return _license_name(self.license) or _license_name(self.licenses)


def _license_name(value: Any) -> Optional[str]:
    if value is None or value is False:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        kind = value.get("type")
        return _license_name(kind) if kind is not None else None
    if isinstance(value, (list, tuple)):
        names = [n for n in (_license_name(item) for item in value) if n]
        return " OR ".join(names) or None
    return str(value)


@dataclass(frozen=True)
class ManifestOk:
    path: Path
    manifest: PackageManifest


@dataclass(frozen=True)
class ManifestFailure:
    path: Path
    reason: str


ManifestResult = Union[ManifestOk, ManifestFailure]


def manifest_path(package_dir: Path) -> Path:
    return Path(package_dir) / MANIFEST_FILENAME


def parse_manifest(text: str, path: Path) -> ManifestResult:
    """Validate manifest JSON text."""
    try:
        return ManifestOk(path=path, manifest=PackageManifest.model_validate_json(text))
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
        )
        return ManifestFailure(path=path, reason=f"Invalid manifest: {errors}")


async def read_manifest(package_dir: Path) -> ManifestResult:
    """Read and validate the manifest inside ``package_dir``."""
    path = manifest_path(package_dir)
    try:
        async with aiofiles.open(path, "r", encoding="utf-8-sig") as f:
            text = await f.read()
    except (OSError, UnicodeDecodeError) as e:
        return ManifestFailure(path=path, reason=f"Cannot read manifest: {e}")
    return parse_manifest(text, path)


async def load_manifest(package_dir: Path) -> PackageManifest:
    """Return the validated manifest or raise ``ManifestError``."""
    result = await read_manifest(package_dir)
    if isinstance(result, ManifestFailure):
        logger.error(f"{result.path}: {result.reason}")
        raise ManifestError(f"{result.path}: {result.reason}", path=result.path)
    logger.debug("package.json license %r", result.manifest.license)
    return result.manifest
