"""
LicenseResolver - find the license text shipped with a package.

Dedicated license files always win over README excerpts. A README only
contributes when no dedicated file exists, and only from a ``License``
heading to the end of the file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Union

import aiofiles
import aiofiles.os

from licensewalk.config.defaults import (
    CANDIDATE_ENCODING,
    LICENSE_CANDIDATES,
    README_CANDIDATES,
    README_EXCERPT_PREFIX,
)
from licensewalk.errors import CandidateReadError
from licensewalk.models import LicenseResolution, ResolutionKind
from licensewalk.newlines import LineEnding, normalize_newlines

logger = logging.getLogger(__name__)

# Optional heading markers, the word "license", trailing blanks only
_LICENSE_HEADING = re.compile(r"^[# ]*license[ \t]*$", re.IGNORECASE | re.MULTILINE)


def find_license_heading(text: str) -> Optional[int]:
    """Return the offset of the first license heading line in ``text``."""
    match = _LICENSE_HEADING.search(normalize_newlines(text, LineEnding.LF))
    return match.start() if match else None


def readme_excerpt(text: str) -> Optional[str]:
    """Return README content from the license heading on, with LF endings."""
    normalized = normalize_newlines(text, LineEnding.LF)
    offset = find_license_heading(normalized)
    if offset is None:
        return None
    return normalized[offset:]


class LicenseResolver:
    """
    Resolve a package's license text through an ordered list of candidates.

    Equivalent to folding the candidates from lowest to highest priority,
    where every dedicated file overrides the accumulated result and a README
    only fills an empty one. Hence the highest-priority dedicated file wins,
    and failing that the lowest-priority README with a license heading.
    """

    def __init__(
        self,
        line_ending: Union[str, LineEnding] = LineEnding.LF,
        license_candidates: Sequence[str] = LICENSE_CANDIDATES,
        readme_candidates: Sequence[str] = README_CANDIDATES,
    ):
        self.line_ending = LineEnding.parse(line_ending)
        self.license_candidates = tuple(license_candidates)
        self.readme_candidates = tuple(readme_candidates)

    async def resolve(self, package_dir: Path) -> LicenseResolution:
        """
        Resolve the license of the package in ``package_dir``.

        Unreadable candidates are logged and skipped. When nothing is found
        and some candidate could not be read, the result is ``FAILED``.
        """
        package_dir = Path(package_dir)
        errors: List[str] = []

        for name in self.license_candidates:
            text = await self._read_candidate(package_dir / name, errors)
            if text is not None:
                return LicenseResolution(
                    kind=ResolutionKind.LICENSE_FILE,
                    text=normalize_newlines(text, self.line_ending),
                    source=name,
                )

        for name in reversed(self.readme_candidates):
            text = await self._read_candidate(package_dir / name, errors)
            if text is None:
                continue
            excerpt = readme_excerpt(text)
            if excerpt is None:
                logger.debug(f"No license heading in {package_dir / name}")
                continue
            logger.debug(excerpt)
            return LicenseResolution(
                kind=ResolutionKind.README,
                text=README_EXCERPT_PREFIX + normalize_newlines(excerpt, self.line_ending),
                source=name,
            )

        return LicenseResolution.not_found(tuple(errors))

    async def _read_candidate(self, path: Path, errors: List[str]) -> Optional[str]:
        if not await aiofiles.os.path.exists(path):
            return None
        try:
            return await read_candidate(path)
        except CandidateReadError as e:
            logger.error(str(e))
            errors.append(str(e))
            return None


async def read_candidate(path: Path) -> str:
    """Read a candidate file verbatim (line endings untouched)."""
    try:
        async with aiofiles.open(path, "r", encoding=CANDIDATE_ENCODING, errors="replace", newline="") as f:
            return await f.read()
    except OSError as e:
        raise CandidateReadError(f"Error reading {path}: {e}", path=path) from e
