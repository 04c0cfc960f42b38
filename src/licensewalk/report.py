"""Aggregate module records into summary counts and a text report."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

import aiofiles
import aiofiles.os

from licensewalk.config.defaults import REPORT_HEADER
from licensewalk.errors import ReportWriteError
from licensewalk.models import LicenseSummary, ModuleRecord

logger = logging.getLogger(__name__)


def summarize(records: Iterable[ModuleRecord]) -> LicenseSummary:
    """Count records, those without license text, and those without any license."""
    records = list(records)
    improper = [r for r in records if r.improperly_licensed]
    return LicenseSummary(
        total=len(records),
        improperly_licensed=len(improper),
        unlicensed=sum(1 for r in improper if r.unlicensed),
    )


def build_report(root_name: str, records: Iterable[ModuleRecord]) -> str:
    """
    Render the license report.

    Example:
        # LICENSE FILE REPORT FOR app
        ## left-pad

        MIT License...
    """
    parts: List[str] = [f"{REPORT_HEADER}{root_name}\n"]
    for record in records:
        parts.append(f"## {record.name}\n\n")
        parts.append(f"{record.resolved_license_text}\n")
    return "".join(parts)


async def write_report(path: Path, report: str) -> None:
    """
    Write ``report`` to ``path`` atomically (temp file, then rename).

    Raises:
        ReportWriteError: If the file cannot be written.
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        os.close(fd)
        async with aiofiles.open(tmp_name, "w", encoding="utf-8", newline="") as f:
            await f.write(report)
        await aiofiles.os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and await aiofiles.os.path.exists(tmp_name):
            await aiofiles.os.remove(tmp_name)
        raise ReportWriteError(f"Error writing file {path}: {e}", path=path) from e
    logger.info(f"Report written to {path}")
