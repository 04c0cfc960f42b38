#!/usr/bin/env python
"""
Report command - scan a package tree and report dependency license texts.
"""

from __future__ import annotations

import json
import logging

from licensewalk.cli.formatting.output import ConsoleOutput
from licensewalk.config import VERBOSITY_INFO, ScanConfig, get_scan_config
from licensewalk.errors import LicenseWalkError, ReportWriteError
from licensewalk.models import ModuleRecord
from licensewalk.report import build_report, summarize, write_report
from licensewalk.walker import TreeWalker

logger = logging.getLogger(__name__)


def _print_module(console: ConsoleOutput, record: ModuleRecord) -> None:
    console.print_plain(f"{record.name}@{record.version}")
    console.print_plain(record.registry_url)
    if record.local_path:
        console.print_plain(record.local_path)
    if record.declared_license:
        console.print_plain(f"From package.json license property: {json.dumps(record.declared_license)}")
    console.print()


async def run(config: ScanConfig | None = None, console: ConsoleOutput | None = None) -> int:
    """Run the report command (defaults to the global scan config)."""
    config = config or get_scan_config()
    console = console or ConsoleOutput()
    console.print_plain(f"Project Path {config.root}")
    console.print()

    try:
        records = await TreeWalker(config).walk()
    except LicenseWalkError as e:
        console.print_error(str(e))
        return 1

    summary = summarize(records)
    console.print(f"{summary.total} licensed dependencies (including dependencies of dependencies)")
    console.print(f"{summary.improperly_licensed} dependencies without license text but with license indicator")
    console.print(f"{summary.unlicensed} unlicensed dependencies")
    console.print()

    if config.verbosity >= VERBOSITY_INFO:
        for record in records:
            _print_module(console, record)

    root_name = next(r.name for r in records if r.local_path == "")
    report = build_report(root_name, records)
    if config.output is None:
        console.print_plain(report)
        return 0

    try:
        await write_report(config.output, report)
    except ReportWriteError as e:
        logger.error(str(e))
        console.print_warning(f"{e}; printing report instead")
        console.print_plain(report)
    return 0
