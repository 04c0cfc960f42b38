"""Detect which directory entries are dependency packages."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from pathlib import Path
from typing import List

import aiofiles.os

from licensewalk.config.defaults import SCOPE_PREFIX
from licensewalk.errors import DirectoryListError
from licensewalk.manifest import manifest_path

logger = logging.getLogger(__name__)


async def is_package(path: Path) -> bool:
    """
    Return True if ``path`` is a directory holding a readable manifest.

    Filesystem errors are logged and count as "not a package".
    """
    try:
        st = await aiofiles.os.stat(path)
    except OSError as e:
        logger.warning(f"Skipping {path}: {e}")
        return False
    if not stat.S_ISDIR(st.st_mode):
        return False
    manifest = manifest_path(path)
    try:
        return await aiofiles.os.path.isfile(manifest) and await aiofiles.os.access(manifest, os.R_OK)
    except OSError as e:
        logger.warning(f"Skipping {path}: {e}")
        return False


async def filter_packages(paths: List[Path]) -> List[Path]:
    """Keep the entries of ``paths`` that are packages, preserving order."""
    flags = await asyncio.gather(*(is_package(p) for p in paths))
    return [p for p, ok in zip(paths, flags) if ok]


async def _list_dir(directory: Path) -> List[Path]:
    try:
        names = await aiofiles.os.listdir(directory)
    except OSError as e:
        raise DirectoryListError(f"Cannot list {directory}: {e}", path=directory) from e
    return [directory / name for name in sorted(names)]


async def list_packages(nested_dir: Path, include_scoped: bool = True) -> List[Path]:
    """
    List the packages directly inside a nested dependencies directory.

    Args:
        nested_dir: A ``node_modules`` directory.
        include_scoped: Also return packages one level below ``@scope``
            directories that are not packages themselves.

    Returns:
        Package directories, sorted by name.

    Raises:
        DirectoryListError: If ``nested_dir`` (or a scope directory in it)
            cannot be listed.
    """
    entries = await _list_dir(nested_dir)
    packages = await filter_packages(entries)

    if include_scoped:
        found = set(packages)
        scopes = [
            e for e in entries
            if e.name.startswith(SCOPE_PREFIX) and e not in found and await aiofiles.os.path.isdir(e)
        ]
        for scoped in await asyncio.gather(*(_list_dir(s) for s in scopes)):
            packages.extend(await filter_packages(scoped))

    logger.debug("module directories %s", [str(p) for p in packages])
    return packages
