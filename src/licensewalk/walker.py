"""
TreeWalker - concurrent recursive walk of a nested dependency tree.

Every visit loads its manifest, then concurrently
- lists its ``node_modules`` and explores each child package, and
- resolves its own license and records a ModuleRecord.

Fan-out/fan-in is structured: a visit finishes only after its own record and
all of its children's visits have finished. The CompletionTracker sees each
child registered the moment it is discovered, before it can run, and fires
once when the root visit completes.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Optional

import aiofiles.os

from licensewalk.config.defaults import NESTED_DEPENDENCIES_DIRNAME
from licensewalk.config.settings import ScanConfig
from licensewalk.manifest import PackageManifest, load_manifest
from licensewalk.models import ModuleRecord
from licensewalk.package_filter import list_packages
from licensewalk.resolver import LicenseResolver
from licensewalk.tracker import CompletionTracker

logger = logging.getLogger(__name__)


class TreeWalker:
    """
    Walk a package directory and all of its nested dependencies.

    Args:
        config: Scan settings; ``config.root`` is the traversal root.
        resolver: License resolver (defaults to one using ``config.line_ending``).
        on_complete: Called once with the finished records when the
            traversal becomes quiescent.
    """

    def __init__(
        self,
        config: ScanConfig,
        resolver: Optional[LicenseResolver] = None,
        on_complete: Optional[Callable[[List[ModuleRecord]], None]] = None,
    ):
        self.config = config
        self.root = Path(config.root)
        self.resolver = resolver or LicenseResolver(config.line_ending)
        self._on_complete = on_complete
        self.records: List[ModuleRecord] = []
        self.tracker: Optional[CompletionTracker] = None

    async def walk(self) -> List[ModuleRecord]:
        """
        Walk the whole tree and return one record per visited package.

        Raises:
            ManifestError: If a visited package has a missing or invalid manifest.
            DirectoryListError: If a ``node_modules`` directory cannot be listed.
        """
        self.records = []
        self.tracker = CompletionTracker(on_complete=self._hand_off)
        self.tracker.register()
        await self.explore(self.root)
        await self.tracker.wait()
        return self.records

    def _hand_off(self) -> None:
        logger.info(f"Scanned {len(self.records)} packages under {self.root}")
        if self._on_complete is not None:
            self._on_complete(self.records)

    async def explore(self, package_dir: Path) -> None:
        """Visit one registered package and its subtree."""
        manifest = await load_manifest(package_dir)
        await asyncio.gather(
            self._explore_dependencies(package_dir),
            self._record(package_dir, manifest),
        )
        self.tracker.complete()

    async def _explore_dependencies(self, package_dir: Path) -> None:
        nested_dir = package_dir / NESTED_DEPENDENCIES_DIRNAME
        if not await aiofiles.os.path.isdir(nested_dir):
            return
        children = await list_packages(nested_dir, include_scoped=self.config.include_scoped)
        visits = []
        for child in children:
            self.tracker.register()
            visits.append(self.explore(child))
        await asyncio.gather(*visits)

    async def _record(self, package_dir: Path, manifest: PackageManifest) -> None:
        resolution = await self.resolver.resolve(package_dir)
        self.records.append(
            ModuleRecord(
                name=manifest.name,
                version=manifest.version,
                registry_url=self.config.registry_url(manifest.name),
                local_path=self.relative_path(package_dir),
                declared_license=manifest.declared_license,
                resolution=resolution,
            )
        )

    def relative_path(self, package_dir: Path) -> str:
        """Path of ``package_dir`` relative to the root, ``""`` for the root."""
        rel = Path(package_dir).relative_to(self.root).as_posix()
        return "" if rel == "." else rel


async def walk_tree(
    config: ScanConfig,
    on_complete: Optional[Callable[[List[ModuleRecord]], None]] = None,
) -> List[ModuleRecord]:
    """Convenience wrapper: walk ``config.root`` and return its records."""
    return await TreeWalker(config, on_complete=on_complete).walk()
