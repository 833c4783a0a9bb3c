"""
Discovery service — find demo projects in a repository checkout.

Validates the repository root, then walks it depth-first collecting
every directory that directly contains the marker file.  Hidden
directories and the configured skip names are pruned without
descending.

Filesystem errors are swallowed at the smallest granularity: an
unreadable directory contributes nothing, an unreadable entry is
skipped on its own.  An unreadable directory and an empty one look
the same in the result.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from demo_ci.core.models.pipeline import PipelineConfig

logger = logging.getLogger(__name__)


class RootError(Exception):
    """Raised when the root argument is not a usable demo repository."""


@dataclass
class DiscoveryResult:
    """Directories that directly contain the marker file."""

    root: Path
    projects: list[Path] = field(default_factory=list)
    directories_scanned: int = 0

    @property
    def total(self) -> int:
        return len(self.projects)

    def relative_paths(self) -> list[str]:
        """Root-relative POSIX paths, sorted for reproducible output."""
        return sorted(p.relative_to(self.root).as_posix() for p in self.projects)

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "total": self.total,
            "directories_scanned": self.directories_scanned,
            "projects": self.relative_paths(),
        }


def validate_root(raw: str | None, config: PipelineConfig) -> Path:
    """Check that ``raw`` names a demo-projects repository.

    A trailing slash is trimmed and relative paths are resolved
    against the current directory.

    Raises:
        RootError: Missing argument, not a directory, or a required
            top-level directory is absent.
    """
    if not raw:
        raise RootError("You must provide absolute path to Godot project.")

    root = Path(raw.rstrip("/") or "/")
    if not root.is_dir():
        raise RootError(f"{raw} isn't proper directory.")

    missing = [d for d in config.required_dirs if not (root / d).exists()]
    if missing:
        logger.debug("Root %s is missing %s", root, ", ".join(missing))
        raise RootError(f"{raw} isn't proper Godot demo project repository.")

    return root.resolve()


def _should_descend(name: str, config: PipelineConfig) -> bool:
    """Whether a directory entry is worth walking into."""
    if name.startswith(config.hidden_prefix):
        return False
    if name in config.skip_dirs:
        return False
    return True


def _is_text_name(name: str) -> bool:
    """Reject names that only decoded via surrogate escapes."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def discover_projects(root: Path, config: PipelineConfig) -> DiscoveryResult:
    """Walk ``root`` and collect every demo project below it.

    The root itself is never reported, even if it carries the marker.
    Links are classified by their own type and never followed.

    Args:
        root: Validated repository root.
        config: Supplies marker file, hidden prefix and skip names.

    Returns:
        DiscoveryResult with absolute project directories.
    """
    result = DiscoveryResult(root=root)
    pending: list[Path] = [root]

    while pending:
        current = pending.pop()

        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)
            continue

        result.directories_scanned += 1

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
                continue

            if is_dir:
                if not _is_text_name(entry.name):
                    logger.debug("Skipping undecodable directory name in %s", current)
                    continue
                if not _should_descend(entry.name, config):
                    logger.debug("Pruned %s", entry.path)
                    continue
                pending.append(current / entry.name)
            elif is_file and entry.name == config.marker_file:
                if current == root:
                    logger.debug("Ignoring %s at repository root", config.marker_file)
                    continue
                result.projects.append(current)

    logger.info(
        "Discovered %d projects in %d directories under %s",
        result.total, result.directories_scanned, root,
    )
    return result
