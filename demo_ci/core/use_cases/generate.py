"""
Generate use case — orchestrate validation, discovery, rendering, output.

Ties together config loading, root validation, the discovery walk,
the pipeline generator and file output.  Every expected failure ends
up in ``GenerateResult.error``; nothing here prints or exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from demo_ci.core.config.loader import ConfigError, find_config_file, load_config
from demo_ci.core.models.pipeline import PipelineConfig
from demo_ci.core.services.discovery import (
    DiscoveryResult,
    RootError,
    discover_projects,
    validate_root,
)
from demo_ci.core.services.generators.pipeline import generate_pipelines
from demo_ci.core.services.pipeline_ops import OutputError, write_generated_files

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    root: Path | None = None
    config_path: Path | None = None
    projects: list[str] = field(default_factory=list)
    excluded: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    # Output path -> one-line summary of its content
    reasons: dict[str, str] = field(default_factory=dict)
    discovery: DiscoveryResult | None = None
    written: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["root"] = str(self.root)
        result["config_path"] = str(self.config_path) if self.config_path else None
        result["projects"] = self.projects
        result["excluded"] = self.excluded
        result["files"] = self.files
        result["reasons"] = self.reasons
        result["discovery"] = self.discovery.to_dict() if self.discovery else None
        result["written"] = self.written
        return result


def run_generate(
    root: str | None,
    *,
    config_path: Path | None = None,
    output_dir: Path | None = None,
    write: bool = True,
) -> GenerateResult:
    """Scan a demo repository and produce its CI documents.

    Args:
        root: Repository root as given on the command line.
        config_path: Optional YAML override. If None, ``root/demo-ci.yml``
            is used when present.
        output_dir: Where documents are written (default: cwd).
        write: If False, render only and report the planned files.

    Returns:
        GenerateResult describing what was found and written.
    """
    result = GenerateResult()

    # Explicit config is loaded first so a broken file fails fast
    try:
        config: PipelineConfig = load_config(config_path)
        root_path = validate_root(root, config)
        if config_path is None:
            config_path = find_config_file(root_path)
            if config_path is not None:
                config = load_config(config_path)
                # Required dirs may have been overridden
                root_path = validate_root(root, config)
    except (RootError, ConfigError) as e:
        result.error = str(e)
        return result

    result.root = root_path
    result.config_path = config_path

    discovery = discover_projects(root_path, config)
    result.discovery = discovery
    projects = discovery.relative_paths()
    result.projects = projects
    result.excluded = [p for p in projects if config.is_excluded(p)]

    files = generate_pipelines(projects, config)
    target_dir = output_dir if output_dir is not None else Path.cwd()

    if not write:
        result.files = [str(target_dir / f.path) for f in files]
        result.reasons = {str(target_dir / f.path): f.reason for f in files}
        return result

    try:
        written = write_generated_files(target_dir, files)
    except OutputError as e:
        result.error = str(e)
        return result

    result.files = [str(p) for p in written]
    result.reasons = {str(p): f.reason for p, f in zip(written, files)}
    result.written = True
    return result
