"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from demo_ci.core.config.defaults import default_config
from demo_ci.core.models.pipeline import PipelineConfig
from demo_ci.core.observability.logging_config import PACKAGE_LOGGER


def _make_demo(root: Path, rel: str, marker: str = "project.godot") -> Path:
    """Create ``root/rel`` containing the marker file."""
    d = root / rel
    d.mkdir(parents=True, exist_ok=True)
    (d / marker).write_text("[application]\n")
    return d


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers a CLI run attached, so no test logs to a closed stream."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for h in logger.handlers:
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config() -> PipelineConfig:
    """The stock pipeline configuration."""
    return default_config()


@pytest.fixture
def demo_repo(tmp_path: Path) -> Path:
    """A minimal demo-projects checkout.

    2d/x and 3d/y are demos, networking is empty, .hidden/z is a demo
    hidden behind a dot directory.
    """
    root = tmp_path / "godot-demo-projects"
    _make_demo(root, "2d/x")
    _make_demo(root, "3d/y")
    (root / "networking").mkdir(parents=True)
    _make_demo(root, ".hidden/z")
    return root


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for generated files."""
    d = tmp_path / "out"
    d.mkdir()
    return d


@pytest.fixture
def make_demo():
    """Factory: ``make_demo(root, "2d/x")`` creates a demo directory."""
    return _make_demo
