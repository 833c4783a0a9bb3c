"""
Pipeline operations — write generated CI documents to disk.

Writing is all-or-abort: the first file that cannot be created or
written stops the run.  Files already written are left in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from demo_ci.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Raised when a generated file cannot be created or written."""


def write_generated_file(output_dir: Path, generated: GeneratedFile) -> Path:
    """Write a GeneratedFile under ``output_dir``.

    Args:
        output_dir: Directory the file path is relative to.
        generated: File to write (created or truncated).

    Returns:
        The absolute path written.

    Raises:
        OutputError: On any OS-level failure.
    """
    target = output_dir / generated.path

    try:
        target.write_text(generated.content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to save data to {target}: {e}") from e

    logger.info("Wrote generated file: %s", target)
    return target


def write_generated_files(output_dir: Path, files: list[GeneratedFile]) -> list[Path]:
    """Write each file in order, aborting on the first failure."""
    return [write_generated_file(output_dir, f) for f in files]
