"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by the generate phase.

    Attributes:
        path:    Path relative to the output directory.
        content: Full file content (always replaces an existing file).
        reason:  One-line summary shown by ``demo-ci -v``.
    """

    path: str
    content: str
    reason: str = ""
