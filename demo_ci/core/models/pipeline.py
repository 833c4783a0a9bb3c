"""
Pipeline configuration model — every constant the generator needs.

A ``PipelineConfig`` is built from the built-in defaults, optionally
overridden by a YAML file, and passed explicitly into discovery and
generation.  Nothing downstream reads module-level template state.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class BuildVariant(BaseModel):
    """One generation mode, written to its own output file."""

    name: str
    output_file: str
    setup: str
    description: str = ""


class ExcludedProject(BaseModel):
    """A demo whose job block is emitted commented out.

    The reason is informational only and never rendered.
    """

    path: str
    reason: str = ""


class PipelineConfig(BaseModel):
    """Discovery rules + templates for the generated CI documents."""

    # ── Discovery ───────────────────────────────────────────────
    marker_file: str = "project.godot"
    required_dirs: list[str] = Field(default_factory=list)
    skip_dirs: list[str] = Field(default_factory=list)
    # Empty would prune every directory
    hidden_prefix: str = Field(default=".", min_length=1)

    # ── Rendering ───────────────────────────────────────────────
    placeholder: str = Field(default="PROJECT_NAME", min_length=1)
    comment_marker: str = "#"
    preamble: str = ""
    job_template: str = ""
    variants: list[BuildVariant] = Field(default_factory=list)
    excluded: list[ExcludedProject] = Field(default_factory=list)

    @field_validator("excluded", mode="before")
    @classmethod
    def _coerce_bare_paths(cls, value):
        """Accept ``- 3d/ik`` as shorthand for ``- path: 3d/ik``."""
        if isinstance(value, list):
            return [{"path": v} if isinstance(v, str) else v for v in value]
        return value

    def is_excluded(self, project: str) -> bool:
        """Exact match of a root-relative project path against the deny-list."""
        return any(e.path == project for e in self.excluded)
