"""
CI pipeline generator — one document per build variant.

Document layout::

    <preamble>
                        (blank)
    <variant setup block>
                        (blank)
    <job block for project 1>
    ...

Every variant receives the same preamble and the same job blocks in
the same order; only the setup block differs.  Excluded projects keep
their job block, with every line prefixed by the comment marker.
"""

from __future__ import annotations

from demo_ci.core.models.pipeline import BuildVariant, PipelineConfig
from demo_ci.core.models.template import GeneratedFile


def comment_out(block: str, marker: str = "#") -> str:
    """Prefix every line of ``block`` with ``marker``."""
    return "".join(marker + line for line in block.splitlines(keepends=True))


def render_job(project: str, config: PipelineConfig) -> str:
    """Render the job template for one root-relative project path."""
    block = config.job_template.replace(config.placeholder, project)
    if config.is_excluded(project):
        block = comment_out(block, config.comment_marker)
    return block


def render_jobs(projects: list[str], config: PipelineConfig) -> str:
    """All job blocks, each preceded by a blank line, in sorted order."""
    return "".join("\n" + render_job(p, config) for p in sorted(projects))


def render_pipeline(
    variant: BuildVariant,
    projects: list[str],
    config: PipelineConfig,
) -> GeneratedFile:
    """Render the complete document for one build variant."""
    content = config.preamble + "\n" + variant.setup + render_jobs(projects, config)
    disabled = sum(1 for p in projects if config.is_excluded(p))
    reason = f"{variant.name} build: {len(projects)} project(s), {disabled} disabled"
    if variant.description:
        reason += f" ({variant.description})"
    return GeneratedFile(path=variant.output_file, content=content, reason=reason)


def generate_pipelines(
    projects: list[str],
    config: PipelineConfig,
) -> list[GeneratedFile]:
    """Render one document per configured build variant."""
    return [render_pipeline(v, projects, config) for v in config.variants]
