"""
Domain models — Pydantic types for the generator.

    from demo_ci.core.models import PipelineConfig, BuildVariant, GeneratedFile
"""

from demo_ci.core.models.pipeline import BuildVariant, ExcludedProject, PipelineConfig
from demo_ci.core.models.template import GeneratedFile

__all__ = [
    # pipeline.py
    "BuildVariant",
    "ExcludedProject",
    "PipelineConfig",
    # template.py
    "GeneratedFile",
]
