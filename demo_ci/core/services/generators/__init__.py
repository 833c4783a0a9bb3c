"""
Generators — produce CI documents from discovered demo projects.

Each generator returns ``GeneratedFile`` instances; writing them to
disk is left to ``pipeline_ops``.
"""
