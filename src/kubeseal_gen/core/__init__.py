"""Core subpackage.

This package contains the pipeline that ties credential resolution,
manifest rendering and sealing together.
"""

from kubeseal_gen.core.pipeline import SecretPipeline

__all__ = [
    "SecretPipeline",
]
