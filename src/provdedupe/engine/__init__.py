"""Pipeline orchestration engine.

``build_dataset`` is the pure in-memory transformation; ``run_pipeline``
wraps it with input reading and artifact writing.
"""

from provdedupe.engine.builder import Dataset, build_dataset
from provdedupe.engine.config import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_DIR,
    PipelineConfig,
    PipelineResult,
)
from provdedupe.engine.runner import run_pipeline

__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_DIR",
    "Dataset",
    "PipelineConfig",
    "PipelineResult",
    "build_dataset",
    "run_pipeline",
]
