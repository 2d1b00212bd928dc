"""Pipeline orchestration for automated podcast generation."""

from .orchestrator import PodcastPipeline
from .results import PipelineOutcome, RunFailure, RunResult
from .stages import Stage, run_stages

__all__ = [
    "PodcastPipeline",
    "PipelineOutcome",
    "RunFailure",
    "RunResult",
    "Stage",
    "run_stages",
]
