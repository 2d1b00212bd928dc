"""Outcome records returned by a pipeline run."""

from pathlib import Path
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field

from ..errors import ConfigurationError, StageError


class RunResult(BaseModel):
    """Summary of a successful run."""

    success: Literal[True] = True
    articles_count: int
    script: str
    script_length: int
    audio_file: Path


class RunFailure(BaseModel):
    """Why a run stopped."""

    success: Literal[False] = False
    kind: Literal["configuration", "stage"]
    message: str
    stage: Optional[str] = None
    missing: list[str] = Field(default_factory=list)
    error: Optional[str] = None  # underlying exception, if any

    @classmethod
    def from_configuration_error(cls, error: ConfigurationError) -> "RunFailure":
        return cls(kind="configuration", message=str(error), missing=error.missing)

    @classmethod
    def from_stage_error(cls, error: StageError) -> "RunFailure":
        cause = error.__cause__
        return cls(
            kind="stage",
            stage=error.stage,
            message=error.detail,
            error=str(cause) if cause is not None else None,
        )


PipelineOutcome = Union[RunResult, RunFailure]
