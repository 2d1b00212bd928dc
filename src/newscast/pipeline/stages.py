"""
Sequential stage runner.

A pipeline is an ordered list of stages. Each stage receives the previous
stage's output and produces the next stage's input. The first stage that
raises or returns an empty value stops the run with a ``StageError``; no
later stage is invoked.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Sequence
import structlog

from ..errors import StageError

logger = structlog.get_logger()


@dataclass(frozen=True)
class Stage:
    """One step of the pipeline."""

    name: str
    run: Callable[[Any], Awaitable[Any]]
    failure_message: str  # raised when the stage throws
    empty_message: str  # raised when the stage returns nothing
    description: str = ""


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


async def run_stages(stages: Sequence[Stage], initial: Optional[Any] = None) -> dict[str, Any]:
    """
    Run stages in order, threading each output into the next stage.

    Returns:
        Stage outputs keyed by stage name

    Raises:
        StageError: on the first stage that fails or returns an empty value
    """
    outputs: dict[str, Any] = {}
    value = initial
    total = len(stages)

    for step, stage in enumerate(stages, 1):
        logger.info(f"[{step}/{total}] {stage.description or stage.name}")

        try:
            value = await stage.run(value)
        except Exception as e:
            logger.error(stage.failure_message, stage=stage.name, error=str(e))
            raise StageError(stage=stage.name, detail=stage.failure_message) from e

        if is_empty(value):
            logger.error(stage.empty_message, stage=stage.name)
            raise StageError(stage=stage.name, detail=stage.empty_message)

        outputs[stage.name] = value

    return outputs
