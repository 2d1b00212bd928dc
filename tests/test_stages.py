import pytest

from newscast.errors import StageError
from newscast.pipeline import Stage, run_stages
from newscast.pipeline.stages import is_empty

pytestmark = pytest.mark.anyio


def _stage(name, fn):
    return Stage(
        name=name,
        run=fn,
        failure_message=f"{name} failed",
        empty_message=f"{name} was empty",
    )


async def test_outputs_are_threaded_through_stages_in_order() -> None:
    calls = []

    async def double(value):
        calls.append(("double", value))
        return value * 2

    async def describe(value):
        calls.append(("describe", value))
        return f"value={value}"

    outputs = await run_stages([_stage("double", double), _stage("describe", describe)], initial=21)

    assert outputs == {"double": 42, "describe": "value=42"}
    assert calls == [("double", 21), ("describe", 42)]


async def test_exception_stops_the_run_and_chains_the_cause() -> None:
    later = []

    async def boom(_):
        raise ConnectionError("network down")

    async def never(value):
        later.append(value)
        return value

    with pytest.raises(StageError) as exc_info:
        await run_stages([_stage("first", boom), _stage("second", never)])

    assert exc_info.value.stage == "first"
    assert exc_info.value.detail == "first failed"
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert later == []


async def test_empty_output_stops_the_run() -> None:
    later = []

    async def nothing(_):
        return []

    async def never(value):
        later.append(value)
        return value

    with pytest.raises(StageError) as exc_info:
        await run_stages([_stage("first", nothing), _stage("second", never)])

    assert exc_info.value.stage == "first"
    assert exc_info.value.detail == "first was empty"
    assert exc_info.value.__cause__ is None
    assert later == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        ([], True),
        ("", True),
        ("  \n", True),
        (b"", True),
        (["a"], False),
        ("script", False),
        (0, False),
    ],
)
def test_is_empty(value, expected) -> None:
    assert is_empty(value) is expected
