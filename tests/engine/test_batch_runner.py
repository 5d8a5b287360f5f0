import pytest

import asciifx.engine.batch_runner as batch_runner
from asciifx.engine.batch_runner import BatchRunner, apply_effect_to_frames, apply_gradient_to_frames
from asciifx.engine.effect_engine import apply_effect as real_apply_effect
from asciifx.gradient.area_matcher import FillCriteria
from asciifx.models.effects import RemapCharactersSettings
from asciifx.models.gradient import GradientDefinition, GridPoint

REMAP_A = RemapCharactersSettings(character_mappings={"A": "Z"})


@pytest.mark.asyncio
async def test_effect_applied_to_every_frame(frames):
    result = await apply_effect_to_frames(REMAP_A, frames)

    assert [f.data["0,0"].char for f in result.frames] == ["Z", "Z", "B"]
    assert [f.data["1,0"].char for f in result.frames] == ["B", "Z", "Z"]
    assert result.total_affected == 4
    assert result.success
    assert [f.name for f in result.frames] == ["f0", "f1", "f2"]


@pytest.mark.asyncio
async def test_failing_frame_is_kept_and_reported(frames, monkeypatch):
    failing = frames[1].data

    def flaky_apply(settings, cells):
        if cells is failing:
            raise ValueError("boom")
        return real_apply_effect(settings, cells)

    monkeypatch.setattr(batch_runner, "apply_effect", flaky_apply)

    result = await apply_effect_to_frames(REMAP_A, frames)

    assert len(result.frames) == 3
    assert result.frames[0].data["0,0"].char == "Z"
    assert result.frames[1] is frames[1]
    assert result.frames[2].data["1,0"].char == "Z"
    assert len(result.errors) == 1
    assert result.errors[0].frame_index == 1
    assert result.errors[0].error_type == "ValueError"
    assert str(result.errors[0]) == "Frame 1: boom"
    assert not result.success


@pytest.mark.asyncio
async def test_progress_reported_before_each_frame(frames):
    calls = []

    await apply_effect_to_frames(REMAP_A, frames, on_progress=lambda i, total: calls.append((i, total)))

    assert calls == [(0, 3), (1, 3), (2, 3)]


@pytest.mark.asyncio
async def test_async_progress_callback_is_awaited(frames):
    calls = []

    async def on_progress(index, total):
        calls.append(index)

    await BatchRunner(yield_between_frames=False).apply_effect_to_frames(REMAP_A, frames, on_progress)

    assert calls == [0, 1, 2]


@pytest.mark.asyncio
async def test_input_frames_untouched(frames):
    before = [dict(f.data) for f in frames]

    await apply_effect_to_frames(REMAP_A, frames)

    assert [f.data for f in frames] == before


@pytest.mark.asyncio
async def test_empty_sequence():
    result = await apply_effect_to_frames(REMAP_A, [])

    assert result.frames == []
    assert result.total_affected == 0
    assert result.errors == []


@pytest.mark.asyncio
async def test_gradient_applied_per_frame(frames):
    definition = GradientDefinition(start_point=GridPoint(0, 0), end_point=GridPoint(1, 0))
    criteria = FillCriteria(match_char=False, match_color=False, match_bg_color=False)

    result = await apply_gradient_to_frames(definition, criteria, frames, 2, 1)

    assert result.total_affected == 6
    for frame in result.frames:
        assert frame.data["0,0"].char == "#"
        assert frame.data["1,0"].char == "@"


@pytest.mark.asyncio
async def test_gradient_area_recomputed_per_frame(frames):
    definition = GradientDefinition(start_point=GridPoint(0, 0), end_point=GridPoint(1, 0))

    result = await apply_gradient_to_frames(definition, FillCriteria(), frames, 2, 1)

    # frame 1 is "AA" (both cells match), frames 0 and 2 differ at (1,0)
    assert result.total_affected == 1 + 2 + 1
    assert result.frames[0].data["1,0"].char == "B"
    assert result.frames[1].data["1,0"].char == "@"
