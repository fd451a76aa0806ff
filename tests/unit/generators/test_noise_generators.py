"""Unit tests for the random generators."""

from __future__ import annotations

import re

from kiianigen.core.generators import GeneratorContext

LOOP_SETTINGS = "framedelay:1, loop, replace:all"
GRAY = re.compile(r"^P\[(\d+)\]\((\d+),(\d+),(\d+)\)$")


class TestWhiteNoise:
    """Tests for TV static."""

    def test_shape(self, registry, ctx) -> None:
        animation = registry.generate("whiteNoise", ctx)
        assert animation.frame_count == 20
        assert animation.settings == LOOP_SETTINGS
        assert all(len(frame) == 119 for frame in animation.frames)

    def test_gray_levels_in_range(self, registry, ctx) -> None:
        for frame in registry.generate("whiteNoise", ctx).frames:
            for cmd in frame:
                match = GRAY.match(cmd)
                assert match is not None
                r, g, b = (int(v) for v in match.groups()[1:])
                assert r == g == b
                assert 0 <= r < 153

    def test_covers_every_led_in_order(self, registry, ctx, geometry) -> None:
        frame = registry.generate("whiteNoise", ctx).frames[0]
        ids = [int(GRAY.match(cmd).group(1)) for cmd in frame]
        assert ids == list(geometry.led_ids)

    def test_frame_count_param(self, registry, ctx) -> None:
        assert registry.generate("whiteNoise", ctx, [3]).frame_count == 3

    def test_seeded_runs_repeat(self, registry, geometry) -> None:
        first = registry.generate("whiteNoise", GeneratorContext.seeded(geometry, 42))
        second = registry.generate("whiteNoise", GeneratorContext.seeded(geometry, 42))
        assert first == second


class TestDodgyPixel:
    """Tests for random blinking cells."""

    def test_shape(self, registry, ctx) -> None:
        animation = registry.generate("dodgyPixel", ctx)
        assert animation.frame_count == 101
        assert animation.settings == LOOP_SETTINGS

    def test_background_frame_covers_grid(self, registry, ctx) -> None:
        frame = registry.generate("dodgyPixel", ctx).frames[0]
        assert len(frame) == 40
        assert frame[0] == "P[r:0,c:0](25,25,25)"
        assert frame[-1] == "P[r:3,c:9](25,25,25)"

    def test_blinks_restore_same_cell(self, registry, ctx) -> None:
        frames = registry.generate("dodgyPixel", ctx).frames
        for on, off in zip(frames[1::2], frames[2::2]):
            assert len(on) == len(off) == 1
            target = on[0].split("(")[0]
            assert off[0] == f"{target}(25,25,25)"
            assert on[0] == f"{target}(255,255,255)"


class TestEscapeTest:
    def test_frames(self, registry, ctx) -> None:
        animation = registry.generate("escapeTest", ctx)
        assert animation.frame_count == 10
        assert animation.settings == LOOP_SETTINGS
        for frame in animation.frames:
            assert frame[0].startswith("P[1](")
            assert frame[1].startswith("P[16](")
            assert all(cmd.endswith(",0,0)") for cmd in frame)
