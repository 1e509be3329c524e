"""Tests for the fade curve and the distance severity ramp."""

import pytest

from game import COLORS, ColorError, ColorFader, distance_color
from game.colors import parse_hex


class TestColorFaderConstruction:

    def test_valid_colors(self):
        fader = ColorFader("#FF0000", "#0000ff", 10)
        assert fader.start == (255, 0, 0)
        assert fader.end == (0, 0, 255)
        assert fader.steps == 10
        assert fader.current_step == 0

    def test_short_hex_is_expanded(self):
        assert parse_hex("#abc") == (0xAA, 0xBB, 0xCC)

    @pytest.mark.parametrize("bad", ["not-a-hex", "#12345", "#GG00FF", None])
    def test_invalid_start_color(self, bad):
        with pytest.raises(ColorError, match=r"^Start color string invalid\."):
            ColorFader(bad, "#112233", 1)

    @pytest.mark.parametrize("bad", ["invalid-hex", "#F0F0F", "#00HHFF"])
    def test_invalid_end_color(self, bad):
        with pytest.raises(ColorError, match=r"^End color string invalid\."):
            ColorFader("#112233", bad, 4)

    @pytest.mark.parametrize("steps", [-5, 10.5])
    def test_invalid_steps(self, steps):
        with pytest.raises(ColorError, match="Steps must be a non-negative integer"):
            ColorFader("#ff0000", "#0000ff", steps)


class TestColorFaderColor:

    def test_start_color_at_step_zero(self):
        assert ColorFader("#0156ab", "#000000", 1).color() == "#0156ab"

    def test_end_color_at_last_step(self):
        fader = ColorFader("#0156ab", "#000000", 1)
        fader.next()
        assert fader.color() == "#000000"

    def test_interpolates_four_steps(self):
        fader = ColorFader("#6478c8", "#000000", 4)
        expected = ["#4b5a96", "#323c64", "#191e32", "#000000"]
        for color in expected:
            fader.next()
            assert fader.color() == color

    def test_fades_up_as_well_as_down(self):
        fader = ColorFader("#00ff00", COLORS["unclicked"], 2)
        fader.next()
        assert fader.color() == "#60e060"

    def test_equal_start_and_end(self):
        fader = ColorFader("#323232", "#323232", 4)
        fader.next()
        assert fader.color() == "#323232"

    def test_color_at_bounds(self):
        fader = ColorFader("#ffffff", "#000000", 3)
        assert fader.color_at(0) == "#ffffff"
        assert fader.color_at(100) == "#000000"

    def test_zero_steps_keeps_start_color(self):
        fader = ColorFader("#123456", "#000000", 0)
        assert fader.color() == "#123456"


class TestColorFaderNext:

    def test_increments(self):
        fader = ColorFader("#000000", "#ffffff", 4)
        assert [fader.next() for _ in range(3)] == [1, 2, 3]

    def test_does_not_exceed_steps(self):
        fader = ColorFader("#000000", "#ffffff", 4)
        for _ in range(6):
            fader.next()
        assert fader.current_step == 4
        assert fader.finished

    def test_zero_steps_always_returns_zero(self):
        fader = ColorFader("#000000", "#000000", 0)
        assert fader.next() == 0
        assert fader.next() == 0


class TestDistanceColor:

    def test_near_is_green(self):
        assert distance_color(0, 10) == "#00ff00"

    def test_half_way_is_yellow(self):
        assert distance_color(5, 10) == "#ffff00"

    def test_far_is_red(self):
        assert distance_color(10, 10) == "#ff0000"

    def test_quarter_way(self):
        # ratio 0.25 -> red channel 127.5, rounded up
        assert distance_color(1, 4) == "#80ff00"

    def test_zero_max_distance(self):
        assert distance_color(0, 0) == "#00ff00"
