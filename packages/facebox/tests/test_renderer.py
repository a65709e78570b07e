"""Tests for the square face box renderer."""

import pytest
from facebox import (
    FIVE_PART,
    FOUR_PART,
    PaletteIndexError,
    RecordingSurface,
    draw_square_face_box,
)

W = H = 400
SIZE = W / FOUR_PART.size_factor
EYE_R = W / FOUR_PART.eye_factor


def _draw(config, index, scale):
    surface = RecordingSurface(width=W, height=H)
    draw_square_face_box(surface, config, index, scale)
    return surface


class TestPrimitives:
    """Test which primitives a single draw issues."""

    def test_one_rect_one_line_two_circles(self):
        surface = _draw(FOUR_PART, 0, 0.3)
        assert surface.ops() == ["rect", "line", "circle", "circle"]

    def test_transform_balanced(self):
        surface = _draw(FOUR_PART, 2, 0.7)
        assert surface.depth == 0

    def test_palette_color(self):
        surface = _draw(FOUR_PART, 3, 0.5)
        assert {c.style.color for c in surface.calls} == {FOUR_PART.colors[3]}

    def test_line_style(self):
        line = _draw(FOUR_PART, 0, 0.5).calls[1]
        assert line.style.line_cap == "round"
        assert line.style.line_width == pytest.approx(W / FOUR_PART.stroke_factor)


class TestGeometry:
    """Test the progress to geometry mapping."""

    def test_square_off_screen_at_rest(self):
        rect = _draw(FOUR_PART, 0, 0.0).calls[0]
        assert rect.args[1] >= H

    def test_square_off_screen_at_end(self):
        rect = _draw(FOUR_PART, 0, 1.0).calls[0]
        assert rect.args[1] >= H - 1e-9

    def test_everything_in_place_at_peak(self):
        rect, line, left, right = _draw(FOUR_PART, 0, 0.5).calls
        top = H / 2 - SIZE / 2
        assert rect.args == pytest.approx((W / 2 - SIZE / 2, top, SIZE, SIZE))
        (x1, y1), (x2, y2) = line.args
        assert (x1, y1, x2, y2) == pytest.approx((W / 2 - SIZE / 2, top, W / 2 + SIZE / 2, top))
        assert left.args[0] == pytest.approx((W / 2 - SIZE / 2, top))
        assert right.args[0] == pytest.approx((W / 2 + SIZE / 2, top))
        assert left.args[1] == pytest.approx(EYE_R)
        assert right.args[1] == pytest.approx(EYE_R)

    def test_line_off_screen_at_rest(self):
        (x1, _), (x2, _) = _draw(FOUR_PART, 0, 0.0).calls[1].args
        assert x2 <= 0
        assert x1 < x2

    def test_eyes_closed_at_rest(self):
        _, _, left, right = _draw(FOUR_PART, 0, 0.0).calls
        assert left.args[1] == 0.0
        assert right.args[1] == 0.0
        assert left.args[0] == right.args[0]

    def test_eyes_symmetric(self):
        _, _, left, right = _draw(FOUR_PART, 1, 0.2).calls
        (lx, ly), (rx, ry) = left.args[0], right.args[0]
        assert ly == ry
        assert (W / 2 - lx) == pytest.approx(rx - W / 2)

    def test_square_moves_before_eyes(self):
        """Early in the step the square is moving while the eyes are still closed."""
        rect, _, left, _ = _draw(FOUR_PART, 0, 0.05).calls
        assert rect.args[1] < H + SIZE / 2
        assert left.args[1] == 0.0


class TestEyeVariants:

    def test_four_part_eyes_use_palette(self):
        _, _, left, right = _draw(FOUR_PART, 1, 0.5).calls
        assert left.style.color == FOUR_PART.colors[1]
        assert right.style.color == FOUR_PART.colors[1]

    def test_five_part_eyes_are_cutouts(self):
        rect, _, left, right = _draw(FIVE_PART, 1, 0.5).calls
        assert rect.style.color == FIVE_PART.colors[1]
        assert left.style.color == FIVE_PART.back_color
        assert right.style.color == FIVE_PART.back_color

    def test_five_part_reaches_full_pose_at_peak(self):
        rect, _, left, _ = _draw(FIVE_PART, 0, 0.5).calls
        assert rect.args[1] == pytest.approx(H / 2 - SIZE / 2)
        assert left.args[1] == pytest.approx(EYE_R)


class TestPreconditions:

    @pytest.mark.parametrize("index", [-1, 5, 99])
    def test_color_index_out_of_range(self, index):
        with pytest.raises(PaletteIndexError) as excinfo:
            _draw(FOUR_PART, index, 0.5)
        assert excinfo.value.index == index
        assert excinfo.value.size == 5

    def test_restore_on_failure(self):
        class BrokenCircle(RecordingSurface):
            def circle(self, center, radius, style):
                raise RuntimeError("boom")

        surface = BrokenCircle(width=W, height=H)
        with pytest.raises(RuntimeError):
            draw_square_face_box(surface, FOUR_PART, 0, 0.5)
        assert surface.depth == 0
