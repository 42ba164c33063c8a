"""Unit tests for the raster canvas."""

import numpy as np
import pytest
from PIL import Image

from pynoiseflow.palette import BLACK, WHITE, Color
from pynoiseflow.raster import Canvas

RED = Color(1.0, 0.0, 0.0)


@pytest.mark.unit
def test_new_canvas_is_filled_with_background():
    canvas = Canvas(20, 10)
    pixels = canvas.to_array()
    assert pixels.shape == (10, 20, 4)
    assert np.all(pixels == 255)
    assert np.all(Canvas(4, 4, background=BLACK).to_array()[..., :3] == 0)


@pytest.mark.unit
@pytest.mark.parametrize("width, height", [(0, 10), (10, -5)])
def test_rejects_bad_size(width, height):
    with pytest.raises(ValueError):
        Canvas(width, height)


@pytest.mark.unit
def test_set_pixel():
    canvas = Canvas(10, 10)
    assert canvas.set_pixel(3.7, 2.2, RED)
    assert tuple(canvas.to_array()[2, 3]) == (255, 0, 0, 255)
    assert not canvas.set_pixel(10.0, 2.0, RED)
    assert not canvas.set_pixel(-0.5, 2.0, RED)


@pytest.mark.unit
def test_fill_polygon_covers_canvas():
    canvas = Canvas(16, 12)
    canvas.fill_polygon([(0, 0), (16, 0), (16, 12), (0, 12)], RED)
    assert np.all(canvas.to_array()[..., :3] == (255, 0, 0))


@pytest.mark.unit
def test_stroke_path():
    canvas = Canvas(20, 10)
    canvas.stroke_path(np.array([[0.0, 5.0], [19.0, 5.0]]), BLACK)
    pixels = canvas.to_array()
    assert np.all(pixels[5, :, :3] == 0)
    assert np.all(pixels[0, :, :3] == 255)


@pytest.mark.unit
def test_stroke_empty_path_is_noop():
    canvas = Canvas(10, 10)
    canvas.stroke_path(np.empty((0, 2)), BLACK)
    assert np.all(canvas.to_array() == 255)


@pytest.mark.unit
def test_stroke_circle_leaves_center():
    canvas = Canvas(30, 30)
    canvas.stroke_circle((15.0, 15.0), 8.0, BLACK)
    pixels = canvas.to_array()
    assert tuple(pixels[15, 15, :3]) == (255, 255, 255)
    assert (pixels[..., 0] == 0).any()


@pytest.mark.unit
def test_blit_float_and_uint8():
    canvas = Canvas(4, 3)
    canvas.blit(np.full((3, 4, 3), 0.5))
    assert np.all(canvas.to_array() == [128, 128, 128, 255])

    rgba = np.zeros((3, 4, 4), dtype=np.uint8)
    rgba[..., 1] = 200
    rgba[..., 3] = 255
    canvas.blit(rgba)
    np.testing.assert_array_equal(canvas.to_array(), rgba)


@pytest.mark.unit
def test_blit_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Canvas(4, 3).blit(np.zeros((4, 3, 3)))


@pytest.mark.unit
def test_from_array():
    rgb = np.zeros((5, 7, 3), dtype=np.uint8)
    canvas = Canvas.from_array(rgb)
    assert canvas.size == (7, 5)
    assert np.all(canvas.to_array()[..., :3] == 0)


@pytest.mark.unit
def test_save_png(tmp_path):
    canvas = Canvas(12, 8)
    canvas.fill(RED)
    out = tmp_path / "out.png"
    canvas.save(out)
    with Image.open(out) as image:
        assert image.size == (12, 8)
        assert image.convert("RGB").getpixel((0, 0)) == (255, 0, 0)


@pytest.mark.unit
def test_white_constant():
    assert WHITE.to_rgba8() == (255, 255, 255, 255)
