import numpy as np
import pytest

from pixgrid.blur import blur_grid, blur_pixel, blurred_color, surrounding_pixels
from pixgrid.pixel import Pixel


def test_zero_distance_returns_own_color(four_pixels):
    for p in four_pixels:
        assert blur_pixel(four_pixels, p, 2, 2, blur_distance=0, weight=1.0) == p.color
        assert surrounding_pixels(four_pixels, p, 2, 2, 0) == []


def test_two_by_two_example(four_pixels):
    target = four_pixels[0]
    neighbors = surrounding_pixels(four_pixels, target, 2, 2, 1)
    assert [p.index for p in neighbors] == [1, 2, 3]
    r, g, b = blur_pixel(four_pixels, target, 2, 2, blur_distance=1, weight=1.0)
    assert r == pytest.approx(0.5)
    assert g == pytest.approx(0.5)
    assert b == pytest.approx(0.25)


@pytest.mark.parametrize("blur_distance", [0, 1, 3, 30])
@pytest.mark.parametrize("weight", [0.0, 0.03, 1.0, 7.5])
def test_uniform_grid_is_invariant(uniform_grid, blur_distance, weight):
    pixels = uniform_grid(6)
    expected = pixels[0].color
    for p in (pixels[0], pixels[14], pixels[35]):
        assert blur_pixel(pixels, p, 6, 6, blur_distance, weight) == pytest.approx(expected)
    out = blur_grid(pixels, 6, 6, blur_distance, weight)
    assert np.allclose(out, np.array(expected)[None, :])


@pytest.mark.parametrize("blur_distance", [1, 2, 3])
def test_corners_have_fewer_neighbors(uniform_grid, blur_distance):
    pixels = uniform_grid(9)
    center = pixels[4 * 9 + 4]
    interior = surrounding_pixels(pixels, center, 9, 9, blur_distance)
    assert len(interior) == (2 * blur_distance + 1) ** 2 - 1
    for corner in (0, 8, 72, 80):
        got = surrounding_pixels(pixels, pixels[corner], 9, 9, blur_distance)
        assert len(got) == (blur_distance + 1) ** 2 - 1
        assert len(got) < len(interior)


def test_no_wraparound():
    # 3x3 grid, left column red, everything else black
    pixels = [Pixel(i, 255 if i % 3 == 0 else 0, 0, 0) for i in range(9)]
    right_middle = pixels[5]
    neighbor_idx = [p.index for p in surrounding_pixels(pixels, right_middle, 3, 3, 1)]
    assert neighbor_idx == [1, 2, 4, 7, 8]
    assert blur_pixel(pixels, right_middle, 3, 3, 1, 1.0) == (0.0, 0.0, 0.0)


def test_short_sequence_is_bounds_checked():
    pixels = [Pixel(i, 255, 255, 255) for i in range(5)]
    neighbors = surrounding_pixels(pixels, pixels[4], 3, 3, 1)
    assert max(p.index for p in neighbors) < 5


def test_blurred_color_weights():
    center = Pixel(0, 255, 0, 0)
    neighbors = [Pixel(1, 0, 0, 255)]
    r, g, b = blurred_color(center, neighbors, 3.0)
    assert r == pytest.approx(0.25)
    assert g == 0.0
    assert b == pytest.approx(0.75)
    assert blurred_color(center, neighbors, 0.0) == (1.0, 0.0, 0.0)


def test_grid_matches_single_pixel(gradient_rgba):
    from pixgrid.extract import extract_pixels

    pixels = extract_pixels(gradient_rgba[:12, :12])
    out = blur_grid(pixels, 12, 12, blur_distance=2, weight=0.03)
    assert out.shape == (144, 3)
    for p in pixels:
        assert np.allclose(out[p.index], blur_pixel(pixels, p, 12, 12, 2, 0.03))


def test_empty_grid():
    assert blur_grid([], 4, 4, 1, 1.0).shape == (0, 3)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(columns=0, rows=2, blur_distance=1, weight=1.0),
        dict(columns=2, rows=2, blur_distance=-1, weight=1.0),
        dict(columns=2, rows=2, blur_distance=1, weight=-0.5),
    ],
)
def test_invalid_parameters(four_pixels, kwargs):
    with pytest.raises(ValueError):
        blur_grid(four_pixels, **kwargs)
    with pytest.raises(ValueError):
        blur_pixel(four_pixels, four_pixels[0], **kwargs)
