import dataclasses

import pytest

from pixgrid.pixel import Pixel, normalize_color


def test_color_is_normalized():
    p = Pixel(0, 255, 0, 51)
    assert p.color == (1.0, 0.0, 0.2)
    assert normalize_color(0, 255, 255) == (0.0, 1.0, 1.0)


def test_pixel_is_immutable():
    p = Pixel(3, 1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.r = 9


@pytest.mark.parametrize("args", [(0, 256, 0, 0), (0, 0, -1, 0), (-1, 0, 0, 0)])
def test_out_of_range_values_rejected(args):
    with pytest.raises(ValueError):
        Pixel(*args)
