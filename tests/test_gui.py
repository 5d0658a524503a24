import pytest

from sketchpad.gui import main, pixel_to_canvas


def test_top_left_pixel_maps_to_upper_left_corner():
    assert pixel_to_canvas(0, 0, 450, 450) == (-1.0, 1.0)


def test_bottom_right_pixel_maps_to_lower_right_corner():
    assert pixel_to_canvas(450, 450, 450, 450) == (1.0, -1.0)


def test_centre_pixel_maps_to_origin():
    x, y = pixel_to_canvas(225, 225, 450, 450)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)


def test_x_grows_right_and_y_grows_up():
    x1, y1 = pixel_to_canvas(100, 100, 450, 450)
    x2, y2 = pixel_to_canvas(200, 300, 450, 450)
    assert x2 > x1
    assert y2 < y1


@pytest.mark.parametrize("px, py", [(0, 0), (37, 412), (450, 1), (225, 225)])
def test_results_stay_within_unit_square(px, py):
    x, y = pixel_to_canvas(px, py, 450, 450)
    assert -1.0 <= x <= 1.0
    assert -1.0 <= y <= 1.0


def test_non_square_canvas_scales_axes_independently():
    x, y = pixel_to_canvas(200, 50, 400, 100)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)


@pytest.mark.parametrize("width, height", [(0, 450), (450, 0), (-10, 450)])
def test_non_positive_size_rejected(width, height):
    with pytest.raises(ValueError):
        pixel_to_canvas(10, 10, width, height)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2