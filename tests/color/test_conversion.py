"""Tests for RGB to HSV conversion."""

import numpy as np
import pytest

from huekey.color import as_pixel_array, pixel_to_hsv, rgb_to_hsv, srgb_to_linear


class TestPrimaryColors:
    """Hue, saturation and value of fully saturated colors."""

    @pytest.mark.parametrize(
        "rgb, hue",
        [
            ((255, 0, 0), 0.0),
            ((255, 255, 0), 60.0),
            ((0, 255, 0), 120.0),
            ((0, 255, 255), 180.0),
            ((0, 0, 255), 240.0),
            ((255, 0, 255), 300.0),
        ],
    )
    def test_hue(self, rgb, hue):
        h, s, v = pixel_to_hsv(*rgb)
        assert h == pytest.approx(hue)
        assert s == pytest.approx(1.0)
        assert v == pytest.approx(1.0)

    def test_black_is_achromatic(self):
        assert pixel_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)

    def test_gray_has_no_saturation(self):
        h, s, v = pixel_to_hsv(128, 128, 128)
        assert h == 0.0
        assert s == 0.0
        assert v == pytest.approx(0.2158, abs=1e-3)


class TestLinearisation:
    def test_endpoints(self):
        linear = srgb_to_linear(np.array([0, 255], dtype=np.uint8))
        assert linear[0] == 0.0
        assert linear[1] == pytest.approx(1.0)

    def test_dark_values_use_linear_segment(self):
        linear = srgb_to_linear(np.array([10], dtype=np.uint8))
        assert linear[0] == pytest.approx(10 / 255 / 12.92)

    def test_midtones_are_darkened(self):
        linear = srgb_to_linear(np.array([128], dtype=np.uint8))
        assert linear[0] < 128 / 255

    def test_hue_is_computed_in_linear_light(self):
        # Gamma-space hue of (255, 128, 0) would be ~30 degrees
        h, _, _ = pixel_to_hsv(255, 128, 0)
        assert h == pytest.approx(60.0 * srgb_to_linear(np.array([128]))[0])


class TestHueRange:
    def test_hues_stay_below_360(self, random_image):
        hsv = rgb_to_hsv(random_image)
        assert hsv.shape == random_image.shape
        assert np.all(hsv[..., 0] >= 0.0)
        assert np.all(hsv[..., 0] < 360.0)
        assert np.all((hsv[..., 1:] >= 0.0) & (hsv[..., 1:] <= 1.0))

    def test_reds_just_below_wrap(self):
        h, _, _ = pixel_to_hsv(255, 0, 1)
        assert 359.5 < h < 360.0

    def test_alpha_is_ignored(self):
        opaque = rgb_to_hsv(np.array([[10, 200, 30, 255]], dtype=np.uint8))
        clear = rgb_to_hsv(np.array([[10, 200, 30, 0]], dtype=np.uint8))
        np.testing.assert_array_equal(opaque, clear)

    def test_conversion_is_deterministic(self, random_image):
        first = rgb_to_hsv(random_image)
        second = rgb_to_hsv(random_image.copy())
        assert first.tobytes() == second.tobytes()


class TestPixelArray:
    def test_accepts_tuples(self):
        array = as_pixel_array([(1, 2, 3), (4, 5, 6)])
        assert array.shape == (2, 3)
        assert array.dtype == np.uint8

    def test_empty_iterable(self):
        assert as_pixel_array([]).shape == (0, 3)

    def test_rejects_wrong_channel_count(self):
        with pytest.raises(ValueError):
            as_pixel_array(np.zeros((2, 2, 2), dtype=np.uint8))
