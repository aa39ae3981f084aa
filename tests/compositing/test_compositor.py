"""Tests for hue-keyed compositing."""

import numpy as np
import pytest

from huekey.compositing import composite, key_mask, to_rgba
from huekey.estimation import DominantColor, EstimationConfig, estimate_dominant_color

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


class TestKeyMask:
    def test_black_and_gray_are_never_keyed(self):
        # Black and gray both report hue 0, which this band contains
        color = DominantColor(hue=0.0, tolerance=360.0)
        mask = key_mask([(0, 0, 0), (128, 128, 128), RED], color)
        assert mask.tolist() == [False, False, True]

    def test_low_value_is_not_keyed(self):
        color = DominantColor(hue=120.0, tolerance=20.0)
        assert key_mask([(0, 20, 0)], color).tolist() == [False]

    def test_low_saturation_is_not_keyed(self):
        color = DominantColor(hue=120.0, tolerance=20.0)
        assert key_mask([(220, 255, 220)], color).tolist() == [False]

    def test_hue_band_is_not_circular(self):
        color = DominantColor(hue=359.0, tolerance=5.0)
        assert key_mask([(255, 0, 1), RED], color).tolist() == [True, False]

    def test_keeps_leading_shape(self, random_image):
        mask = key_mask(random_image, DominantColor(hue=120.0, tolerance=30.0))
        assert mask.shape == random_image.shape[:2]


class TestComposite:
    def test_end_to_end_scenario(self):
        source = np.array([[GREEN, RED]], dtype=np.uint8)
        background = np.array([[BLUE, BLUE]], dtype=np.uint8)

        color = estimate_dominant_color([GREEN], EstimationConfig.mode(20))
        assert color.hue == pytest.approx(120.0)

        output = composite(source, color, background)

        assert output.shape == (1, 2, 4)
        assert output[0, 0].tolist() == [0, 0, 255, 255]
        assert output[0, 1].tolist() == [255, 0, 0, 255]

    def test_exact_match_collapse(self):
        color = estimate_dominant_color(np.full((4, 4, 3), GREEN, dtype=np.uint8))
        assert color.tolerance == 0.0

        source = np.array(
            [[GREEN, (10, 255, 0), (0, 20, 0), (220, 255, 220), RED]], dtype=np.uint8
        )
        background = np.full_like(source, 0)
        background[..., 2] = 255

        output = composite(source, color, background)

        assert output[0, 0, :3].tolist() == list(BLUE)
        np.testing.assert_array_equal(output[0, 1:, :3], source[0, 1:])

    def test_background_alpha_is_carried(self):
        color = DominantColor(hue=120.0, tolerance=10.0)
        output = composite([GREEN], color, [(0, 0, 255, 40)])
        assert output.tolist() == [[0, 0, 255, 40]]

    def test_source_alpha_passes_through(self):
        color = DominantColor(hue=120.0, tolerance=10.0)
        output = composite([(255, 0, 0, 7)], color, [BLUE])
        assert output.tolist() == [[255, 0, 0, 7]]

    def test_transparent_source_pixels_are_keyed(self):
        color = DominantColor(hue=120.0, tolerance=10.0)
        output = composite([(0, 255, 0, 0)], color, [BLUE])
        assert output.tolist() == [[0, 0, 255, 255]]

    def test_unkeyed_pixels_are_unchanged(self, random_image):
        color = DominantColor(hue=-100.0, tolerance=1.0)
        background = np.zeros_like(random_image)
        output = composite(random_image, color, background)
        np.testing.assert_array_equal(output[..., :3], random_image)
        assert np.all(output[..., 3] == 255)

    def test_is_deterministic(self, random_image):
        background = random_image[::-1].copy()
        color = estimate_dominant_color(random_image)
        first = composite(random_image, color, background)
        second = composite(random_image, color, background)
        assert first.tobytes() == second.tobytes()

    def test_does_not_modify_inputs(self):
        source = np.array([[GREEN]], dtype=np.uint8)
        background = np.array([[BLUE]], dtype=np.uint8)
        composite(source, DominantColor(120.0, 10.0), background)
        assert source.tolist() == [[list(GREEN)]]

    def test_shorter_background_fails(self):
        color = DominantColor(hue=120.0, tolerance=20.0)
        with pytest.raises(ValueError, match="dimensions"):
            composite([GREEN, RED], color, [BLUE])

    def test_transposed_background_fails(self):
        color = DominantColor(hue=120.0, tolerance=20.0)
        source = np.zeros((2, 3, 3), dtype=np.uint8)
        background = np.zeros((3, 2, 3), dtype=np.uint8)
        with pytest.raises(ValueError):
            composite(source, color, background)


class TestToRgba:
    def test_adds_opaque_alpha(self):
        rgba = to_rgba(np.array([[1, 2, 3]], dtype=np.uint8))
        assert rgba.tolist() == [[1, 2, 3, 255]]

    def test_copies_rgba(self):
        pixels = np.array([[1, 2, 3, 4]], dtype=np.uint8)
        rgba = to_rgba(pixels)
        rgba[0, 0] = 9
        assert pixels[0, 0] == 1
