"""Unit tests for PreviewGenerator."""

import pytest
import numpy as np

from texture_toolkit.core import Gradient
from texture_toolkit.errors import InvalidParameterError


@pytest.fixture
def four_band_ramp(ramp_composer):
    """Ramp with four solid bands (red, green, blue, white), 4x2 each."""
    gradients = [Gradient.solid(c) for c in ('#FF0000', '#00FF00', '#0000FF', '#FFFFFF')]
    return ramp_composer.compose(gradients, 4, 2)


class TestEnlarge:
    """Test enlarge()."""

    def test_integer_scale(self, preview_generator, four_band_ramp):
        big = preview_generator.enlarge(four_band_ramp, 3)
        assert big.size == (12, 24)

    def test_nearest_neighbour_keeps_values(self, preview_generator, random_rgba_image):
        big = preview_generator.enlarge(random_rgba_image, 2)
        np.testing.assert_array_equal(big.pixels[::2, ::2], random_rgba_image.pixels)

    def test_fractional_scale_minimum_one_pixel(self, preview_generator, four_band_ramp):
        small = preview_generator.enlarge(four_band_ramp, 0.01)
        assert small.size == (1, 1)

    def test_scale_one_returns_copy(self, preview_generator, four_band_ramp):
        same = preview_generator.enlarge(four_band_ramp, 1)
        assert same is not four_band_ramp
        np.testing.assert_array_equal(same.pixels, four_band_ramp.pixels)

    def test_non_positive_scale(self, preview_generator, four_band_ramp):
        with pytest.raises(InvalidParameterError):
            preview_generator.enlarge(four_band_ramp, 0)


class TestBands:
    """Test band extraction and v coordinates."""

    def test_extract_band(self, preview_generator, four_band_ramp):
        band = preview_generator.extract_band(four_band_ramp, 2, 4)
        assert band.size == (4, 2)
        assert np.all(band.pixels == np.array([0.0, 0.0, 1.0, 1.0], dtype=np.float32))

    @pytest.mark.parametrize("index", [-1, 4])
    def test_extract_band_bad_index(self, preview_generator, four_band_ramp, index):
        with pytest.raises(InvalidParameterError):
            preview_generator.extract_band(four_band_ramp, index, 4)

    def test_extract_band_uneven_height(self, preview_generator, four_band_ramp):
        with pytest.raises(InvalidParameterError):
            preview_generator.extract_band(four_band_ramp, 0, 3)

    def test_band_v_coordinate(self, preview_generator):
        assert preview_generator.band_v_coordinate(0, 4) == pytest.approx(0.125)
        assert preview_generator.band_v_coordinate(3, 4) == pytest.approx(0.875)
