"""Pytest configuration and fixtures for texture_toolkit tests."""

import pytest
import numpy as np

from texture_toolkit.core import Image, Gradient


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def red_to_blue():
    """Two-stop gradient from solid red to solid blue."""
    return Gradient([(0.0, (1.0, 0.0, 0.0, 1.0)), (1.0, (0.0, 0.0, 1.0, 1.0))])


@pytest.fixture
def three_stop_gradient():
    """Black -> red at 0.25 -> white."""
    return Gradient([(0.0, '#000000'), (0.25, '#FF0000'), (1.0, '#FFFFFF')])


@pytest.fixture
def random_rgba_image():
    """Synthetic 16x8 RGBA image with random values."""
    rng = np.random.default_rng(42)
    return Image(rng.random((8, 16, 4), dtype=np.float32))


@pytest.fixture
def constant_image():
    """Factory for W x H images with the same value in every component."""
    def _make(value, width=8, height=8):
        return Image(np.full((height, width, 4), value, dtype=np.float32))
    return _make


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def ramp_composer():
    """RampComposer instance."""
    from texture_toolkit.composers import RampComposer
    return RampComposer()


@pytest.fixture
def channel_composer():
    """ChannelComposer instance."""
    from texture_toolkit.composers import ChannelComposer
    return ChannelComposer()


@pytest.fixture
def image_exporter():
    """ImageExporter instance."""
    from texture_toolkit.export import ImageExporter
    return ImageExporter()


@pytest.fixture
def image_loader():
    """ImageLoader instance."""
    from texture_toolkit.export import ImageLoader
    return ImageLoader()


@pytest.fixture
def preview_generator():
    """PreviewGenerator instance."""
    from texture_toolkit.export import PreviewGenerator
    return PreviewGenerator()


@pytest.fixture
def pipeline():
    """TexturePipeline instance."""
    from texture_toolkit.pipeline import TexturePipeline
    return TexturePipeline()


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    output_dir = tmp_path / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that read or write image files")
