"""Integration tests for the command-line front end."""

import pytest
import numpy as np
from PIL import Image as PILImage

from texture_toolkit.cli import build_parser, main
from texture_toolkit.utilities import RampPreset


@pytest.fixture
def preset_file(temp_output_dir):
    path = temp_output_dir / "ramp.json"
    assert main(['init-preset', str(path), '--name', 'Starter']) == 0
    return path


@pytest.mark.integration
class TestCli:
    """Test main() end to end."""

    def test_init_preset(self, preset_file):
        preset = RampPreset.load(preset_file)
        assert preset.name == 'Starter'
        assert len(preset.gradients) == 1

    def test_ramp(self, preset_file, temp_output_dir):
        out_dir = temp_output_dir / "ramps"
        assert main(['ramp', str(preset_file), '-o', str(out_dir), '-f', 'png']) == 0

        with PILImage.open(out_dir / "Starter.png") as img:
            assert img.size == (32, 4)

    def test_ramp_size_overrides(self, preset_file, temp_output_dir):
        args = ['ramp', str(preset_file), '-o', str(temp_output_dir),
                '--row-width', '8', '--row-height', '1']
        assert main(args) == 0

        with PILImage.open(temp_output_dir / "Starter.tga") as img:
            assert img.size == (8, 1)

    def test_mix_and_separate(self, temp_output_dir):
        grey = temp_output_dir / "Metal.png"
        PILImage.fromarray(np.full((2, 2), 200, dtype=np.uint8)).save(grey)

        assert main(['mix', '-r', str(grey), '-a', str(grey), '--use-roughness']) == 0
        mask = temp_output_dir / "Metal_MaskMap.png"
        with PILImage.open(mask) as img:
            assert img.getpixel((0, 0)) == (200, 0, 0, 55)

        assert main(['separate', str(mask)]) == 0
        assert (temp_output_dir / "Metal_MaskMap_A.png").exists()

    def test_missing_preset_exit_code(self, temp_output_dir):
        assert main(['ramp', str(temp_output_dir / "absent.json")]) == 1

    def test_mismatch_exit_code(self, temp_output_dir):
        small = temp_output_dir / "s.png"
        large = temp_output_dir / "l.png"
        PILImage.fromarray(np.zeros((2, 2), dtype=np.uint8)).save(small)
        PILImage.fromarray(np.zeros((4, 4), dtype=np.uint8)).save(large)
        assert main(['mix', '-r', str(small), '-g', str(large)]) == 1

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unreadable_image_exit_code(self, temp_output_dir):
        bad = temp_output_dir / "bad.png"
        bad.write_text("not an image", encoding='utf-8')
        assert main(['mix', '-r', str(bad)]) == 1
