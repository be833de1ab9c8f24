"""Unit tests for RampPreset."""

import json

import pytest

from texture_toolkit.core import Gradient
from texture_toolkit.utilities import RampPreset
from texture_toolkit.errors import PresetError


class TestRampPreset:
    """Test preset serialization."""

    def test_defaults(self):
        preset = RampPreset()
        assert preset.name == 'NewRampMap'
        assert preset.row_width == 32
        assert preset.row_height == 4
        assert preset.gradients == []

    def test_save_load_round_trip(self, temp_output_dir, red_to_blue, three_stop_gradient):
        preset = RampPreset(
            name='ToonSkin',
            row_width=64,
            row_height=2,
            gradients=[red_to_blue, None, three_stop_gradient]
        )
        path = preset.save(temp_output_dir / "presets" / "toon.json")

        assert RampPreset.load(path) == preset

    def test_round_trip_keeps_float_colours(self, temp_output_dir):
        preset = RampPreset(gradients=[Gradient([(0.0, (0.3, 0.3, 0.3)), (1.0, (1.0, 1.0, 1.0))])])
        loaded = RampPreset.load(preset.save(temp_output_dir / "float.json"))

        assert loaded == preset
        assert loaded.gradients[0].stops[0].color == (0.3, 0.3, 0.3, 1.0)

    def test_json_layout(self, temp_output_dir, red_to_blue):
        path = RampPreset(gradients=[red_to_blue, None]).save(temp_output_dir / "p.json")
        data = json.loads(path.read_text(encoding='utf-8'))

        assert data['gradients'][1] is None
        assert data['gradients'][0]['stops'][1]['color'] == '#0000FFFF'

    def test_missing_keys_use_defaults(self):
        preset = RampPreset.from_dict({'name': 'Partial'})
        assert preset.row_width == 32
        assert preset.gradients == []

    def test_fixed_mode_survives(self):
        preset = RampPreset(gradients=[Gradient.from_colors('#000000', '#FFFFFF', mode='fixed')])
        assert RampPreset.from_dict(preset.to_dict()).gradients[0].mode == 'fixed'

    @pytest.mark.parametrize("data", [
        [],
        {'gradients': [{'stops': []}]},
        {'gradients': [{'stops': [{'position': 0.0}]}]},
        {'gradients': [{'stops': [{'position': 2.0, 'color': '#FFFFFF'}]}]},
        {'row_width': 'wide'},
    ])
    def test_malformed(self, data):
        with pytest.raises(PresetError):
            RampPreset.from_dict(data)

    def test_invalid_json(self, temp_output_dir):
        path = temp_output_dir / "broken.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(PresetError):
            RampPreset.load(path)

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            RampPreset.load(temp_output_dir / "absent.json")
