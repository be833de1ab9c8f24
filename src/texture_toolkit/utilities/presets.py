"""Saved ramp configurations.

A RampPreset holds everything needed to regenerate a ramp texture: output
name, band width/height and the gradient list. Presets are stored as JSON.
"""

from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field
from pathlib import Path
import json
import logging

from ..core.gradient import Gradient
from ..errors import PresetError, TextureToolkitError

logger = logging.getLogger(__name__)


DEFAULT_RAMP_NAME = "NewRampMap"
DEFAULT_ROW_WIDTH = 32
DEFAULT_ROW_HEIGHT = 4


@dataclass
class RampPreset:
    """Reusable ramp texture configuration.

    Attributes:
        name: Output texture name, without extension
        row_width: Width of every band in pixels
        row_height: Height of every band in pixels
        gradients: One gradient per band, bottom band first; None leaves a
            band empty

    Example:
        >>> preset = RampPreset(
        ...     name='ToonSkin',
        ...     gradients=[Gradient.from_colors('#3A1F1F', '#F2C9B0')]
        ... )
        >>> preset.save('presets/toon_skin.json')
        >>> RampPreset.load('presets/toon_skin.json') == preset
        True
    """
    name: str = DEFAULT_RAMP_NAME
    row_width: int = DEFAULT_ROW_WIDTH
    row_height: int = DEFAULT_ROW_HEIGHT
    gradients: List[Optional[Gradient]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Export as a JSON-serializable dict."""
        return {
            'name': self.name,
            'row_width': self.row_width,
            'row_height': self.row_height,
            'gradients': [g.to_dict() if g is not None else None for g in self.gradients],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RampPreset':
        """Build a preset from a dict; missing keys take the defaults.

        Raises:
            PresetError: If the content is malformed
        """
        if not isinstance(data, dict):
            raise PresetError(f"Preset must be a JSON object, got {type(data).__name__}")

        try:
            gradients = [
                Gradient.from_dict(g) if g is not None else None
                for g in data.get('gradients', [])
            ]
            return cls(
                name=str(data.get('name', DEFAULT_RAMP_NAME)),
                row_width=int(data.get('row_width', DEFAULT_ROW_WIDTH)),
                row_height=int(data.get('row_height', DEFAULT_ROW_HEIGHT)),
                gradients=gradients,
            )
        except PresetError:
            raise
        except (TextureToolkitError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise PresetError(f"Invalid ramp preset: {e}") from e

    def save(self, filepath: Union[str, Path]) -> Path:
        """Write the preset as JSON.

        Returns:
            Path to saved file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Saved ramp preset '{self.name}' to {filepath}")
        return filepath

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'RampPreset':
        """Read a preset written by save().

        Raises:
            FileNotFoundError: If the file does not exist
            PresetError: If the file is not a valid preset
        """
        filepath = Path(filepath)
        with open(filepath, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise PresetError(f"Preset {filepath} is not valid JSON: {e}") from e

        preset = cls.from_dict(data)
        logger.info(
            f"Loaded ramp preset '{preset.name}' from {filepath} "
            f"({len(preset.gradients)} gradient(s))"
        )
        return preset
