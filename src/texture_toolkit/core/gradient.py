"""Colour gradients sampled by the ramp composer.

A Gradient is an immutable list of (position, colour) stops. Evaluation is
linear between the bracketing stops ('blend' mode) or a step to the next stop
('fixed' mode), and clamps at both ends.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Literal, Sequence, Tuple, Union
from dataclasses import dataclass
import logging
import numpy as np

from ..errors import EmptyInputError, InvalidParameterError
from .image import RGBA

logger = logging.getLogger(__name__)


GradientMode = Literal['blend', 'fixed']
ColorLike = Union[str, Sequence[float]]

_MODES = ('blend', 'fixed')


def parse_color(color: ColorLike) -> RGBA:
    """Parse an RGB/RGBA float tuple or '#RRGGBB' / '#RRGGBBAA' hex string.

    RGB colours get alpha 1. Float components must lie in [0, 1].

    Raises:
        InvalidParameterError: If the colour cannot be parsed
    """
    if isinstance(color, str):
        text = color.strip().lstrip('#')
        if len(text) not in (6, 8):
            raise InvalidParameterError(f"Hex colour must be #RRGGBB or #RRGGBBAA, got {color!r}")
        try:
            components = [int(text[i:i + 2], 16) / 255.0 for i in range(0, len(text), 2)]
        except ValueError:
            raise InvalidParameterError(f"Invalid hex colour: {color!r}") from None
    else:
        try:
            components = [float(c) for c in color]
        except (TypeError, ValueError):
            raise InvalidParameterError(f"Invalid colour: {color!r}") from None

    if len(components) == 3:
        components.append(1.0)
    if len(components) != 4:
        raise InvalidParameterError(f"Colour must have 3 or 4 components, got {color!r}")
    if any(c < 0.0 or c > 1.0 for c in components):
        raise InvalidParameterError(f"Colour components must be in [0, 1], got {color!r}")

    return (components[0], components[1], components[2], components[3])


def color_to_hex(color: Sequence[float]) -> str:
    """Format an RGBA float colour as '#RRGGBBAA'."""
    return '#' + ''.join(
        f"{int(np.floor(np.clip(c, 0.0, 1.0) * 255.0 + 0.5)):02X}" for c in color
    )


def _serialize_color(color: RGBA) -> Union[str, List[float]]:
    """Hex when 8-bit hex reproduces the colour exactly, else a float list."""
    text = color_to_hex(color)
    if parse_color(text) == tuple(color):
        return text
    return [float(c) for c in color]


@dataclass(frozen=True)
class GradientStop:
    """A single colour key.

    Attributes:
        position: Location along the gradient in [0, 1]
        color: RGBA colour, components in [0, 1]
    """
    position: float
    color: RGBA

    @classmethod
    def create(cls, position: float, color: ColorLike) -> 'GradientStop':
        """Validate and build a stop from any accepted colour form."""
        try:
            position = float(position)
        except (TypeError, ValueError):
            raise InvalidParameterError(f"Stop position must be a number, got {position!r}") from None
        if not 0.0 <= position <= 1.0:
            raise InvalidParameterError(f"Stop position must be in [0, 1], got {position}")
        return cls(position=position, color=parse_color(color))


class Gradient:
    """Immutable colour gradient.

    Example:
        >>> red_to_blue = Gradient([(0.0, '#FF0000'), (1.0, '#0000FF')])
        >>> red_to_blue.evaluate(0.5)
        (0.5, 0.0, 0.5, 1.0)
        >>> steps = Gradient.from_colors('#000000', '#FFFFFF', mode='fixed')
    """

    def __init__(
        self,
        stops: Iterable[Union[GradientStop, Tuple[float, ColorLike]]],
        mode: GradientMode = 'blend'
    ):
        """Initialize the Gradient.

        Args:
            stops: GradientStop objects or (position, colour) pairs, any order
            mode: 'blend' (linear) or 'fixed' (stepped)

        Raises:
            EmptyInputError: If no stops are given
            InvalidParameterError: For a bad mode, position or colour
        """
        if mode not in _MODES:
            raise InvalidParameterError(f"Unknown gradient mode: {mode!r}. Use one of {_MODES}")

        parsed = [
            s if isinstance(s, GradientStop) else GradientStop.create(*s)
            for s in stops
        ]
        if not parsed:
            raise EmptyInputError("Gradient needs at least one stop")

        # Stable sort keeps the given order for stops sharing a position
        parsed.sort(key=lambda s: s.position)

        self._stops: Tuple[GradientStop, ...] = tuple(parsed)
        self._mode = mode

        self._positions = np.array([s.position for s in parsed], dtype=np.float64)
        self._colors = np.array([s.color for s in parsed], dtype=np.float64)
        self._positions.setflags(write=False)
        self._colors.setflags(write=False)

    @classmethod
    def from_colors(cls, *colors: ColorLike, mode: GradientMode = 'blend') -> 'Gradient':
        """Build a gradient with evenly spaced stops.

        A single colour produces a solid gradient.
        """
        if not colors:
            raise EmptyInputError("Gradient needs at least one colour")
        if len(colors) == 1:
            return cls([(0.0, colors[0])], mode=mode)
        last = len(colors) - 1
        return cls([(i / last, c) for i, c in enumerate(colors)], mode=mode)

    @classmethod
    def solid(cls, color: ColorLike) -> 'Gradient':
        return cls([(0.0, color)])

    @property
    def stops(self) -> Tuple[GradientStop, ...]:
        return self._stops

    @property
    def mode(self) -> GradientMode:
        return self._mode

    def evaluate(self, t: float) -> RGBA:
        """Colour at t (clamped to [0, 1])."""
        r, g, b, a = self.evaluate_many(np.array([t], dtype=np.float64))[0]
        return (float(r), float(g), float(b), float(a))

    def evaluate_many(self, ts: np.ndarray) -> np.ndarray:
        """Vectorized evaluation.

        Args:
            ts: 1-D array of sample positions

        Returns:
            float64 array of shape (len(ts), 4)
        """
        ts = np.clip(np.asarray(ts, dtype=np.float64).reshape(-1), 0.0, 1.0)

        if self._mode == 'fixed':
            # Colour of the first stop at or after t; past the last stop, the last colour
            index = np.searchsorted(self._positions, ts, side='left')
            index = np.minimum(index, len(self._positions) - 1)
            return self._colors[index].copy()

        # np.interp clamps to the end colours outside the stop range
        return np.stack(
            [np.interp(ts, self._positions, self._colors[:, c]) for c in range(4)],
            axis=1
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export as a JSON-serializable dict."""
        return {
            'mode': self._mode,
            'stops': [
                {'position': s.position, 'color': _serialize_color(s.color)}
                for s in self._stops
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Gradient':
        """Build from the layout produced by to_dict().

        Colours may be hex strings or float lists.
        """
        stops: List[GradientStop] = [
            GradientStop.create(entry['position'], entry['color'])
            for entry in data.get('stops', [])
        ]
        return cls(stops, mode=data.get('mode', 'blend'))

    def __eq__(self, other):
        if not isinstance(other, Gradient):
            return NotImplemented
        return self._mode == other._mode and self._stops == other._stops

    def __hash__(self):
        return hash((self._mode, self._stops))

    def __repr__(self):
        stops = ', '.join(f"{s.position:g}:{color_to_hex(s.color)}" for s in self._stops)
        return f"Gradient([{stops}], mode={self._mode!r})"
