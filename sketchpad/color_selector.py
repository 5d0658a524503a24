"""Colour picker state: twelve preset colours plus a custom RGB entry."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .color import Color
from .enums import ColorName

_PRESETS: dict[ColorName, tuple[int, int, int]] = {
    ColorName.RED: (255, 0, 0),
    ColorName.ORANGE: (255, 127, 0),
    ColorName.YELLOW: (255, 255, 0),
    ColorName.GREEN: (0, 255, 0),
    ColorName.BLUE: (0, 0, 255),
    ColorName.INDIGO: (75, 0, 130),
    ColorName.VIOLET: (148, 0, 211),
    ColorName.PINK: (255, 192, 203),
    ColorName.WHITE: (255, 255, 255),
    ColorName.LIGHT_GREY: (211, 211, 211),
    ColorName.DARK_GREY: (169, 169, 169),
    ColorName.BLACK: (0, 0, 0),
}

_PRESET_FOR_BYTES = {rgb: name for name, rgb in _PRESETS.items()}

MISSING_INPUT_MESSAGE = "Select or enter RGB of a color."


class Channel(Enum):
    """The three RGB entry fields."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"


class MissingColorInput(ValueError):
    """Raised when a colour is confirmed while an RGB field is empty."""

    def __init__(self, message: str = MISSING_INPUT_MESSAGE) -> None:
        super().__init__(message)


def clamp(value: int, low: int, high: int) -> int:
    """Limit ``value`` to the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def preset_color(name: ColorName) -> Color:
    """Return the colour of a preset; ``ColorName.CUSTOM`` has none."""
    try:
        r, g, b = _PRESETS[name]
    except KeyError:
        raise ValueError(f"not a preset colour: {name!r}") from None
    return Color(r / 255, g / 255, b / 255)


def _parse(text: str) -> int:
    """Read an integer field the way an integer entry does: empty means 0."""
    return int(text) if text else 0


class ColorSelector:
    """Holds the chosen preset or confirmed custom colour and the RGB fields.

    ``on_change`` is called with the selector whenever a preset is picked
    or a colour is confirmed.
    """

    def __init__(self, on_change: Optional[Callable[["ColorSelector"], None]] = None) -> None:
        self.on_change = on_change
        self._preset: ColorName = ColorName.RED
        self._custom = False
        self._confirmed: tuple[int, int, int] = _PRESETS[ColorName.RED]
        self._inputs: dict[Channel, str] = {}
        self.update_rgb_inputs()

    @property
    def inputs(self) -> dict[Channel, str]:
        """The current text of each RGB field."""
        return dict(self._inputs)

    @property
    def using_custom_color(self) -> bool:
        """Whether the active colour is a confirmed non-preset value."""
        return self._custom

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def _write_inputs(self, rgb: tuple[int, int, int]) -> None:
        self._inputs = {channel: str(value) for channel, value in zip(Channel, rgb)}

    def select_preset(self, name: ColorName) -> None:
        """Pick a preset colour, show its RGB values and notify."""
        if name not in _PRESETS:
            raise ValueError(f"not a preset colour: {name!r}")
        self._custom = False
        self._preset = name
        self.update_rgb_inputs()
        self._notify()

    def set_input(self, channel: Channel, text: str) -> None:
        """Type ``text`` into a field; only integers or an empty field are accepted."""
        text = text.strip()
        if text:
            try:
                int(text)
            except ValueError:
                raise ValueError(f"not an integer: {text!r}") from None
        self._inputs[channel] = text

    def adjust(self, channel: Channel, delta: int) -> None:
        """Step one field by ``delta`` and clamp all fields to 0..255."""
        values = {ch: _parse(self._inputs.get(ch, "")) for ch in Channel}
        values[channel] += delta
        self._write_inputs(tuple(clamp(values[ch], 0, 255) for ch in Channel))

    def clear_inputs(self) -> None:
        """Empty all three fields."""
        self._inputs = {channel: "" for channel in Channel}

    def confirm(self) -> None:
        """Apply the typed RGB values, matching a preset where they equal one."""
        if any(not self._inputs.get(channel) for channel in Channel):
            raise MissingColorInput()
        rgb = tuple(clamp(_parse(self._inputs[ch]), 0, 255) for ch in Channel)
        self._confirmed = rgb
        preset = _PRESET_FOR_BYTES.get(rgb)
        if preset is None:
            self._custom = True
        else:
            self._custom = False
            self._preset = preset
        self._notify()

    def update_rgb_inputs(self) -> None:
        """Refresh the fields from the active colour."""
        self._write_inputs(self.color().to_bytes())

    def color(self) -> Color:
        """The active colour: the confirmed custom value or the preset."""
        if self._custom:
            r, g, b = self._confirmed
            return Color(r / 255, g / 255, b / 255)
        return preset_color(self._preset)

    def highlighted(self) -> Optional[ColorName]:
        """The preset shown as selected, or None while a custom colour is active."""
        return None if self._custom else self._preset