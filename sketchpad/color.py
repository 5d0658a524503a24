"""RGB colour value with channels in the range 0.0 to 1.0."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An immutable RGB colour; the default is black."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def to_bytes(self) -> tuple[int, int, int]:
        """Return the channels scaled to 0-255 and rounded half up."""
        return tuple(int(channel * 255 + 0.5) for channel in (self.r, self.g, self.b))