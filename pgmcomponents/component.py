"""A connected group of foreground pixels."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ConnectedComponent:
    """A labelled set of pixel coordinates, kept in the order they were added."""

    id: int = -1
    pixels: list[tuple[int, int]] = field(default_factory=list)

    def add_pixel(self, x: int, y: int) -> None:
        """Append the pixel at column ``x``, row ``y``."""
        self.pixels.append((x, y))

    @property
    def size(self) -> int:
        """Number of pixels in the component."""
        return len(self.pixels)