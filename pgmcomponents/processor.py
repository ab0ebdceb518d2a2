"""Load binary PGM images and extract 4-connected foreground components."""

from __future__ import annotations

import warnings
from collections import deque
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from .component import ConnectedComponent

_WHITESPACE = b" \t\n\r\v\f"
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))

PathType = Union[str, "PathLike[str]"]


class PGMFormatError(ValueError):
    """Raised when a file is not a well-formed binary (P5) PGM image."""


def _skip_whitespace(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    return pos


def _read_token(data: bytes, pos: int) -> tuple[bytes, int]:
    start = pos
    while pos < len(data) and data[pos] not in _WHITESPACE:
        pos += 1
    return data[start:pos], pos


def _parse_pgm(data: bytes) -> tuple[int, int, bytes]:
    pos = _skip_whitespace(data, 0)
    magic, pos = _read_token(data, pos)
    if magic != b"P5":
        raise PGMFormatError(
            f"Malformed PGM file - magic is: {magic.decode('latin-1')}"
        )
    pos = _skip_whitespace(data, pos)

    line = b""
    while pos < len(data):
        end = data.find(b"\n", pos)
        if end == -1:
            line, pos = data[pos:], len(data)
        else:
            line, pos = data[pos:end], end + 1
        if not line.startswith(b"#"):
            break

    tokens = line.split()
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        raise PGMFormatError(
            "Header not correct - unexpected image sizes found: "
            f"{line.decode('latin-1')}"
        ) from None
    if width < 0 or height < 0:
        raise PGMFormatError(
            f"Header not correct - negative image size: {width} {height}"
        )

    pos = _skip_whitespace(data, pos)
    token, pos = _read_token(data, pos)
    try:
        max_grey = int(token)
    except ValueError:
        max_grey = 0
    if max_grey != 255:
        warnings.warn(f"Max grey level incorrect - found: {max_grey}", stacklevel=3)
    if pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1

    size = width * height
    pixels = data[pos:pos + size]
    if len(pixels) < size:
        raise PGMFormatError("Failed to read binary block")
    return width, height, pixels


@dataclass
class PGMImageProcessor:
    """A greyscale image together with the components extracted from it."""

    width: int
    height: int
    image: bytes
    components: list[ConnectedComponent] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.image = bytes(self.image)
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.image) != self.width * self.height:
            raise ValueError(
                f"image holds {len(self.image)} bytes, "
                f"expected {self.width * self.height}"
            )

    @classmethod
    def from_file(cls, filename: PathType) -> "PGMImageProcessor":
        """Read a binary PGM file; raises OSError or PGMFormatError."""
        with open(filename, "rb") as handle:
            data = handle.read()
        width, height, pixels = _parse_pgm(data)
        return cls(width, height, pixels)

    def extract_components(self, threshold: int, min_valid_size: int) -> int:
        """Find 4-connected regions of pixels at or above ``threshold``.

        The threshold is taken as an 8-bit value, so it wraps modulo 256.
        Regions smaller than ``min_valid_size`` are discarded; the rest are
        numbered from 0 in scan order. Returns the number kept.
        """
        threshold %= 256
        width, height, image = self.width, self.height, self.image
        visited = bytearray(width * height)
        self.components = []
        next_id = 0

        for index, value in enumerate(image):
            if visited[index] or value < threshold:
                continue
            component = ConnectedComponent(next_id)
            visited[index] = 1
            queue = deque([divmod(index, width)[::-1]])
            while queue:
                cx, cy = queue.popleft()
                component.add_pixel(cx, cy)
                for dx, dy in _NEIGHBOURS:
                    nx, ny = cx + dx, cy + dy
                    if 0 <= nx < width and 0 <= ny < height:
                        n_index = ny * width + nx
                        if not visited[n_index] and image[n_index] >= threshold:
                            visited[n_index] = 1
                            queue.append((nx, ny))
            if component.size >= min_valid_size:
                self.components.append(component)
                next_id += 1
        return len(self.components)

    def filter_components_by_size(self, min_size: int, max_size: int) -> int:
        """Keep components whose size lies in [min_size, max_size]."""
        self.components = [
            comp for comp in self.components if min_size <= comp.size <= max_size
        ]
        return len(self.components)

    def write_components(self, out_file_name: PathType) -> None:
        """Write a PGM with component pixels at 255 and all else at 0."""
        out_image = bytearray(self.width * self.height)
        for comp in self.components:
            for x, y in comp.pixels:
                out_image[y * self.width + x] = 255
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        with open(out_file_name, "wb") as handle:
            handle.write(header)
            handle.write(out_image)

    @property
    def component_count(self) -> int:
        """Number of components currently held."""
        return len(self.components)

    @property
    def largest_size(self) -> int:
        """Size of the largest component, or 0 when there are none."""
        return max((comp.size for comp in self.components), default=0)

    @property
    def smallest_size(self) -> int:
        """Size of the smallest component, or 0 when there are none."""
        return min((comp.size for comp in self.components), default=0)

    def format_component_data(self, comp: ConnectedComponent) -> str:
        """One-line description of a component."""
        return f"Component ID: {comp.id}; Pixel Count: {comp.size}"

    def print_component_data(self, comp: ConnectedComponent) -> None:
        """Print the one-line description of a component."""
        print(self.format_component_data(comp))