"""In-memory pixel images laid out as 32-bit ZPixmap data."""

from __future__ import annotations

from dataclasses import dataclass, field

BITS_PER_PIXEL = 32
LSB_FIRST = 0
MSB_FIRST = 1

_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, width) pairs for the red, green and blue channel masks.

    The result has six entries: red offset, red width, green offset, green
    width, blue offset, blue width.
    """
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"channel mask must be positive, got {mask:#x}")
        offset = (mask & -mask).bit_length() - 1
        mask >>= offset
        width = (~mask & (mask + 1)).bit_length() - 1
        shifts.extend((offset, width))
    return tuple(shifts)


def color_value(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to the pixel value of a visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones pack
    each channel using the offsets and widths given by :func:`mask_shifts`.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )


@dataclass
class Image:
    """A width x height image of 32-bit pixels, zero-filled when created."""

    width: int
    height: int
    endian: int = LSB_FIRST
    bpp: int = field(default=BITS_PER_PIXEL, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.endian not in (LSB_FIRST, MSB_FIRST):
            raise ValueError(f"invalid byte order {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * _BYTES_PER_PIXEL

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == MSB_FIRST else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 32 bits of ``color`` at (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
            _BYTES_PER_PIXEL, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit pixel value at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder)

    def blit(self, other: Image, x: int, y: int) -> None:
        """Copy ``other`` onto this image with its top-left corner at (x, y).

        The parts of ``other`` that fall outside this image are clipped away.
        """
        x0, x1 = max(0, -x), min(other.width, self.width - x)
        y0, y1 = max(0, -y), min(other.height, self.height - y)
        if x0 >= x1 or y0 >= y1:
            return
        same_order = other.endian == self.endian
        span = (x1 - x0) * _BYTES_PER_PIXEL
        for sy in range(y0, y1):
            if same_order:
                src = sy * other.size_line + x0 * _BYTES_PER_PIXEL
                dst = (sy + y) * self.size_line + (x0 + x) * _BYTES_PER_PIXEL
                self.data[dst:dst + span] = other.data[src:src + span]
            else:
                for sx in range(x0, x1):
                    self.put_pixel(sx + x, sy + y, other.get_pixel(sx, sy))

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed RGB triples, row by row."""
        out = bytearray(self.width * self.height * 3)
        if self.endian == MSB_FIRST:
            red, green, blue = self.data[1::4], self.data[2::4], self.data[3::4]
        else:
            red, green, blue = self.data[2::4], self.data[1::4], self.data[0::4]
        out[0::3] = red
        out[1::3] = green
        out[2::3] = blue
        return bytes(out)