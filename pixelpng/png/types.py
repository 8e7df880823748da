from __future__ import annotations

from dataclasses import dataclass

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Raster:
    """Filtered RGBA scanline buffer consumed by the PNG encoder."""

    data: bytes
    width: int

    @property
    def stride(self) -> int:
        """Return the byte length of one scanline, filter byte included."""
        return 1 + BYTES_PER_PIXEL * self.width

    def validate(self) -> None:
        """Validate dimensions for PNG encoding."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if not self.data:
            raise ValueError("Raster has no scanlines")
        if len(self.data) % self.stride != 0:
            raise ValueError("Data length must be a multiple of the scanline stride")

    @property
    def height(self) -> int:
        """Return raster height computed from width and data length."""
        self.validate()
        return len(self.data) // self.stride

    def row(self, y: int) -> bytes:
        """Return scanline ``y`` including its filter byte."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        start = y * self.stride
        return self.data[start : start + self.stride]
