from enum import Enum

from errors import FormatError


class PBMFormat(Enum):
    PLAIN_TEXT = "P1"       # ASCII '0'/'1' digits
    PACKED_BINARY = "P4"    # 8 pixels per byte, MSB first

    @classmethod
    def from_magic(cls, magic):
        for fmt in cls:
            if fmt.value == magic:
                return fmt
        raise FormatError(f"unsupported format: {magic!r}")


class Bitmap:
    """Monochrome pixel grid. True is a black (set) pixel, row 0 is the top."""

    def __init__(self, rows, width, height, fmt=PBMFormat.PLAIN_TEXT):
        # Own the grid, never alias the caller's rows
        self.rows = [list(row) for row in rows]
        self.width = width
        self.height = height
        self.format = fmt

    @classmethod
    def blank(cls, width, height, fmt=PBMFormat.PLAIN_TEXT):
        return cls([[False] * width for _ in range(height)], width, height, fmt)

    def size(self):
        return self.width, self.height

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def at(self, x, y):
        self._check(x, y)
        return self.rows[y][x]

    def set(self, x, y, value):
        self._check(x, y)
        self.rows[y][x] = bool(value)

    def invert(self):
        for y in range(self.height):
            row = self.rows[y]
            for x in range(self.width):
                row[x] = not row[x]

    def flip(self):
        # Horizontal mirror, middle column of odd widths stays put
        last = self.width - 1
        for y in range(self.height):
            row = self.rows[y]
            for x in range(self.width // 2):
                row[x], row[last - x] = row[last - x], row[x]

    def flop(self):
        # Vertical mirror, swaps whole rows
        last = self.height - 1
        for y in range(self.height // 2):
            self.rows[y], self.rows[last - y] = self.rows[last - y], self.rows[y]

    def set_format(self, fmt):
        # Only changes how the bitmap is written out
        if not isinstance(fmt, PBMFormat):
            fmt = PBMFormat.from_magic(fmt)
        self.format = fmt

    def same_pixels(self, other):
        return (self.width, self.height, self.rows) == (other.width, other.height, other.rows)

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.same_pixels(other) and self.format == other.format

    def __repr__(self):
        return f"Bitmap({self.format.value}, {self.width}x{self.height})"
