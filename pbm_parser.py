import logging
import os
import re

from bitmap import Bitmap, PBMFormat
from errors import OpenError, PBMIOError

logger = logging.getLogger(__name__)

# "<width> <height>", scanf style: whatever fails to parse stays 0
_SIZE_RE = re.compile(rb"\s*(\d+)(?:\s+(\d+))?")


def unpack_byte(value):
    # Bit 7 is the leftmost pixel
    return [(value >> bit) & 1 == 1 for bit in range(7, -1, -1)]


def _read_line(source):
    try:
        return source.readline()
    except OSError as exc:
        raise PBMIOError(f"failed to read PBM data: {exc}") from exc


def _strip_eol(line, drop_cr=True):
    if line.endswith(b"\n"):
        line = line[:-1]
        if drop_cr and line.endswith(b"\r"):
            line = line[:-1]
    return line


def _parse_size(line):
    match = _SIZE_RE.match(line)
    if not match:
        return 0, 0
    width = int(match.group(1))
    height = int(match.group(2)) if match.group(2) else 0
    return width, height


def _decode_plain_row(line):
    row = []
    for ch in line:
        if ch == 0x30:      # '0'
            row.append(False)
        elif ch == 0x31:    # '1'
            row.append(True)
        # Anything else (spaces, separators, noise) is skipped
    return row


def _decode_packed_row(line):
    row = []
    for value in line:
        row.extend(unpack_byte(value))
    return row


def decode(source):
    """Decode a PBM image from a binary stream into a Bitmap.

    Only the first two lines are treated as header. Every following line is one
    row of pixels; rows are taken as they are and never trimmed or padded to the
    declared width.
    """
    magic = _strip_eol(_read_line(source)).decode("ascii", errors="replace")
    # Raises FormatError before any row is read
    fmt = PBMFormat.from_magic(magic)

    width, height = _parse_size(_strip_eol(_read_line(source)))
    logger.debug("PBM header: %s %dx%d", fmt.value, width, height)

    rows = []
    for _ in range(height):
        if fmt is PBMFormat.PLAIN_TEXT:
            rows.append(_decode_plain_row(_strip_eol(_read_line(source))))
        else:
            # A CR byte at the end of a packed row is pixel data
            rows.append(_decode_packed_row(_strip_eol(_read_line(source), drop_cr=False)))

    logger.debug("decoded %d rows", len(rows))
    return Bitmap(rows, width, height, fmt)


class PBMParser:
    def __init__(self, filepath):
        self.filepath = filepath
        self.metadata = {}      # Header information (magic, width, height, file size)
        self.bitmap = None

    def load(self):
        try:
            f = open(self.filepath, "rb")
        except OSError as exc:
            raise OpenError(f"cannot open {self.filepath}: {exc}") from exc

        with f:
            self.bitmap = decode(f)

        self.metadata['magic'] = self.bitmap.format.value
        self.metadata['width'] = self.bitmap.width
        self.metadata['height'] = self.bitmap.height
        self.metadata['file_size'] = os.path.getsize(self.filepath)
        logger.info("loaded %s (%s)", self.filepath, self.bitmap)
        return self.bitmap


def read_pbm(filepath):
    return PBMParser(filepath).load()
