import logging

from bitmap import PBMFormat
from errors import OpenError, PBMIOError

logger = logging.getLogger(__name__)


def pack_bits(pixels):
    # MSB-first, missing tail positions stay 0
    value = 0
    for j, pixel in enumerate(pixels[:8]):
        if pixel:
            value |= 1 << (7 - j)
    return value


def _encode_plain_row(row):
    # Every token keeps its trailing space, the last one included
    return b"".join(b"1 " if pixel else b"0 " for pixel in row)


def _encode_packed_row(row):
    return bytes(pack_bits(row[i:i + 8]) for i in range(0, len(row), 8))


def encode(bitmap):
    """Serialize a Bitmap to PBM bytes in its current format.

    Rows are written exactly as stored; nothing is validated against the
    declared width and height.
    """
    out = bytearray()
    out += f"{bitmap.format.value}\n{bitmap.width} {bitmap.height}\n".encode("ascii")

    encode_row = _encode_plain_row if bitmap.format is PBMFormat.PLAIN_TEXT else _encode_packed_row
    for row in bitmap.rows:
        out += encode_row(row)
        out += b"\n"
    return bytes(out)


def write_pbm(bitmap, stream):
    data = encode(bitmap)
    try:
        stream.write(data)
        stream.flush()
    except OSError as exc:
        raise PBMIOError(f"failed to write PBM data: {exc}") from exc
    logger.debug("wrote %d bytes (%s)", len(data), bitmap)
    return len(data)


class PBMWriter:

    def __init__(self, filepath):
        self.filepath = filepath

    def save(self, bitmap):
        try:
            f = open(self.filepath, "wb")
        except OSError as exc:
            raise OpenError(f"cannot create {self.filepath}: {exc}") from exc

        # A failed write may leave a partial file behind
        with f:
            written = write_pbm(bitmap, f)

        logger.info("saved %s to %s", bitmap, self.filepath)
        return {
            "path": self.filepath,
            "bytes_written": written,
            "format": bitmap.format.value,
        }


def save_pbm(bitmap, filepath):
    return PBMWriter(filepath).save(bitmap)
