import logging
import sys

from config import get_config
from errors import PBMError
from logger import setup_logging
from pbm_parser import read_pbm
from pbm_writer import save_pbm

log = logging.getLogger("pbm.demo")


def run(input_path, output_path):
    bitmap = read_pbm(input_path)

    log.info("PBM Image:")
    log.info("Magic Number: %s", bitmap.format.value)
    log.info("Width: %d", bitmap.width)
    log.info("Height: %d", bitmap.height)
    log.info("Data: %s", bitmap.rows)

    width, height = bitmap.size()
    log.info("Image Size: %d x %d", width, height)

    # Callers validate coordinates, at/set fault on anything outside the image
    if 2 < width and 3 < height:
        log.info("Value at (2, 3): %s", bitmap.at(2, 3))
        bitmap.set(2, 3, True)
        log.info("After setting value at (2, 3) to true: %s", bitmap.rows)
    else:
        log.warning("Pixel (2, 3) is outside the %dx%d image, skipping", width, height)

    save_pbm(bitmap, output_path)
    log.info("Image saved successfully.")
    return bitmap


def main():
    config = get_config()
    setup_logging(config["log_level"])
    try:
        run(config["input_path"], config["output_path"])
    except PBMError as exc:
        log.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
