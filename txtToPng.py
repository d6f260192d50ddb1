## Convert a .txt file of comma separated pixel values in [0, 1] into a .png image
## Usage: python txtToPng.py <name>
## Example: python txtToPng.py res  (reads res.txt, writes res.png, deletes res.txt)

import os
import sys
import logging
import argparse
from pathlib import Path
from utils import denormalize, save_grayscale


def parse_pixels(contents):
    """
    Parse rows of comma separated values into a (rows, columns) uint8 array.

    Empty tokens are dropped, so a trailing comma on a row is harmless, and
    blank lines are skipped. Every row must be as long as the first one.
    """
    rows = []
    for line_number, line in enumerate(contents.split("\n"), start=1):
        row = [float(val) for val in line.split(",") if val.strip() != ""]
        if not row:
            continue
        if rows and len(row) != len(rows[0]):
            raise ValueError(
                f"Line {line_number} has {len(row)} values, expected {len(rows[0])}"
            )
        rows.append(row)
    if not rows:
        raise ValueError("No pixel values found")
    return denormalize(rows)


def txt_to_png(name):
    txt_filename = Path(f"{name}.txt")
    png_filename = Path(f"{name}.png")
    contents = txt_filename.read_text(encoding="utf-8")
    pixels = parse_pixels(contents)
    save_grayscale(pixels, png_filename)
    logging.info(f"Image successfully saved as {png_filename}")
    logging.info(f"Image size: {pixels.shape[1]} x {pixels.shape[0]}")
    # The image is on disk, a failed delete only leaves the text file behind
    try:
        os.remove(txt_filename)
    except OSError as err:
        logging.error(f"Error deleting file {txt_filename}: {err}")
    else:
        logging.info(f"Deleted {txt_filename}")
    return png_filename


txt_parser = argparse.ArgumentParser(description="Convert a pixel text file to a png")
txt_parser.add_argument("name", help="file name without the .txt extension")


def main(argv=None):
    args = txt_parser.parse_args(argv)
    try:
        txt_to_png(args.name)
    except (OSError, ValueError) as err:
        logging.error(f"Error generating image from {args.name}.txt: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
