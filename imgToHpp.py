## Convert an image to a C++ header holding its grayscale pixels as a flat vector
## Usage: python imgToHpp.py
## Reads img/img.png and writes img/img.hpp

import sys
import logging
from PIL.Image import DecompressionBombError
from utils import load_grayscale, normalize

INPUT = "./img/img.png"
OUTPUT = "./img/img.hpp"


def format_expected(pixels, width):
    values = normalize(pixels).ravel()
    contents = "const std::vector<double> expected = {"
    for i, value in enumerate(values):
        # Each image row starts on its own line
        if i % width == 0:
            contents += "\n\t"
        contents += f"{value:.6f}"
        if i != len(values) - 1:
            contents += ","
    contents += "\n};\n"
    return contents


def img_to_hpp(img_filename, hpp_filename):
    pixels = load_grayscale(img_filename)
    height, width = pixels.shape
    contents = "#include <vector>\n"
    contents += f"const int width = {width}, height = {height};\n"
    contents += format_expected(pixels, width)
    # Nothing is opened for writing until the whole header is built
    with open(hpp_filename, "w") as file:
        file.write(contents)
    logging.info(f"Image {img_filename} converted to {hpp_filename}")
    logging.info(f"Image size: {width} x {height}")
    return width, height


def main(img_filename=INPUT, hpp_filename=OUTPUT):
    try:
        img_to_hpp(img_filename, hpp_filename)
    except (OSError, ValueError, DecompressionBombError) as err:
        logging.error(f"Error processing image {img_filename}: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
