import logging
from PIL import Image
from numpy import array, asarray, clip, floor, float64, nan_to_num, uint8, uint32

logging.basicConfig(level=logging.INFO)

# Pillow modes holding 16 bits per gray pixel
WIDE_GRAY_MODES = ("I;16", "I;16L", "I;16B", "I")


def load_grayscale(img_filename):
    """Open an image and return its pixels as a (height, width) uint8 array."""
    with Image.open(img_filename) as img:
        width, height = img.size
        if img.mode in WIDE_GRAY_MODES:
            # convert("L") clips these at 255, keep the high byte instead
            pixels = (clip(array(img, dtype=uint32), 0, 65535) >> 8).astype(uint8)
        else:
            pixels = array(img.convert("L"), dtype=uint8)
        logging.debug(f"Loaded {img_filename} ({img.mode}): {width} x {height}")
    return pixels


def save_grayscale(pixels, img_filename):
    img = Image.fromarray(asarray(pixels, dtype=uint8), "L")
    img.save(img_filename)
    logging.debug(f"Saved {img_filename}: {img.size[0]} x {img.size[1]}")


def normalize(pixels):
    # 0-255 -> 0-1
    return asarray(pixels, dtype=float64) / 255


def denormalize(values):
    # 0-1 -> 0-255, rounding halves up and clamping out-of-range values; NaN is black
    values = nan_to_num(asarray(values, dtype=float64), nan=0.0, posinf=1.0, neginf=0.0)
    scaled = floor(values * 255 + 0.5)
    return clip(scaled, 0, 255).astype(uint8)
