## Plot an original image next to its reconstructions and report the error of each
## Usage: python plot.py <original> <reconstruction1> <reconstruction2> ... [-o output]
## Example: python plot.py img/img.png res.png

import sys
import logging
import argparse
from pathlib import Path
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from PIL.Image import DecompressionBombError
from utils import load_grayscale


def mse(original, reconstruction):
    if original.shape != reconstruction.shape:
        raise ValueError(
            f"Shape mismatch: {original.shape[::-1]} vs {reconstruction.shape[::-1]}"
        )
    diff = original.astype(np.float64) - reconstruction.astype(np.float64)
    return float(np.mean(diff**2))


def plot_comparison(original_filename, reconstruction_filenames, output):
    original = load_grayscale(original_filename)
    errors = []
    fig, axes = plt.subplots(1, len(reconstruction_filenames) + 1, squeeze=False)
    axes = axes[0]
    axes[0].imshow(original, cmap="gray", vmin=0, vmax=255)
    axes[0].set_title("Original")
    for ax, filename in zip(axes[1:], reconstruction_filenames):
        reconstruction = load_grayscale(filename)
        error = mse(original, reconstruction)
        errors.append(error)
        ax.imshow(reconstruction, cmap="gray", vmin=0, vmax=255)
        ax.set_title(f"{Path(filename).stem}\nMSE {error:.2f}")
        logging.info(f"{filename}: MSE {error:.4f}")
    for ax in axes:
        ax.axis("off")

    Path(output).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output)
    plt.close(fig)
    logging.info(f"Comparison saved to {output}")
    return errors


plot_parser = argparse.ArgumentParser(description="Compare reconstructions to an image")
plot_parser.add_argument("original", help="the source image")
plot_parser.add_argument("reconstructions", help="images to compare", nargs="+")
plot_parser.add_argument(
    "-o", "--output", default="docs/figures/reconstruction.png", help="figure path"
)


def main(argv=None):
    args = plot_parser.parse_args(argv)
    try:
        plot_comparison(args.original, args.reconstructions, args.output)
    except (OSError, ValueError, DecompressionBombError) as err:
        logging.error(f"Error plotting {args.original}: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
