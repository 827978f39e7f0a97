## Script to organize a palette of random colors with a self-organizing map and
## save the trained lattice as an image

import sys
import argparse

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .initializer import MapInitializer
from .som import Map
from .vector import Vector


def generate_training_data(number_of_colors: int, rng: np.random.Generator) -> list[Vector]:
    """Generate random RGB colors to train a map with.

    Args:
        number_of_colors (int): number of colors to generate
        rng (np.random.Generator): random number generator

    Returns:
        list[Vector]: one [red, green, blue] vector per color, channels are integers in [0, 255]
    """
    colors = rng.integers(0, 256, size=(number_of_colors, 3))
    return [Vector(int(c) for c in color) for color in colors]


def map_to_image(map: Map) -> np.ndarray:
    """Convert a trained map into an RGB raster, one pixel per node.

    Args:
        map (Map): trained map with a depth of at least 3

    Returns:
        np.ndarray: height x width x 3 uint8 image, pixel [y, x] holds the first three weights of node (x, y)
    """
    lattice = map.to_array()[:, :, :3]
    return np.clip(lattice, 0, 255).astype(np.uint8).transpose((1, 0, 2))


def save_image(map: Map, path: str):
    """
    Save the trained map as a PNG image.

    Args:
        map (Map): trained map with a depth of at least 3
        path (str): output file
    """
    plt.imsave(path, map_to_image(map))
    print(f"Image created at {path}", flush=True)


def save_umat_plot(map: Map, path: str):
    """
    Save a heat map of the U-matrix of the trained map.

    Args:
        map (Map): trained map
        path (str): output file
    """
    umat = map.compute_umat()

    fig, ax = plt.subplots(dpi=200)
    mesh = ax.pcolor(umat.T, cmap=plt.cm.YlOrRd)
    fig.colorbar(mesh, ax=ax)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    fig.savefig(path)
    plt.close(fig)
    print(f"U-matrix saved to {path}", flush=True)


def parse_args(argv=None):
    """CLI argument parser for run_color_som.py script."""
    parser = argparse.ArgumentParser(
        description="Organize random colors with a self-organizing map"
    )
    parser.add_argument(
        "--width", type=int, dest="width", default=50, help="X dimension of the map"
    )
    parser.add_argument(
        "--height", type=int, dest="height", default=50, help="Y dimension of the map"
    )
    parser.add_argument(
        "--colors",
        type=int,
        dest="colors",
        default=30,
        help="Number of random colors to train with",
    )
    parser.add_argument(
        "--seed",
        type=int,
        dest="seed",
        default=None,
        help="Random seed for the colors and the initial lattice",
        required=False,
    )
    parser.add_argument(
        "--output", type=str, dest="output", default="image.png", help="Output image"
    )
    parser.add_argument(
        "--umat",
        type=str,
        dest="umat",
        default=None,
        help="Path of an optional U-matrix plot",
        required=False,
    )

    return parser.parse_args(argv)


def train_color_map(width: int, height: int, number_of_colors: int, seed: int = None) -> Map:
    """Train a map of the given dimensions on random colors.

    Args:
        width (int): x dimension of the map
        height (int): y dimension of the map
        number_of_colors (int): number of random colors to train with
        seed (int, optional): seed of the colors and of the initial lattice. Defaults to None.

    Returns:
        Map: the trained map, with a depth of 3
    """
    rng = np.random.default_rng(seed)
    training_data = generate_training_data(number_of_colors, rng)

    map = Map(width, height, 3, initializer=MapInitializer(rng))
    map.train(training_data)
    return map


def main(argv=None):
    args = parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        sys.exit("Cannot run, map dimensions must be positive.")
    if args.colors <= 0:
        sys.exit("Cannot run, at least one color is needed for training.")
    if args.umat is not None and (args.width < 2 or args.height < 2):
        sys.exit("Cannot run, map dimensions too small for a U-matrix plot.")

    print(
        "Organizing an image of colors using a self-organizing map. This may take a few seconds.",
        flush=True,
    )

    map = train_color_map(args.width, args.height, args.colors, args.seed)

    save_image(map, args.output)
    if args.umat is not None:
        save_umat_plot(map, args.umat)


if __name__ == "__main__":
    main()
