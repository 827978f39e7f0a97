## Self-Organizing Map lattice: a flat rectangular grid of MapNodes trained with
## competitive, neighborhood-weighted (Kohonen) learning, along with a few
## analysis helpers for a trained map

import math
from typing import Iterator, Protocol, Sequence

import numpy as np
from sklearn.metrics.pairwise import paired_euclidean_distances

from .errors import InvalidArgumentError
from .initializer import MapInitializer
from .node import MapNode
from .trainer import MapTrainer
from .vector import Vector, distance_squared


class Initializer(Protocol):
    def initialize(self, map: "Map", training_data: Sequence[Vector]) -> None: ...


class Trainer(Protocol):
    def train(self, map: "Map", training_data: Sequence[Vector]) -> None: ...


class Map:
    def __init__(
        self,
        width: int,
        height: int,
        depth: int,
        initializer: Initializer = None,
        trainer: Trainer = None,
    ):
        """Create an empty map. Nodes are only populated by the initializer.

        Args:
                width (int): Number of nodes along x.
                height (int): Number of nodes along y.
                depth (int): Length of the weight vector held by every node.
                initializer (Initializer, optional): Strategy that populates the grid before training. Defaults to MapInitializer().
                trainer (Trainer, optional): Strategy that runs the learning algorithm. Defaults to MapTrainer().
        """
        self._width = width
        self._height = height
        self._depth = depth
        # row-major: index = x * height + y
        self._grid = [None] * (max(width, 0) * max(height, 0))

        self.initializer = initializer if initializer is not None else MapInitializer()
        self.trainer = trainer if trainer is not None else MapTrainer()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    def _index(self, key) -> int:
        x, y = key
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside of the {self._width}x{self._height} map")
        return x * self._height + y

    def __getitem__(self, key) -> MapNode:
        return self._grid[self._index(key)]

    def __setitem__(self, key, node: MapNode):
        self._grid[self._index(key)] = node

    def nodes(self) -> Iterator[MapNode]:
        """Iterate over the populated nodes, x outer and y inner."""
        return (node for node in self._grid if node is not None)

    def train(self, training_data: Sequence[Vector]):
        """Initialize the map from the training data, then train it.

        Args:
                training_data (Sequence[Vector]): Training vectors, each of length depth.
        """
        if training_data is None:
            raise InvalidArgumentError(
                "Unable to train a self-organizing map with null training data.", "training_data"
            )
        if any(v is None or len(v) != self._depth for v in training_data):
            raise InvalidArgumentError(
                "The training data contains either a null vector, or a vector with an incorrect amount of data.",
                "training_data",
            )

        self.initializer.initialize(self, training_data)
        self.trainer.train(self, training_data)

    def get_best_matching_node(self, query: Vector) -> MapNode:
        """Scan the whole map for the node whose weights are closest to the query.

        Ties keep the first node found in scan order (x outer, y inner).

        Args:
                query (Vector): The data to match, of length depth.

        Returns:
                MapNode: The best matching unit (BMU).
        """
        if query is None:
            raise InvalidArgumentError(
                "Unable to determine the best matching node when comparing to null data.", "query"
            )
        if len(query) != self._depth:
            raise InvalidArgumentError(
                "Unable to determine the best matching node when comparing to data with different dimensions.",
                "query",
            )

        best_node = self._grid[0] if self._grid else None
        best_distance = math.inf
        for node in self._grid:
            d = distance_squared(query, node.weights)
            if d < best_distance:
                best_node = node
                best_distance = d

        return best_node

    def _check_depth(self, data):
        if any(obs is None or len(obs) != self._depth for obs in data):
            raise InvalidArgumentError(
                "The data contains either a null vector, or a vector with an incorrect amount of data.",
                "data",
            )

    def to_array(self) -> np.ndarray:
        """
        Returns the weights of every node.

        Returns:
                np.ndarray: (width, height, depth) array, [x, y] holds the weights of node (x, y).
        """
        lattice = np.array([node.weights for node in self._grid], dtype=np.float64)
        return lattice.reshape((self._width, self._height, self._depth))

    def map_data_to_lattice(self, data: Sequence[Vector]) -> np.ndarray:
        """
        Map each data point to the lattice position of its best matching node.

        Args:
                data (Sequence[Vector]): Observations of length depth.

        Returns:
                np.ndarray[int]: (n, 2) array with the x and y coordinates of the BMU of each observation.
        """
        if data is None:
            raise InvalidArgumentError("Unable to map null data to the lattice.", "data")
        self._check_depth(data)

        projection_2d = np.zeros((len(data), 2), dtype=np.int32)
        for i, obs in enumerate(data):
            bmu = self.get_best_matching_node(obs)
            projection_2d[i] = (bmu.x, bmu.y)
        return projection_2d

    def quantization_error(self, data: Sequence[Vector]) -> float:
        """
        Average Euclidean distance between each data vector and the weights of its best matching node.

        Args:
                data (Sequence[Vector]): Observations of length depth.

        Returns:
                float: The quantization error.
        """
        if data is None or len(data) == 0:
            raise InvalidArgumentError(
                "Unable to compute the quantization error without data.", "data"
            )
        self._check_depth(data)

        errors = [
            math.sqrt(distance_squared(obs, self.get_best_matching_node(obs).weights))
            for obs in data
        ]
        return float(np.mean(errors))

    def compute_umat(self) -> np.ndarray:
        """
        Compute the unified distance matrix.

        Every node gets the mean weight distance to its (up to 8) lattice neighbors,
        normalized by the number of nodes.

        Returns:
                np.ndarray: (width, height) matrix of U-matrix values.
        """
        x = self._width
        y = self._height
        if x < 2 or y < 2:
            raise InvalidArgumentError(
                "The U-matrix can not be computed for a map with a dimension smaller than 2.",
                "map",
            )

        lattice = self.to_array()
        total = np.zeros((x, y))
        count = np.zeros((x, y))

        # pair every node with the neighbor at offset (dx, dy), where one exists
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if (dx, dy) == (0, 0):
                    continue
                x0, x1 = max(0, -dx), min(x, x - dx)
                y0, y1 = max(0, -dy), min(y, y - dy)
                nodes = lattice[x0:x1, y0:y1].reshape((-1, self._depth))
                neighbors = lattice[x0 + dx : x1 + dx, y0 + dy : y1 + dy].reshape((-1, self._depth))

                d = paired_euclidean_distances(nodes, neighbors)
                total[x0:x1, y0:y1] += d.reshape((x1 - x0, y1 - y0))
                count[x0:x1, y0:y1] += 1

        return total / count / (x * y)

    def __repr__(self):
        return f"Map(width={self._width}, height={self._height}, depth={self._depth})"
