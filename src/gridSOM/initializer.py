## Bootstraps the nodes of a map with random weights bounded by the training data

import numpy as np

from .errors import InvalidArgumentError
from .node import MapNode
from .vector import Vector


class MapInitializer:
    def __init__(self, random_generator: np.random.Generator = None):
        """
        Args:
                random_generator (np.random.Generator, optional): Uniform random source in [0, 1), used through its random() method. Defaults to np.random.default_rng().
        """
        if random_generator is None:
            random_generator = np.random.default_rng()
        self.random_generator = random_generator

    def initialize(self, map: "Map", training_data):
        """Replace every node of the map with a node holding random weights.

        Each weight is drawn uniformly between the smallest and the largest value found
        in any component of any training vector.

        Args:
                map (Map): The map to initialize.
                training_data (Sequence[Vector]): Data providing the bounds of the random weights.
        """
        if map is None:
            raise InvalidArgumentError("Unable to initialize a null self-organizing map.", "map")
        if training_data is None:
            raise InvalidArgumentError(
                "Unable to initialize a self-organizing map with null training data.", "training_data"
            )
        if len(training_data) == 0:
            raise InvalidArgumentError(
                "Unable to initialize a self-organizing map without training data.", "training_data"
            )

        # single global range over all components, not per feature
        low = min((min(v) for v in training_data if len(v) > 0), default=0.0)
        high = max((max(v) for v in training_data if len(v) > 0), default=0.0)
        spread = high - low

        rng = self.random_generator
        for x in range(map.width):
            for y in range(map.height):
                weights = Vector(low + rng.random() * spread for _ in range(map.depth))
                map[x, y] = MapNode(x, y, weights)
