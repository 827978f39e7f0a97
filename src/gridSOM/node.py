## A single node (cell) of the self-organizing map lattice

from .errors import InvalidArgumentError
from .vector import Vector


class MapNode:
    def __init__(self, x: int, y: int, weights: Vector):
        """Create a node at lattice position (x, y).

        The weights are copied, so later changes to the node do not leak into the
        caller's vector (and vice versa).

        Args:
                x (int): x coordinate of the node in the containing map.
                y (int): y coordinate of the node in the containing map.
                weights (Vector): Initial weights of the node.
        """
        if weights is None:
            raise InvalidArgumentError("Unable to create a MapNode with null weights.", "weights")

        self._x = x
        self._y = y
        self._weights = Vector(weights)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def weights(self) -> Vector:
        return self._weights

    def distance_squared_lattice(self, other: "MapNode") -> float:
        """Squared Euclidean distance between this node and another node on the lattice.

        Only the grid coordinates are compared, never the weights.

        Args:
                other (MapNode): The node to measure the distance to.

        Returns:
                float: (x - other.x)**2 + (y - other.y)**2
        """
        if other is None:
            raise InvalidArgumentError("A non-null MapNode is required to calculate the distance.", "other")

        dx = self._x - other.x
        dy = self._y - other.y
        return float(dx * dx + dy * dy)

    def adjust_weights(self, input: Vector, learning_rate: float, falloff: float):
        """Move the weights a fraction of the way towards the input (Kohonen update rule).

        Args:
                input (Vector): The training vector pulling on this node.
                learning_rate (float): Current learning rate.
                falloff (float): Neighborhood falloff of this node relative to the BMU.
        """
        if input is None or len(input) != len(self._weights):
            raise InvalidArgumentError(
                "The weights of a MapNode cannot be adjusted with a null input or one of a different depth.",
                "input",
            )

        rate = learning_rate * falloff
        weights = self._weights
        for i in range(len(weights)):
            w = weights[i]
            weights[i] = w + rate * (input[i] - w)

    def __repr__(self):
        return f"MapNode(x={self._x}, y={self._y}, weights={list(self._weights)})"
