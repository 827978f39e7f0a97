## Weight / data vector used by the nodes of the map, along with the
## weight-space squared Euclidean distance

from .errors import InvalidArgumentError


class Vector(list):
    """An ordered, mutable sequence of real numbers.

    The length of a vector is its depth. Two vectors can only be compared when
    their depths match.
    """

    def distance_squared(self, other: "Vector") -> float:
        """Squared Euclidean distance between this vector and another one.

        The square root is skipped since only the relative ordering of distances matters.

        Args:
                other (Vector): The vector to compare against.

        Returns:
                float: Sum of the squared differences of every component.
        """
        return distance_squared(self, other)

    def __repr__(self):
        return f"Vector({list.__repr__(self)})"


def distance_squared(a, b) -> float:
    """Squared Euclidean distance between two vectors of the same depth.

    Args:
            a (Vector): First vector.
            b (Vector): Second vector.

    Returns:
            float: sum((a[i] - b[i])**2)
    """
    if a is None:
        raise InvalidArgumentError("Unable to calculate the distance from a null vector.", "a")
    if b is None:
        raise InvalidArgumentError("Unable to calculate the distance to a null vector.", "b")
    if len(a) != len(b):
        raise InvalidArgumentError(
            f"Unable to calculate the distance between vectors with different depths ({len(a)} != {len(b)}).",
            "b",
        )

    return float(sum((x - y) * (x - y) for x, y in zip(a, b)))
