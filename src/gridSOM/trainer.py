## Iterative Kohonen training of a map: exponentially decaying learning rate and
## neighborhood radius, Gaussian falloff around the best matching node

import math

from .errors import InvalidArgumentError


class MapTrainer:
    START_LEARNING_RATE = 0.02
    ITERATIONS = 100

    def schedule(self, width: int, height: int):
        """Yield the training schedule for a map of the given dimensions.

        The learning rate decays as START_LEARNING_RATE * exp(-t / ITERATIONS) and the
        neighborhood radius as lattice_radius * exp(-t / time_constant), where
        time_constant = ITERATIONS / ln(lattice_radius). A lattice radius of 1 keeps the
        neighborhood constant; a lattice radius of 0 yields nothing.

        Args:
                width (int): Width of the map.
                height (int): Height of the map.

        Yields:
                tuple[int, float, float]: (iteration, learning_rate, neighborhood_radius)
        """
        lattice_radius = max(width, height) // 2
        if lattice_radius < 1:
            return

        if lattice_radius == 1:
            time_constant = math.inf
        else:
            time_constant = self.ITERATIONS / math.log(lattice_radius)

        learning_rate = self.START_LEARNING_RATE
        for iteration in range(self.ITERATIONS):
            neighborhood_radius = lattice_radius * math.exp(-iteration / time_constant)
            yield iteration, learning_rate, neighborhood_radius
            learning_rate = self.START_LEARNING_RATE * math.exp(
                -(iteration + 1) / self.ITERATIONS
            )

    def train(self, map: "Map", training_data):
        """Train the map with the given data, one vector at a time.

        Nodes are updated as soon as each vector is processed, so later vectors of the
        same iteration already see the adjusted weights.

        Args:
                map (Map): The (initialized) map to train.
                training_data (Sequence[Vector]): Training vectors, each of length map.depth.
        """
        if map is None:
            raise InvalidArgumentError("A null self-organizing map cannot be trained.", "map")
        if training_data is None:
            raise InvalidArgumentError(
                "Non-null training data is required to train a self-organizing map.", "training_data"
            )
        if any(len(input) != map.depth for input in training_data):
            raise InvalidArgumentError(
                "Training a self-organizing map requires the training data to have the same depth as the map.",
                "input",
            )

        if max(map.width, map.height) // 2 < 1:
            print(
                f"Map of {map.width}x{map.height} nodes is too small to train, skipping",
                flush=True,
            )
            return

        print("Begin training", flush=True)
        report_every = max(self.ITERATIONS // 10, 1)
        for iteration, learning_rate, radius in self.schedule(map.width, map.height):
            if iteration % report_every == 0:
                print(
                    f"Evaluating iteration = {iteration}, learning rate = {learning_rate:.5f}, "
                    f"neighborhood radius = {radius:.3f}",
                    flush=True,
                )
            for input in training_data:
                self.adjust_neighborhood(map, input, radius, learning_rate)
        print("Training complete", flush=True)

    @staticmethod
    def adjust_neighborhood(map: "Map", input, radius: float, learning_rate: float):
        """Find the best matching node of the input and pull its neighborhood towards it.

        Args:
                map (Map): The map being trained.
                input (Vector): The training vector.
                radius (float): Current neighborhood radius on the lattice.
                learning_rate (float): Current learning rate.
        """
        if len(input) != map.depth:
            raise InvalidArgumentError(
                "Training a self-organizing map requires the training data to have the same depth as the map.",
                "input",
            )

        radius_squared = radius * radius
        diameter = 2 * radius

        bmu = map.get_best_matching_node(input)

        # square box around the BMU; the circle test below discards the corners
        start_x = int(max(0, bmu.x - radius - 1))
        start_y = int(max(0, bmu.y - radius - 1))
        end_x = int(min(map.width, start_x + diameter + 1))
        end_y = int(min(map.height, start_y + diameter + 1))

        for x in range(start_x, end_x):
            for y in range(start_y, end_y):
                node = map[x, y]
                dist_sq = bmu.distance_squared_lattice(node)
                if dist_sq <= radius_squared:
                    falloff = math.exp(-dist_sq / (2 * radius_squared))
                    node.adjust_weights(input, learning_rate, falloff)
