import math

import pytest
import numpy as np

from gridSOM import InvalidArgumentError, Map, MapInitializer, MapNode, MapTrainer, Vector


def uniform_map(width, height, weights):
    map = Map(width, height, len(weights))
    for x in range(width):
        for y in range(height):
            map[x, y] = MapNode(x, y, Vector(weights))
    return map


def test_train_null_map():
    with pytest.raises(InvalidArgumentError, match="null self-organizing map") as excinfo:
        MapTrainer().train(None, [])
    assert excinfo.value.parameter == "map"


def test_train_null_training_data():
    with pytest.raises(InvalidArgumentError, match="Non-null training data"):
        MapTrainer().train(Map(0, 0, 0), None)


def test_train_input_with_wrong_depth():
    map = uniform_map(4, 4, [0.0, 0.0])
    with pytest.raises(InvalidArgumentError, match="same depth"):
        MapTrainer().train(map, [Vector([1.0, 1.0, 1.0])])


def test_schedule():
    print("Testing learning rate and neighborhood decay", flush=True)
    trainer = MapTrainer()
    schedule = list(trainer.schedule(20, 10))

    assert len(schedule) == MapTrainer.ITERATIONS
    assert [s[0] for s in schedule] == list(range(MapTrainer.ITERATIONS))

    iteration, learning_rate, radius = schedule[0]
    assert learning_rate == MapTrainer.START_LEARNING_RATE
    assert radius == 10

    time_constant = MapTrainer.ITERATIONS / math.log(10)
    for iteration, learning_rate, radius in schedule:
        assert learning_rate == pytest.approx(
            MapTrainer.START_LEARNING_RATE * math.exp(-iteration / MapTrainer.ITERATIONS)
        )
        assert radius == pytest.approx(10 * math.exp(-iteration / time_constant))

    radii = [s[2] for s in schedule]
    assert all(a > b for a, b in zip(radii, radii[1:]))


def test_schedule_lattice_radius_is_halved_larger_side():
    # max(5, 3) // 2 == 2
    _, _, radius = next(MapTrainer().schedule(5, 3))
    assert radius == 2


def test_schedule_lattice_radius_of_one():
    schedule = list(MapTrainer().schedule(2, 3))
    assert len(schedule) == MapTrainer.ITERATIONS
    assert all(radius == 1.0 for _, _, radius in schedule)


def test_schedule_lattice_radius_of_zero():
    assert list(MapTrainer().schedule(1, 1)) == []
    assert list(MapTrainer().schedule(0, 0)) == []


def test_adjust_neighborhood():
    map = uniform_map(5, 5, [0.0, 0.0])
    map[0, 0] = MapNode(0, 0, Vector([1.0, 1.0]))
    input = Vector([10.0, 20.0])

    MapTrainer.adjust_neighborhood(map, input, radius=1.0, learning_rate=0.1)

    # BMU is moved with a falloff of 1
    assert map[0, 0].weights == pytest.approx([1.0 + 0.1 * 9.0, 1.0 + 0.1 * 19.0])

    falloff = math.exp(-1.0 / 2.0)
    for x, y in [(1, 0), (0, 1)]:
        assert map[x, y].weights == pytest.approx([0.1 * falloff * 10.0, 0.1 * falloff * 20.0])

    # outside of the circular neighborhood
    for x, y in [(1, 1), (2, 0), (0, 2), (4, 4)]:
        assert map[x, y].weights == [0.0, 0.0]


def test_adjust_neighborhood_clips_to_map():
    map = uniform_map(3, 3, [0.0])
    map[2, 2] = MapNode(2, 2, Vector([5.0]))

    MapTrainer.adjust_neighborhood(map, Vector([6.0]), radius=10.0, learning_rate=0.5)

    for node in map.nodes():
        d = node.distance_squared_lattice(map[2, 2])
        falloff = math.exp(-d / 200.0)
        start = 5.0 if (node.x, node.y) == (2, 2) else 0.0
        assert node.weights[0] == pytest.approx(start + 0.5 * falloff * (6.0 - start))


def test_train_converges_towards_single_input():
    print("Testing training towards a single vector", flush=True)
    map = Map(6, 6, 2)
    data = [Vector([0.0, 0.0]), Vector([10.0, 10.0])]
    MapInitializer(np.random.default_rng(5)).initialize(map, data)

    target = Vector([5.0, 5.0])
    before = [node.weights.distance_squared(target) for node in map.nodes()]

    MapTrainer().train(map, [target])

    after = [node.weights.distance_squared(target) for node in map.nodes()]
    assert all(a <= b for a, b in zip(after, before))
    assert sum(after) < sum(before)


@pytest.mark.parametrize("width, height", [(1, 1), (2, 2), (1, 3), (3, 1)])
def test_train_degenerate_maps(width, height):
    data = [Vector([0.0, 1.0]), Vector([1.0, 0.0])]
    map = Map(width, height, 2, initializer=MapInitializer(np.random.default_rng(8)))

    map.train(data)

    lattice = map.to_array()
    assert lattice.shape == (width, height, 2)
    assert np.all(np.isfinite(lattice))
    assert np.all((lattice >= 0.0) & (lattice <= 1.0))


def test_train_wrong_depth_on_map_too_small():
    map = uniform_map(1, 1, [1.0, 2.0])
    with pytest.raises(InvalidArgumentError, match="same depth") as excinfo:
        MapTrainer().train(map, [Vector([1.0, 2.0, 3.0])])
    assert excinfo.value.parameter == "input"
    assert map[0, 0].weights == [1.0, 2.0]


def test_train_wrong_depth_checked_before_any_update():
    map = uniform_map(4, 4, [0.0, 0.0])
    with pytest.raises(InvalidArgumentError):
        MapTrainer().train(map, [Vector([1.0, 1.0]), Vector([1.0])])
    assert all(node.weights == [0.0, 0.0] for node in map.nodes())


def test_train_skips_map_too_small(capsys):
    map = uniform_map(1, 1, [3.0])
    MapTrainer().train(map, [Vector([7.0])])
    assert map[0, 0].weights == [3.0]
    assert "too small to train" in capsys.readouterr().out


def test_train_empty_map():
    map = Map(0, 0, 0)
    MapTrainer().train(map, [Vector()])
    assert list(map.nodes()) == []


if __name__ == "__main__":
    pytest.main()
