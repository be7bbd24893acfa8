"""
Tests for the Sweeper vehicle.

Covers:
- Track physics (speed, clamped turning, heading)
- Toroidal wrap-around at the arena edges
- Closest-mine sensing and collection checks
- Malformed network output
"""
import math

import numpy as np
import pytest

from sweepers.config import CFG
from sweepers.entities import Genome
from sweepers.sweeper import Sweeper

from .factories import FixedOutputBrain

FAR_MINE = np.array([[100.0, 100.0]])


def place(sweeper, x, y, rotation):
    sweeper.position = np.array([x, y], dtype=float)
    sweeper.rotation = rotation


@pytest.fixture
def make_sweeper(cfg, rng):
    def _make(outputs=(0.5, 0.5), config=None):
        return Sweeper(config or cfg, rng, brain=FixedOutputBrain(outputs))
    return _make


class TestMovement:
    """Tests for Sweeper.update() physics."""

    def test_straight_ahead(self, make_sweeper):
        """Equal tracks of 1: no turn, speed 2 along (0, 1) at rotation 0."""
        s = make_sweeper((1.0, 1.0))
        place(s, 10.0, 10.0, 0.0)

        assert s.update(FAR_MINE) is True

        assert s.rotation == 0.0
        assert s.speed == 2.0
        np.testing.assert_allclose(s.position, [10.0, 12.0])
        np.testing.assert_allclose(s.look_at, [0.0, 1.0])

    @pytest.mark.parametrize("outputs, expected", [
        ((1.0, 0.0), 0.3),
        ((0.0, 1.0), -0.3),
        ((0.6, 0.5), 0.1),
    ])
    def test_turn_is_clamped(self, make_sweeper, outputs, expected):
        s = make_sweeper(outputs)
        place(s, 400.0, 300.0, 0.0)
        s.update(FAR_MINE)
        assert s.rotation == pytest.approx(expected)
        assert s.speed == pytest.approx(sum(outputs))

    def test_heading_follows_rotation(self, make_sweeper):
        s = make_sweeper((1.0, 0.0))
        place(s, 400.0, 300.0, 1.0)
        s.update(FAR_MINE)
        np.testing.assert_allclose(s.look_at, [-math.sin(1.3), math.cos(1.3)])

    def test_tracks_recorded(self, make_sweeper):
        s = make_sweeper((0.2, 0.7))
        place(s, 400.0, 300.0, 0.0)
        s.update(FAR_MINE)
        assert s.left_track == pytest.approx(0.2)
        assert s.right_track == pytest.approx(0.7)

    def test_network_inputs(self, make_sweeper):
        """Normalized vector from the closest mine, then the heading."""
        s = make_sweeper()
        place(s, 10.0, 10.0, 0.0)
        s.look_at = np.array([0.0, 1.0])
        s.update(np.array([[13.0, 14.0], [500.0, 500.0]]))
        np.testing.assert_allclose(s.brain.last_inputs, [-0.6, -0.8, 0.0, 1.0], atol=1e-12)


class TestWrap:
    """Tests for wrapping at the arena edges (800 x 600)."""

    def test_past_right_edge(self, make_sweeper):
        s = make_sweeper((1.0, 1.0))
        place(s, 799.5, 300.0, -math.pi / 2)
        s.update(FAR_MINE)
        assert s.position[0] == 0.0

    def test_past_left_edge(self, make_sweeper):
        s = make_sweeper((1.0, 1.0))
        place(s, 1.0, 300.0, math.pi / 2)
        s.update(FAR_MINE)
        assert s.position[0] == 800.0

    def test_past_top_edge(self, make_sweeper):
        s = make_sweeper((1.0, 1.0))
        place(s, 400.0, 599.0, 0.0)
        s.update(FAR_MINE)
        assert s.position[1] == 0.0

    def test_past_bottom_edge(self, make_sweeper):
        s = make_sweeper((1.0, 1.0))
        place(s, 400.0, 1.0, math.pi)
        s.update(FAR_MINE)
        assert s.position[1] == 600.0

    def test_stays_in_bounds(self, cfg, rng):
        s = Sweeper(cfg, rng)
        mines = rng.random((5, 2)) * [cfg.WIDTH, cfg.HEIGHT]
        for _ in range(500):
            s.update(mines)
            assert 0.0 <= s.position[0] <= cfg.WIDTH
            assert 0.0 <= s.position[1] <= cfg.HEIGHT


class TestMalformedOutput:
    """Tests for update() returning False."""

    def test_too_few_outputs(self, make_sweeper):
        s = make_sweeper((0.5,))
        place(s, 10.0, 10.0, 0.0)
        assert s.update(FAR_MINE) is False
        np.testing.assert_array_equal(s.position, [10.0, 10.0])
        assert s.rotation == 0.0

    def test_input_count_mismatch(self, rng):
        """A network built for 3 inputs rejects the 4 the sweeper feeds it."""
        s = Sweeper(CFG(INPUT_COUNT=3), rng)
        before = s.position.copy()
        assert s.update(FAR_MINE) is False
        np.testing.assert_array_equal(s.position, before)


class TestSensing:
    """Tests for get_closest_mine() and check_for_mine()."""

    def test_closest_mine_vector(self, make_sweeper):
        s = make_sweeper()
        place(s, 10.0, 10.0, 0.0)
        offset = s.get_closest_mine(np.array([[500.0, 500.0], [13.0, 14.0]]))
        np.testing.assert_allclose(offset, [-3.0, -4.0])
        assert s.closest_mine == 1

    def test_tie_goes_to_lowest_index(self, make_sweeper):
        s = make_sweeper()
        place(s, 10.0, 10.0, 0.0)
        s.sense(np.array([[12.0, 10.0], [8.0, 10.0]]))
        assert s.closest_mine == 0

    def test_collects_within_reach(self, make_sweeper):
        """Distance 5 < mine size 2 + margin 5."""
        s = make_sweeper()
        place(s, 790.0, 10.0, 0.0)
        mines = np.array([[795.0, 10.0]])
        s.get_closest_mine(mines)
        assert s.check_for_mine(mines, 2.0) == 0

    def test_boundary_is_exclusive(self, make_sweeper):
        s = make_sweeper()
        place(s, 790.0, 10.0, 0.0)
        mines = np.array([[797.0, 10.0]])
        s.get_closest_mine(mines)
        assert s.check_for_mine(mines, 2.0) is None

    def test_uses_cached_index(self, make_sweeper):
        """Only the mine found by the last sensing pass is checked."""
        s = make_sweeper()
        place(s, 10.0, 10.0, 0.0)
        mines = np.array([[500.0, 500.0], [12.0, 10.0]])
        s.closest_mine = 0
        assert s.check_for_mine(mines, 2.0) is None
        s.get_closest_mine(mines)
        assert s.check_for_mine(mines, 2.0) == 1


class TestLifecycle:
    """Tests for genomes, fitness and reset."""

    def test_initial_state(self, cfg, rng):
        s = Sweeper(cfg, rng)
        assert s.fitness == 0
        assert s.left_track == s.right_track == cfg.START_TRACK
        np.testing.assert_allclose(s.look_at, [-math.sin(s.rotation), math.cos(s.rotation)])
        assert 0.0 <= s.position[0] <= cfg.WIDTH
        assert 0.0 <= s.position[1] <= cfg.HEIGHT

    def test_load_genome(self, cfg, rng):
        s = Sweeper(cfg, rng)
        genome = Genome(rng.uniform(-1, 1, s.weight_count()), 0.0)
        s.load_genome(genome)
        assert s.genome is genome
        np.testing.assert_array_equal(s.brain.get_weights(), genome.weights)

    def test_increment_fitness(self, make_sweeper):
        s = make_sweeper()
        s.increment_fitness()
        s.increment_fitness()
        assert s.fitness == 2

    def test_reset_keeps_weights(self, cfg, rng):
        s = Sweeper(cfg, rng)
        weights = s.brain.get_weights().copy()
        s.fitness = 12
        s.reset()
        assert s.fitness == 0
        np.testing.assert_array_equal(s.brain.get_weights(), weights)
        np.testing.assert_allclose(s.look_at, [-math.sin(s.rotation), math.cos(s.rotation)])
