"""Unit tests for flow path integration and start positions."""

import math

import numpy as np
import pytest
from opensimplex import OpenSimplex

from pynoiseflow.flow import (
    CUBIC,
    LINE,
    FlowPath,
    grid_points,
    in_bounds,
    random_points,
    tail,
    trace,
    walk,
)
from pynoiseflow.noise import Noise2x2, SeedSource


class TestFlowPath:

    @pytest.mark.unit
    def test_points_are_read_only(self):
        path = FlowPath([[0.0, 0.0], [1.0, 1.0]])
        assert not path.points.flags.writeable
        with pytest.raises(ValueError):
            path.points[0, 0] = 5.0

    @pytest.mark.unit
    def test_validation(self):
        with pytest.raises(ValueError):
            FlowPath(np.empty((0, 2)))
        with pytest.raises(ValueError):
            FlowPath([[0.0, 0.0], [1.0, 1.0]], kind=CUBIC)
        with pytest.raises(ValueError):
            FlowPath([[0.0, 0.0]], kind="spline")

    @pytest.mark.unit
    def test_segments(self):
        line = FlowPath([[0, 0], [1, 0], [2, 0]])
        assert line.n_segments == 2
        cubic = FlowPath(np.arange(14, dtype=float).reshape(7, 2), kind=CUBIC)
        assert cubic.n_segments == 2
        segments = list(cubic.bezier_segments())
        assert [s.shape for s in segments] == [(4, 2), (4, 2)]
        np.testing.assert_array_equal(segments[1][0], cubic.points[3])
        with pytest.raises(ValueError):
            list(line.bezier_segments())


@pytest.mark.unit
def test_in_bounds():
    assert in_bounds((0.0, 0.0), (10, 10))
    assert not in_bounds((10.0, 5.0), (10, 10))
    assert not in_bounds((5.0, -0.1), (10, 10))
    assert in_bounds((-1e9, 1e9), None)


class TestTail:

    @pytest.mark.unit
    def test_seeded_tail_is_reproducible(self):
        start = (100.0, 100.0)
        field = Noise2x2.from_seeds(SeedSource(42), pos_scale=100.0, normalize=True,
                                    bias=(0.0, 0.0))
        path = tail(field, start, 16)
        assert path.kind == LINE
        assert len(path) == 2
        np.testing.assert_array_equal(path.start, start)
        np.testing.assert_array_equal(path.end, np.asarray(start) + field.sample(start) * 16)

        again = Noise2x2.from_seeds(SeedSource(42), pos_scale=100.0, normalize=True)
        np.testing.assert_array_equal(tail(again, start, 16).points, path.points)

    @pytest.mark.unit
    def test_seeded_tail_matches_reference(self):
        # seed 42: x channel takes the first 32-bit draw, y the second
        rng = np.random.default_rng(42)
        seed_x = int(rng.integers(0, 0xFFFFFFFF, endpoint=True))
        seed_y = int(rng.integers(0, 0xFFFFFFFF, endpoint=True))
        vx = OpenSimplex(seed=seed_x).noise2(1.0, 1.0)
        vy = OpenSimplex(seed=seed_y).noise2(1.0, 1.0)
        norm = math.hypot(vx, vy)
        assert norm > 0.0
        expected = [100.0 + vx / norm * 16.0, 100.0 + vy / norm * 16.0]

        field = Noise2x2.from_seeds(SeedSource(42), pos_scale=100.0, normalize=True)
        path = tail(field, (100.0, 100.0), 16)
        np.testing.assert_array_equal(path.points, [[100.0, 100.0], expected])

    @pytest.mark.unit
    def test_normalized_tail_has_requested_length(self, sample_positions):
        field = Noise2x2.from_seeds(SeedSource(5), pos_scale=80.0, normalize=True)
        for start in sample_positions[:30]:
            path = tail(field, start, 16)
            length = np.linalg.norm(path.end - path.start)
            assert length == pytest.approx(16.0) or length == 0.0

    @pytest.mark.unit
    def test_zero_vector_gives_zero_length_tail(self, constant_flow):
        path = tail(constant_flow(0.0, 0.0, normalize=True), (3.0, 4.0), 16)
        assert len(path) == 2
        np.testing.assert_array_equal(path.start, path.end)


class TestWalk:

    @pytest.mark.unit
    def test_control_points_follow_field(self, constant_flow):
        path = walk(constant_flow(1.0, 0.0), (10.0, 50.0), n_steps=2, step_size=2.0)
        assert path.kind == CUBIC
        np.testing.assert_array_equal(path.points, [
            [10, 50], [12, 50], [14, 50], [16, 50], [18, 50], [20, 50], [22, 50],
        ])

    @pytest.mark.unit
    def test_zero_step_size_terminates(self, constant_flow):
        path = walk(constant_flow(0.7, -0.2), (5.0, 5.0), n_steps=5, step_size=0.0,
                    bounds=(10, 10))
        assert path.n_segments == 5
        assert len(path) == 3 * path.n_segments + 1 == 16
        assert np.all(path.points == [5.0, 5.0])

    @pytest.mark.unit
    def test_start_outside_bounds(self, constant_flow):
        path = walk(constant_flow(1.0, 0.0), (-1.0, 5.0), n_steps=10, step_size=1.0,
                    bounds=(10, 10))
        assert len(path) == 1
        assert path.n_segments == 0
        np.testing.assert_array_equal(path.polyline(), [[-1.0, 5.0]])

    @pytest.mark.unit
    def test_stops_after_leaving_bounds(self, constant_flow):
        path = walk(constant_flow(1.0, 0.0), (10.0, 50.0), n_steps=100, step_size=2.0,
                    bounds=(100, 100))
        # segments advance 6px; the segment starting at x=94 is the last one drawn
        assert path.n_segments == 15
        np.testing.assert_array_equal(path.end, [100.0, 50.0])

    @pytest.mark.unit
    def test_unbounded_walk_runs_all_steps(self, constant_flow):
        path = walk(constant_flow(1.0, 0.0), (10.0, 50.0), n_steps=20, step_size=2.0)
        assert path.n_segments == 20
        np.testing.assert_array_equal(path.end, [130.0, 50.0])

    @pytest.mark.unit
    def test_rejects_negative_steps(self, constant_flow):
        with pytest.raises(ValueError):
            walk(constant_flow(1.0, 0.0), (0.0, 0.0), n_steps=-1, step_size=1.0)

    @pytest.mark.unit
    def test_polyline(self, constant_flow):
        path = walk(constant_flow(1.0, 0.0), (10.0, 50.0), n_steps=3, step_size=2.0)
        line = path.polyline(samples_per_segment=4)
        assert line.shape == (13, 2)
        np.testing.assert_allclose(line[:, 1], 50.0)
        np.testing.assert_allclose(line[0], path.start)
        np.testing.assert_allclose(line[-1], path.end)
        assert np.all(np.diff(line[:, 0]) > 0.0)

    @pytest.mark.unit
    def test_walk_is_reproducible(self, sample_positions):
        def build():
            field = Noise2x2.from_seeds(SeedSource(42), pos_scale=100.0, normalize=True,
                                        bias=(0.4, 0.3))
            return walk(field, sample_positions[0], n_steps=50, step_size=4.0,
                        bounds=(800, 600))

        np.testing.assert_array_equal(build().points, build().points)


class TestTrace:

    @pytest.mark.unit
    def test_unbounded_trace(self, constant_flow):
        path = trace(constant_flow(1.0, 0.5), (0.0, 0.0), n_steps=10)
        assert len(path) == 10
        np.testing.assert_array_equal(path.end, [9.0, 4.5])

    @pytest.mark.unit
    def test_trace_stops_at_bounds(self, constant_flow):
        path = trace(constant_flow(1.0, 0.0), (95.0, 10.0), n_steps=50, bounds=(100, 100))
        np.testing.assert_array_equal(path.points[:, 0], [95, 96, 97, 98, 99])

    @pytest.mark.unit
    def test_trace_keeps_start_outside_bounds(self, constant_flow):
        path = trace(constant_flow(1.0, 0.0), (150.0, 10.0), n_steps=50, bounds=(100, 100))
        assert len(path) == 1

    @pytest.mark.unit
    def test_trace_rejects_zero_steps(self, constant_flow):
        with pytest.raises(ValueError):
            trace(constant_flow(1.0, 0.0), (0.0, 0.0), n_steps=0)


class TestSeeding:

    @pytest.mark.unit
    def test_grid_points(self):
        np.testing.assert_array_equal(
            grid_points(100, 100, 32), [[32, 32], [32, 64], [64, 32], [64, 64]]
        )
        assert grid_points(100, 100, 32, first=0).shape == (9, 2)

    @pytest.mark.unit
    def test_grid_points_include_edge(self):
        points = grid_points(100, 100, 32, first=0, include_edge=True)
        assert points.shape == (16, 2)
        np.testing.assert_array_equal(points[-1], [96, 96])

        # 1024 / 51 leaves a partial cell: positions 0, 51, ..., 1020
        points = grid_points(1024, 1024, 51, first=0, include_edge=True)
        assert points.shape == (21 * 21, 2)
        assert points[:, 0].max() == 1020.0
        assert points[:, 1].max() == 1020.0

        # exact multiples add nothing past the edge
        assert grid_points(96, 96, 32, first=0, include_edge=True).shape == (9, 2)

    @pytest.mark.unit
    def test_grid_points_empty_when_stride_exceeds_canvas(self):
        assert grid_points(10, 10, 32).shape == (0, 2)

    @pytest.mark.unit
    def test_grid_points_rejects_bad_stride(self):
        with pytest.raises(ValueError):
            grid_points(100, 100, 0)

    @pytest.mark.unit
    def test_random_points(self):
        a = random_points(SeedSource(1), 25, 80, 60)
        b = random_points(SeedSource(1), 25, 80, 60)
        np.testing.assert_array_equal(a, b)
        assert a.shape == (25, 2)
        assert np.all(a >= 0.0) and np.all(a[:, 0] < 80) and np.all(a[:, 1] < 60)
