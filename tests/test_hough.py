"""Tests for the circle Hough accumulator."""

import math

import numpy as np
import pytest

from pycirclehough import (CircleHough, HoughConstraints, HoughResult, Profile, ProfileData,
                           ConfigurationError, DEFAULT_CONSTRAINTS, DEFAULT_RADIUS,
                           create, calculate, free, generate_circle_profile)

SMALL = {'step_size': 10, 'x_lower': -200, 'x_upper': 200, 'y_lower': -200, 'y_upper': 200}


def reference_map(hough, points, symmetric=False):
    """
    Plain loop version of the accumulator pass. With ``symmetric`` the Y
    window extends radius + step above each point like every other edge.
    """
    cx, cy = hough.x_axis, hough.y_axis
    bx, by = hough.x_coordinates, hough.y_coordinates
    step, radius = cx.step_size, hough.radius
    upper_lim = float(radius + step) ** 2
    lower_lim = float(radius - step) ** 2
    bins = np.zeros((cy.steps, cx.steps))
    weight, rx, ry = 0.0, 0, 0
    for px, py in points:
        x_start = cx.index_of(px - radius - step)
        x_end = cx.index_of(px + radius + step)
        y_start = cy.index_of(py - radius - step)
        y_end = cy.index_of(py + radius + step if symmetric else py + step)
        for y in range(y_start, y_end):
            for x in range(x_start, x_end):
                a = float(px - bx[x])
                b = float(py - by[y])
                r_sqr = (a * a) + (b * b)
                if r_sqr < lower_lim or r_sqr > upper_lim:
                    continue
                bins[y, x] += hough.distribution.pdf(math.sqrt(r_sqr))
                if bins[y, x] > weight:
                    weight = bins[y, x]
                    rx, ry = int(bx[x]), int(by[y])
    return HoughResult(float(weight), rx, ry), bins


class TestCreate:
    """Test construction and the create/calculate/free functions."""

    def test_reference_configuration(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        assert hough is not None
        assert hough.votes.shape == (1200, 600)
        assert hough.x_coordinates[0] == -15000
        assert hough.x_coordinates[-1] == -15000 + 599 * 50
        assert hough.y_coordinates[0] == -30000
        assert hough.y_coordinates[-1] == 29950
        assert not hough.votes.any()

    def test_accepts_constraints_object(self):
        hough = CircleHough(50, HoughConstraints(**SMALL))
        assert hough.votes.shape == (40, 40)

    @pytest.mark.parametrize("radius,overrides", [
        (0, {}),
        (-5, {}),
        (50, {'step_size': 0}),
        (50, {'x_lower': 200}),
        (50, {'y_upper': -300}),
    ])
    def test_invalid_configuration(self, radius, overrides):
        config = dict(SMALL, **overrides)
        with pytest.raises(ConfigurationError):
            CircleHough(radius, config)
        assert create(radius, config) is None

    @pytest.mark.parametrize("constraints", [None, [10, -200, 200, -200, 200], "step_size=10"])
    def test_constraints_not_a_mapping(self, constraints):
        with pytest.raises(ConfigurationError):
            CircleHough(50, constraints)
        assert create(50, constraints) is None

    @pytest.mark.parametrize("radius,overrides", [
        (810.7, {}),
        (50, {'step_size': 0.5}),
        (50, {'x_lower': -199.9}),
        (50, {'y_upper': "wide"}),
    ])
    def test_non_integral_configuration(self, radius, overrides):
        config = dict(SMALL, **overrides)
        with pytest.raises(ConfigurationError, match="must be an integer"):
            CircleHough(radius, config)
        assert create(radius, config) is None

    def test_integral_floats_accepted(self):
        hough = create(50.0, dict(SMALL, step_size=10.0))
        assert hough.radius == 50
        assert hough.x_axis.step_size == 10

    def test_grid_too_large(self):
        config = {'step_size': 1, 'x_lower': -10 ** 18, 'x_upper': 10 ** 18,
                  'y_lower': -10 ** 18, 'y_upper': 10 ** 18}
        assert create(DEFAULT_RADIUS, config) is None

    def test_free(self):
        hough = create(50, SMALL)
        free(hough)
        assert hough.x_coordinates is None
        assert hough.y_coordinates is None

    def test_context_manager_releases(self):
        with CircleHough(50, SMALL) as hough:
            calculate(hough, [(0, 0)])
        assert hough.x_coordinates is None


class TestMap:
    """Test the accumulator pass."""

    def test_empty_profile(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        assert calculate(hough, Profile(np.empty((0, 2)))) == HoughResult(0.0, 0, 0)
        assert calculate(hough, []) == HoughResult(0.0, 0, 0)

    def test_no_detection_outside_grid(self):
        hough = create(50, SMALL)
        result = hough.map([(100000, 100000), (-100000, 5)])
        assert result == HoughResult(0.0, 0, 0)
        assert not result.detected

    def test_finds_circle_center(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        profile = generate_circle_profile((1000, 2000), DEFAULT_RADIUS, n_points=200)
        result = hough.map(profile)
        assert (result.x, result.y) == (1000, 2000)
        assert result.weight == pytest.approx(200 / 50, rel=0.02)

    def test_on_radius_beats_off_radius(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        on = hough.map(generate_circle_profile((1000, 2000), DEFAULT_RADIUS, n_points=200))
        off = hough.map(generate_circle_profile((1000, 2000), DEFAULT_RADIUS + 3 * 50, n_points=200))
        assert (on.x, on.y) == (1000, 2000)
        assert on.weight > off.weight

    def test_full_circle(self):
        # the lower half never reaches the center row, the upper half carries the vote
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        full = (0.0, 2 * np.pi)
        on = hough.map(generate_circle_profile((1000, 2000), DEFAULT_RADIUS, n_points=400, arc=full))
        off = hough.map(generate_circle_profile((1000, 2000), DEFAULT_RADIUS + 3 * 50,
                                                n_points=400, arc=full))
        assert (on.x, on.y) == (1000, 2000)
        assert on.weight > off.weight

    def test_finds_noisy_circle(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        profile = generate_circle_profile((-4500, 750), DEFAULT_RADIUS, n_points=400,
                                          noise=5.0, seed=7)
        result = hough.map(profile)
        assert abs(result.x - (-4500)) <= 50
        assert abs(result.y - 750) <= 50
        assert result.detected

    def test_repeat_calls_identical(self):
        hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
        profile = generate_circle_profile((0, 0), DEFAULT_RADIUS, n_points=150, noise=8.0, seed=3)
        first = hough.map(profile)
        second = hough.map(profile)
        assert first == second

    def test_grid_reset_between_calls(self):
        hough = create(50, SMALL)
        hough.map(generate_circle_profile((0, 0), 50, n_points=60))
        assert hough.votes.any()
        assert hough.map([]) == HoughResult(0.0, 0, 0)
        assert not hough.votes.any()

    def test_votes_read_only(self):
        hough = create(50, SMALL)
        with pytest.raises(ValueError):
            hough.votes[0, 0] = 1.0

    def test_accepts_profile_data(self):
        hough = create(50, SMALL)
        points = [ProfileData(30, 40, 255), ProfileData(-30, 40, 12)]
        assert hough.map(points) == hough.map(np.array([[30, 40], [-30, 40]]))

    def test_first_maximum_wins(self):
        hough = create(50, SMALL)
        # bins at exactly one radius from the point tie; the lowest row
        # (y = -50) is scanned first
        result = hough.map([(0, 0)])
        assert result == HoughResult(0.1, 0, -50)

    def test_matches_reference_loop(self):
        hough = create(50, SMALL)
        rng = np.random.default_rng(11)
        points = rng.integers(-260, 260, size=(40, 2))
        result = hough.map(points)
        expected, bins = reference_map(hough, points.tolist())
        assert result == expected
        np.testing.assert_array_equal(hough.votes, bins)

    def test_matches_reference_loop_on_arc(self):
        hough = create(50, SMALL)
        profile = generate_circle_profile((20, -30), 50, n_points=80, noise=3.0, seed=5)
        result = hough.map(profile)
        expected, bins = reference_map(hough, profile.to_numpy().tolist())
        assert result == expected
        np.testing.assert_array_equal(hough.votes, bins)


class TestYWindow:
    """
    The Y window reaches only one step above each point, so only the upper
    arc of a circle votes for its center. These tests pin that behavior
    against a symmetric window.
    """

    def test_upper_arc_agrees_with_symmetric(self):
        hough = create(50, SMALL)
        profile = generate_circle_profile((0, 0), 50, n_points=60)
        result = hough.map(profile)
        symmetric, _ = reference_map(hough, profile.to_numpy().tolist(), symmetric=True)
        assert (result.x, result.y) == (0, 0)
        assert (symmetric.x, symmetric.y) == (0, 0)

    def test_lower_arc_misses_center(self):
        hough = create(50, SMALL)
        profile = generate_circle_profile((0, 0), 50, n_points=40,
                                          arc=(np.pi + 0.1, 2 * np.pi - 0.1))
        result = hough.map(profile)
        symmetric, _ = reference_map(hough, profile.to_numpy().tolist(), symmetric=True)

        center = (hough.y_axis.index_of(0), hough.x_axis.index_of(0))
        assert hough.votes[center] == 0.0
        assert result.y < 0
        assert (symmetric.x, symmetric.y) == (0, 0)
