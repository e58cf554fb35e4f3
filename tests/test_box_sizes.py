"""Tests for the box-size planner."""

import math

import pytest

from blurslice import create_box_gauss, plan_boxes


class TestNonPositiveSigma:
    """Sigma <= 0 must plan identity passes."""

    @pytest.mark.parametrize("sigma", [0.0, -0.5, -100.0])
    @pytest.mark.parametrize("n", [1, 3, 4])
    def test_all_ones(self, sigma, n):
        assert create_box_gauss(sigma, n) == (1,) * n

    def test_nan_sigma(self):
        assert create_box_gauss(math.nan, 3) == (1, 1, 1)


class TestKnownPlans:
    """Closed-form results for hand-computed cases."""

    def test_sigma_two_three_passes(self):
        # w_ideal = 5, m rounds to 4 and saturates at 3
        assert create_box_gauss(2.0, 3) == (5, 5, 5)

    def test_sigma_one(self):
        assert create_box_gauss(1.0, 3) == (3, 3, 3)

    def test_mixed_widths(self):
        # w_ideal = 10.8 -> wl = 9, wu = 11, m = round(1.2) = 1
        assert create_box_gauss(4.0, 2) == (9, 11)

    def test_single_pass(self):
        # w_ideal = 14.86 -> wl = 13, m = round(0.57) = 1
        assert create_box_gauss(4.0, 1) == (13,)

    def test_large_sigma(self):
        assert create_box_gauss(10.0, 3) == (21, 21, 21)

    def test_alias(self):
        assert plan_boxes is create_box_gauss


class TestSmallSigmaBoundary:
    """The smaller width must never drop below 1."""

    def test_even_floor_of_two_becomes_one(self):
        # w_ideal = sqrt(3) + 1 = 2.73, floor 2 is even -> 1
        assert create_box_gauss(0.5, 1) == (1,)

    @pytest.mark.parametrize("sigma", [1e-6, 0.01, 0.1, 0.3])
    @pytest.mark.parametrize("n", [1, 2, 3, 4, 8])
    def test_tiny_sigma(self, sigma, n):
        boxes = create_box_gauss(sigma, n)
        assert len(boxes) == n
        assert all(b >= 1 for b in boxes)

    def test_tiny_sigma_is_identity(self):
        assert create_box_gauss(0.1, 3) == (1, 1, 1)


class TestPlanInvariants:
    """Structural invariants over a range of inputs."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("sigma", [0.2, 0.7, 1.5, 2.5, 3.3, 7.0, 20.0, 50.0])
    def test_odd_sorted_and_sized(self, sigma, n):
        boxes = create_box_gauss(sigma, n)
        assert len(boxes) == n
        assert all(b >= 1 and b % 2 == 1 for b in boxes)
        assert list(boxes) == sorted(boxes)
        assert boxes[-1] - boxes[0] in (0, 2)

    def test_width_grows_with_sigma(self):
        widths = [max(create_box_gauss(s, 3)) for s in (1.0, 2.0, 5.0, 10.0, 20.0)]
        assert widths == sorted(widths)

    @pytest.mark.parametrize("n", [0, -1])
    def test_invalid_pass_count(self, n):
        with pytest.raises(ValueError):
            create_box_gauss(2.0, n)
