import numpy as np
import pytest

from pdpanalysis.sampling import ConvexHullMask


def test_square_interior_boundary_and_outside():
    hull = ConvexHullMask(np.array([[0., 0.], [2., 0.], [2., 2.], [0., 2.], [1., 1.]]))
    inside = hull.contains(np.array([[1., 1.], [0., 0.], [2., 1.], [1., 2.], [2.5, 1.], [-0.1, 0.]]))
    assert inside.tolist() == [True, True, True, True, False, False]


def test_different_scales_share_tolerance():
    # sqft vs bedrooms style ranges
    hull = ConvexHullMask(np.array([[500., 1.], [5000., 1.], [500., 6.], [5000., 6.]]))
    inside = hull.contains(np.array([[5000., 6.], [5010., 6.], [2750., 3.5]]))
    assert inside.tolist() == [True, False, True]


def test_single_point():
    hull = ConvexHullMask(np.array([[3., 4.], [3., 4.]]))
    assert hull.contains(np.array([[3., 4.], [3., 4.5]])).tolist() == [True, False]


def test_collinear_points():
    hull = ConvexHullMask(np.array([[1., 10.], [2., 20.], [3., 30.]]))
    queries = np.array([[1., 10.], [1.5, 15.], [3., 30.], [4., 40.], [2., 10.]])
    assert hull.contains(queries).tolist() == [True, True, True, False, False]


def test_vertical_segment():
    hull = ConvexHullMask(np.array([[1., 0.], [1., 5.]]))
    assert hull.contains(np.array([[1., 2.], [1.5, 2.], [1., 6.]])).tolist() == [True, False, False]


def test_missing_values_are_dropped():
    hull = ConvexHullMask(np.array([[0., 0.], [1., 0.], [0., 1.], [np.nan, 5.]]))
    assert hull.contains(np.array([[0., 5.]])).tolist() == [False]


def test_invalid_points():
    with pytest.raises(ValueError):
        ConvexHullMask(np.zeros((4, 3)))
    with pytest.raises(ValueError):
        ConvexHullMask(np.full((2, 2), np.nan))
