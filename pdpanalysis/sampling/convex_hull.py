"""
Membership tests for the 2D convex hull of observed feature pairs.
Used to avoid reporting partial dependence in regions of the feature space
without supporting observations.

Coordinates are rescaled to the unit square (per axis, using the observed
range) before building the hull, so that features on very different scales
share a single tolerance. Points on the boundary count as inside.
"""

import numpy as np
from numpy import typing as npt
from scipy.spatial import ConvexHull


class ConvexHullMask:
    def __init__(self, points: npt.NDArray, tol: float = 1e-9) -> None:
        """
        :param points: Observed pairs. Shape: (num_points, 2)
        :param tol: Tolerance in rescaled coordinates for boundary membership.
        """
        points = np.asarray(points, dtype=np.float64)
        if len(points.shape) != 2 or points.shape[1] != 2:
            raise ValueError(f"Invalid shape: points: {points.shape}")
        points = points[~np.isnan(points).any(axis=1)]
        if points.shape[0] == 0:
            raise ValueError("Convex hull requires at least one observed point")
        self.tol = tol
        self.offset = np.min(points, axis=0)
        scale = np.ptp(points, axis=0)
        self.scale = np.where(scale > 0, scale, 1.)
        self.points = np.unique(self._rescale(points), axis=0)

        self.hull = None
        # Degenerate supports: a single point or a line segment
        centered = self.points - np.mean(self.points, axis=0)
        self.rank = 0 if self.points.shape[0] == 1 else \
            int(np.linalg.matrix_rank(centered, tol=tol))
        if self.rank == 2:
            self.hull = ConvexHull(self.points)

    def _rescale(self, points: npt.NDArray) -> npt.NDArray:
        return (points - self.offset) / self.scale

    def contains(self, queries: npt.NDArray) -> npt.NDArray:
        """
        :param queries: Points to test. Shape: (num_queries, 2)
        :return: Boolean mask, True where the query lies inside or on the
            boundary of the hull. Shape: (num_queries,)
        """
        queries = self._rescale(np.asarray(queries, dtype=np.float64).reshape(-1, 2))
        if self.rank == 0:
            return np.linalg.norm(queries - self.points[0], axis=1) <= self.tol
        if self.rank == 1:
            return self._segment_contains(queries)
        # Each facet satisfies normal . x + offset <= 0 for interior points
        equations = self.hull.equations
        distances = queries @ equations[:, :2].T + equations[:, 2]
        return np.all(distances <= self.tol, axis=1)

    def _segment_contains(self, queries: npt.NDArray) -> npt.NDArray:
        center = np.mean(self.points, axis=0)
        _, _, vt = np.linalg.svd(self.points - center)
        direction = vt[0]
        proj_points = (self.points - center) @ direction
        proj_queries = (queries - center) @ direction
        perpendicular = queries - center - np.outer(proj_queries, direction)
        return (np.linalg.norm(perpendicular, axis=1) <= self.tol) \
            & (proj_queries >= np.min(proj_points) - self.tol) \
            & (proj_queries <= np.max(proj_points) + self.tol)
