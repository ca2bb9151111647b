from typing import Any, Iterator, List, Sequence, Tuple
import numpy as np
from numpy import typing as npt
import pandas as pd

from .signature import FeatureSubset


class PDPResult:
    """
    Partial dependence of a model on one or two features.
    Iterating over the result yields (value, yhat) pairs for a single
    feature and (value_1, value_2, yhat) triples for a pair of features,
    in grid order (first feature major).
    """

    def __init__(self, feature_subset: FeatureSubset,
                 grid: Sequence[Sequence[Any]],
                 grid_indices: Sequence[Tuple[int, ...]],
                 values: npt.ArrayLike) -> None:
        """
        :param feature_subset: The features the partial dependence was computed for
        :param grid: Grid values for each feature, before any convex hull filtering
        :param grid_indices: For each evaluated point, its index in each feature grid
        :param values: Averaged prediction at each evaluated point
        """
        self.feature_subset = feature_subset
        self.grid: Tuple[List[Any], ...] = tuple(list(g) for g in grid)
        self.grid_indices: List[Tuple[int, ...]] = [tuple(idx) for idx in grid_indices]
        self.values: npt.NDArray = np.asarray(values, dtype=np.float64)
        if self.values.shape != (len(self.grid_indices),):
            raise ValueError(
                f"Expected {len(self.grid_indices)} values, got shape {self.values.shape}")

    @property
    def features(self) -> Tuple[str, ...]:
        return self.feature_subset.features

    @property
    def points(self) -> List[Tuple[Any, ...]]:
        return [tuple(self.grid[i][j] for i, j in enumerate(idx)) for idx in self.grid_indices]

    def __len__(self):
        return len(self.grid_indices)

    def __getitem__(self, index: int) -> Tuple[Any, ...]:
        idx = self.grid_indices[index]
        return (*(self.grid[i][j] for i, j in enumerate(idx)), float(self.values[index]))

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        for index in range(len(self)):
            yield self[index]

    def __repr__(self):
        return f"PDPResult(features={self.features}, num_points={len(self)})"

    def to_frame(self) -> pd.DataFrame:
        """
        :return: DataFrame with one column per feature and a "yhat" column
            containing the partial dependence.
        """
        result = pd.DataFrame(self.points, columns=list(self.features))
        result["yhat"] = self.values
        return result

    def as_matrix(self) -> npt.NDArray:
        """
        Arranges a two-feature result on its full grid, e.g. for contour plots.
        Rows follow the first feature's grid, columns the second's.
        Points that were not evaluated (outside the convex hull) are NaN.
        :return: Shape: (len(self.grid[0]), len(self.grid[1]))
        """
        if len(self.features) != 2:
            raise ValueError("as_matrix() is only available for two features")
        result = np.full((len(self.grid[0]), len(self.grid[1])), np.nan)
        for (i, j), value in zip(self.grid_indices, self.values):
            result[i, j] = value
        return result
