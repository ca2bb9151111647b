"""
Partial dependence of a fitted regression model on one or two features.

For every point of a grid over the target feature(s), the target columns of
the whole reference dataset are overwritten with the grid value(s) and the
model's predictions on the modified data are averaged. This marginalizes the
prediction over the empirical distribution of all other features.
"""

import warnings
from typing import Any, Collection, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from joblib import Parallel, delayed
from numpy import typing as npt
from tqdm import tqdm

from .exceptions import EmptyDatasetError, PredictorError
from .pdp_result import PDPResult
from .sampling import ConvexHullMask, cartesian_grid, check_resolution, feature_grid
from .signature import DataSignature, FeatureSubset, as_frame
from .signature.data_signature import Records
from .util import PredictFn, get_predict_fn


def _as_feature_subset(target_features: str | Sequence[str]) -> FeatureSubset:
    if isinstance(target_features, str):
        target_features = (target_features,)
    if len(target_features) not in (1, 2):
        raise ValueError(
            f"Partial dependence requires 1 or 2 target features, got {len(target_features)}")
    return FeatureSubset(*target_features)


class PartialDependenceEstimator:
    def __init__(self, n_jobs: Optional[int] = None, verbose: bool = False,
                 categorical_features: Optional[Collection[str]] = None) -> None:
        """
        :param n_jobs: Number of joblib workers used to evaluate grid points.
            None or 1 evaluates sequentially, -1 uses all cores.
        :param verbose: Show a progress bar over the grid points.
        :param categorical_features: Numeric columns that should be treated as
            categorical (in addition to category, object, string and bool columns).
        """
        self.n_jobs = n_jobs
        self.verbose = verbose
        self.categorical_features = categorical_features

    @staticmethod
    def _predict_projected(predict_fn: PredictFn, data: pd.DataFrame,
                           feature_subset: FeatureSubset,
                           values: Tuple[Any, ...]) -> npt.NDArray:
        """
        Predict on a copy of the data where the target features are fixed.
        Runs in joblib workers: predictor exceptions propagate unchanged so
        that joblib can re-raise them in the calling process.
        :param predict_fn: The model of which we want to compute the partial dependence
        :param data: The reference dataset to estimate the average over. Never modified.
        :param feature_subset: The target features
        :param values: Grid value for each target feature
        :return: Raw predictions for every row of the projected dataset
        """
        return np.asarray(predict_fn(feature_subset.project(data, values)))

    @staticmethod
    def _average_prediction(output: npt.NDArray, num_rows: int) -> float:
        try:
            output = np.asarray(output, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise PredictorError(
                f"Predictor returned non-numeric output: {err}", num_rows=num_rows) from err
        if len(output.shape) == 2 and output.shape[1] == 1:
            output = output.ravel()
        if len(output.shape) != 1 or output.shape[0] != num_rows:
            raise PredictorError(
                f"Predictor returned output of shape {output.shape} "
                f"for {num_rows} input rows", num_rows=num_rows)
        return float(np.average(output))

    def _hull_mask(self, data: pd.DataFrame, data_signature: DataSignature,
                   feature_subset: FeatureSubset,
                   points: List[Tuple[Any, ...]]) -> Optional[np.ndarray]:
        if len(feature_subset) != 2:
            return None
        if any(data_signature.is_categorical(feat) for feat in feature_subset):
            warnings.warn(
                f"Convex hull restriction ignored for {feature_subset}: "
                "it is only defined for two numeric features", UserWarning)
            return None
        hull = ConvexHullMask(feature_subset.get_columns(data, dtype=np.float64))
        return hull.contains(np.array(points, dtype=np.float64))

    def compute(self, predictor: Any, reference_dataset: pd.DataFrame | Records,
                target_features: str | Sequence[str], grid_resolution: int = 20,
                restrict_to_convex_hull: bool = False) -> PDPResult:
        """
        Compute the partial dependence of a predictor on one or two features.

        :param predictor: A fitted model with a predict(rows) method, or a
            callable taking a DataFrame and returning one prediction per row.
        :param reference_dataset: DataFrame or sequence of records. Used to
            derive the grid and as background distribution for all other features.
        :param target_features: One feature name, or a sequence of 1 or 2 names.
            For two features, the first one is the major axis of the grid.
        :param grid_resolution: Number of evenly spaced grid values for numeric
            features. Categorical features always use all observed labels.
        :param restrict_to_convex_hull: For two numeric features, skip grid
            points outside the convex hull of the observed feature pairs.
        :return: PDPResult containing the averaged prediction at each grid point.
        """
        feature_subset = _as_feature_subset(target_features)
        check_resolution(grid_resolution)
        data = as_frame(reference_dataset)
        if data.shape[0] == 0:
            raise EmptyDatasetError()
        data_signature = DataSignature(data, self.categorical_features)
        data_signature.check_features(feature_subset)
        predict_fn = get_predict_fn(predictor)

        grids = [feature_grid(data_signature, feat, grid_resolution) for feat in feature_subset]
        grid_indices = cartesian_grid([range(len(g)) for g in grids])
        points = [tuple(grids[i][j] for i, j in enumerate(idx)) for idx in grid_indices]

        if restrict_to_convex_hull:
            mask = self._hull_mask(data, data_signature, feature_subset, points)
            if mask is not None:
                grid_indices = [idx for idx, inside in zip(grid_indices, mask) if inside]
                points = [point for point, inside in zip(points, mask) if inside]

        # joblib returns results in submission order, so outputs line up with points
        feature_desc = ", ".join(str(feat) for feat in feature_subset)
        try:
            outputs = Parallel(n_jobs=self.n_jobs)(
                delayed(self._predict_projected)(predict_fn, data, feature_subset, point)
                for point in tqdm(points, desc=f"PDP {feature_desc}", disable=not self.verbose))
        except Exception as err:
            raise PredictorError(
                f"Predictor failed while computing partial dependence on {feature_desc}: {err}",
                num_rows=data.shape[0]) from err
        values = [self._average_prediction(output, data.shape[0]) for output in outputs]
        return PDPResult(feature_subset, grids, grid_indices, values)


def partial_dependence(predictor: Any, reference_dataset: pd.DataFrame | Records,
                       target_features: str | Sequence[str], grid_resolution: int = 20,
                       restrict_to_convex_hull: bool = False, **kwargs) -> PDPResult:
    """
    Shorthand for PartialDependenceEstimator(**kwargs).compute(...)
    """
    return PartialDependenceEstimator(**kwargs).compute(
        predictor, reference_dataset, target_features,
        grid_resolution=grid_resolution,
        restrict_to_convex_hull=restrict_to_convex_hull)
