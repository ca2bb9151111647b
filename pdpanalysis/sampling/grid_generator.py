from abc import abstractmethod
from itertools import product
from typing import Any, List, Sequence, Tuple
import numpy as np

from ..signature import DataSignature


def check_resolution(resolution: int) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) \
            or resolution < 1:
        raise ValueError(f"Grid resolution must be a positive integer, got {resolution!r}")
    return int(resolution)


class GridGenerator:
    @abstractmethod
    def get_grid(self, data_signature: DataSignature, feature: str) -> List[Any]:
        raise NotImplementedError


class LinspaceGrid(GridGenerator):
    """
    Evenly spaced values spanning [min, max] of a numeric feature,
    endpoints included.
    """
    def __init__(self, resolution: int = 20):
        self.resolution = check_resolution(resolution)

    def get_grid(self, data_signature: DataSignature, feature: str) -> List[Any]:
        low, high = data_signature.get_range(feature)
        return np.linspace(low, high, self.resolution).tolist()


class CategoryGrid(GridGenerator):
    """
    All observed labels of a categorical feature, in label order.
    Categories are never subsampled: an unordered feature has no meaningful
    continuum to sample from.
    """
    def get_grid(self, data_signature: DataSignature, feature: str) -> List[Any]:
        return list(data_signature.get_categories()[feature])


def feature_grid(data_signature: DataSignature, feature: str, resolution: int = 20) -> List[Any]:
    if data_signature.is_categorical(feature):
        return CategoryGrid().get_grid(data_signature, feature)
    return LinspaceGrid(resolution).get_grid(data_signature, feature)


def cartesian_grid(grids: Sequence[Sequence[Any]]) -> List[Tuple[Any, ...]]:
    """
    Cross product of per-feature grids. The first grid is the major axis:
    for two features, all values of the second feature are visited for the
    first value of the first feature before moving on.
    """
    return list(product(*grids))
