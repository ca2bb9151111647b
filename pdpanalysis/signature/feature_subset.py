from typing import Any, Sequence
import numpy as np
from numpy import typing as npt
import pandas as pd


class FeatureSubset:
    def __init__(self, *features: str):
        if len(set(features)) != len(features):
            raise ValueError(f"Duplicate features in subset: {features}")
        self._features = tuple(features)

    def project(self, data: pd.DataFrame, values: Sequence[Any]) -> pd.DataFrame:
        """
        Projects the rows in data to the hyperplane defined by the values.
        In practice, this just overwrites the columns corresponding to this feature subset
        using the values given by values. All other columns are left untouched.
        Can be used to compute the partial dependence at a given point for this feature subset.
        :param data: Data to be projected. Shape: (-1, total_num_features)
        :param values: Values to project the data to. Length: len(self.features)
        :return: Projected copy of the data. Shape: (-1, total_num_features)
        """
        if len(values) != len(self._features):
            raise ValueError(f"Invalid number of values: expected {len(self._features)}, got {len(values)}")
        data_copy = data.copy()
        for feature, value in zip(self._features, values):
            dtype = data_copy[feature].dtype
            if isinstance(dtype, pd.CategoricalDtype):
                # Keep the category dtype so encoders downstream see the same labels
                data_copy[feature] = pd.Series(value, index=data_copy.index, dtype=dtype)
            else:
                data_copy[feature] = value
        return data_copy

    def get_columns(self, data: pd.DataFrame, dtype=None) -> npt.NDArray:
        """
        Extracts the columns in data that correspond to this feature subset.
        :param data: Data from which to extract columns. Shape: (-1, total_num_features)
        :param dtype: Optional numpy dtype to convert the columns to.
        :return: Extracted columns. Shape: (-1, len(self.features))
        """
        if dtype is None:
            return data[list(self._features)].to_numpy()
        return data[list(self._features)].to_numpy(dtype=dtype, na_value=np.nan)

    def __contains__(self, item):
        return item in self._features

    def __len__(self):
        return len(self._features)

    def __iter__(self):
        return iter(self._features)

    def __getitem__(self, index):
        return self._features[index]

    def __repr__(self):
        return "FeatureSubset(" + ", ".join(repr(f) for f in self._features) + ")"

    def __hash__(self):
        return hash(self._features)

    def __eq__(self, other):
        return type(other) == FeatureSubset and other.features == self.features

    @property
    def features(self):
        return self._features
