from typing import Any, Collection, Dict, List, Mapping, Optional, Sequence, Tuple
import pandas as pd
import numpy as np
from pandas.api import types as pdt

from ..exceptions import InvalidFeatureError
from .feature_subset import FeatureSubset


Records = Sequence[Mapping[str, Any]]


def as_frame(data: pd.DataFrame | Records) -> pd.DataFrame:
    """
    Converts a reference dataset to a pandas DataFrame.
    DataFrames are returned as-is (they are never modified downstream),
    sequences of records are converted row by row.
    """
    if isinstance(data, pd.DataFrame):
        return data
    return pd.DataFrame.from_records(list(data))


def _is_categorical_dtype(dtype) -> bool:
    return isinstance(dtype, pd.CategoricalDtype) or pdt.is_object_dtype(dtype) \
        or pdt.is_string_dtype(dtype) or pdt.is_bool_dtype(dtype)


def _observed_labels(column: pd.Series) -> List[Any]:
    observed = column.dropna().unique()
    if isinstance(column.dtype, pd.CategoricalDtype):
        # Keep the fixed label order of the dtype, but only labels that occur
        present = set(observed)
        return [label for label in column.dtype.categories if label in present]
    try:
        return sorted(observed)
    except TypeError:
        # Mixed label types can't be compared, fall back to their text form
        return sorted(observed, key=str)


class DataSignature:
    def __init__(self, dataframe: pd.DataFrame | Records,
                 categorical_features: Optional[Collection[str]] = None):
        """
        Extracts the signature of a reference dataset: its feature names,
        which features are categorical and the observed labels of each
        categorical feature.
        Columns with a pandas category, object, string or boolean dtype are
        treated as categorical. Numeric columns that encode categories (e.g.
        integer season codes) can be marked categorical explicitly.
        :param dataframe: the data to extract the signature from
        :param categorical_features: names of additional columns that should
            be treated as categorical.
        """
        self.dataframe = as_frame(dataframe)
        self.feature_names: Tuple[str, ...] = tuple(self.dataframe.columns)
        self.num_features: int = len(self.feature_names)
        self.num_rows: int = self.dataframe.shape[0]
        self.categories: Dict[str, List[Any]] = {}

        extra = set(categorical_features) if categorical_features is not None else set()
        unknown = extra - set(self.feature_names)
        if len(unknown) > 0:
            raise InvalidFeatureError(sorted(unknown, key=str)[0], self.feature_names)

        for feat_name in self.feature_names:
            column = self.dataframe[feat_name]
            if feat_name in extra or _is_categorical_dtype(column.dtype):
                self.categories[feat_name] = _observed_labels(column)

    def check_features(self, feature_subset: FeatureSubset):
        for feature in feature_subset:
            if feature not in self.feature_names:
                raise InvalidFeatureError(feature, self.feature_names)
            if not self.is_categorical(feature) and \
                    not pdt.is_numeric_dtype(self.dataframe[feature].dtype):
                raise ValueError(
                    f"Feature {feature!r} has dtype {self.dataframe[feature].dtype}, "
                    "which is neither numeric nor categorical")

    def is_categorical(self, feature: str) -> bool:
        return feature in self.categories

    def get_categories(self, feature_subset: Optional[FeatureSubset] = None) -> Dict[str, List[Any]]:
        if feature_subset is None:
            return self.categories
        return {key: value for key, value in self.categories.items() if key in feature_subset}

    def get_range(self, feature: str) -> Tuple[float, float]:
        values = self.dataframe[feature].to_numpy(dtype=np.float64, na_value=np.nan)
        return float(np.nanmin(values)), float(np.nanmax(values))
