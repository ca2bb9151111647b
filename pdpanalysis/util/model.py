from abc import abstractmethod
from typing import Any, Callable
from numpy import typing as npt
import pandas as pd


PredictFn = Callable[[pd.DataFrame], npt.ArrayLike]


class Model:
    """
    Interface that represents any regression model as an object with a
    predict method that takes a pandas DataFrame of feature columns and
    produces one numeric prediction per row.
    This class can be subclassed to produce a compatible model if necessary,
    but any fitted scikit-learn regressor or pipeline follows this interface,
    and plain callables with the same signature are accepted as well.
    """
    @abstractmethod
    def predict(self, rows: pd.DataFrame) -> npt.ArrayLike:
        raise NotImplementedError


def get_predict_fn(predictor: Any) -> PredictFn:
    predict = getattr(predictor, "predict", None)
    if callable(predict):
        return predict
    if callable(predictor):
        return predictor
    raise TypeError(
        f"Predictor of type {type(predictor).__name__} has no predict() method "
        "and is not callable")
