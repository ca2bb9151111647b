import os

import pandas as pd
import pytest

from experiments.util.datasets import get_dataset, sample_rows, type_columns


def test_get_dataset_from_cache(tmp_path):
    os.makedirs(tmp_path / "bike")
    pd.DataFrame({
        "season": ["spring", "fall"], "temp": [9.8, 24.6], "count": [16, 40],
    }).to_csv(tmp_path / "bike" / "data.csv", index=False)
    X, y = get_dataset("bike", str(tmp_path), download=False)
    assert X.columns.tolist() == ["season", "temp"]
    assert y.tolist() == [16., 40.]


def test_get_dataset_missing(tmp_path):
    with pytest.raises(ValueError):
        get_dataset("house", str(tmp_path), download=False)


def test_type_columns():
    df = pd.DataFrame({"weather": ["rain", "clear", "rain"], "holiday": [False, True, False],
                       "date": ["a", "b", "c"], "temp": [1., 2., 3.]})
    typed = type_columns(df, categorical=["weather", "holiday"], drop=["date"])
    assert typed.columns.tolist() == ["weather", "holiday", "temp"]
    assert list(typed["weather"].cat.categories) == ["clear", "rain"]
    assert list(typed["holiday"].cat.categories) == ["False", "True"]
    assert "date" in df.columns


def test_sample_rows():
    X = pd.DataFrame({"a": range(10)})
    y = pd.Series(range(10, 20))
    X_sampled, y_sampled = sample_rows(X, y, 4, seed=0)
    assert len(X_sampled) == 4
    assert (y_sampled.to_numpy() - X_sampled["a"].to_numpy() == 10).all()
    X_full, _ = sample_rows(X, y, None)
    assert X_full is X
