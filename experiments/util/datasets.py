from sklearn.datasets import fetch_openml
import numpy as np
import pandas as pd
import os
from typing import Collection, Optional, Tuple

"""
OpenML datasets:
- https://www.openml.org/search?type=data&id=44063 (Bike_Sharing_Demand, hourly rental counts)
- https://www.openml.org/search?type=data&id=42092 (house_sales, King County house prices)
"""

_DS_DICT = {
    "bike": {"openml_args": {"name": "Bike_Sharing_Demand", "version": 2}, "target": "count"},
    "house": {"openml_args": {"data_id": 42092}, "target": "price"},
}


def get_ds_metadata(ds_name):
    return _DS_DICT[ds_name]


def get_valid_datasets():
    return _DS_DICT.keys()


def get_dataset(ds_name, data_dir, download=True, force_download=False) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Loads a dataset from data_dir/ds_name/data.csv, downloading it from
    OpenML first if necessary. Column types are not restored from the CSV:
    use type_columns() to mark categorical columns.
    :return: Features and target
    """
    config = _DS_DICT[ds_name]
    ds_dir = os.path.join(data_dir, ds_name)
    ds_path = os.path.join(ds_dir, "data.csv")

    if (not os.path.isfile(ds_path) and download) or force_download:
        ds = fetch_openml(**config["openml_args"], as_frame=True)
        df = ds.frame.dropna().reset_index(drop=True)
        os.makedirs(ds_dir, exist_ok=True)
        df.to_csv(ds_path, index=False)
    elif not os.path.isfile(ds_path):
        raise ValueError(f"Dataset {ds_name} not found. Set download=True to allow downloading from OpenML.")

    df = pd.read_csv(ds_path)
    y = df[config["target"]].astype(np.float64)
    X = df.drop(columns=[config["target"]])
    return X, y


def type_columns(df: pd.DataFrame, categorical: Collection[str] = (),
                 drop: Collection[str] = ()) -> pd.DataFrame:
    """
    Drops unused columns and converts categorical columns to the pandas
    category dtype. Labels are ordered by their sorted values.
    """
    df = df.drop(columns=list(drop))
    for col in categorical:
        df[col] = pd.Categorical(df[col].astype(str), categories=sorted(df[col].astype(str).unique()))
    return df


def sample_rows(X: pd.DataFrame, y: pd.Series, num_rows: Optional[int],
                seed: Optional[int] = None) -> Tuple[pd.DataFrame, pd.Series]:
    if num_rows is None or num_rows >= X.shape[0]:
        return X, y
    X_sampled = X.sample(n=num_rows, random_state=seed)
    return X_sampled, y.loc[X_sampled.index]
