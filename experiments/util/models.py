from typing import Dict, Optional
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import RandomForestRegressor
from sklearn.metrics import r2_score
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OrdinalEncoder


def train_forest(X: pd.DataFrame, y: pd.Series, forest_kwargs: Optional[Dict] = None,
                 seed: Optional[int] = None) -> Pipeline:
    """
    Fits a random forest on a frame with numeric and category columns.
    Category columns are ordinal-encoded using their own label order, all
    other columns are passed through unchanged.
    """
    forest_kwargs = forest_kwargs if forest_kwargs is not None else {}
    categorical = list(X.select_dtypes(include="category").columns)
    encoder = ColumnTransformer(
        [("categorical",
          OrdinalEncoder(categories=[list(X[col].cat.categories) for col in categorical]),
          categorical)],
        remainder="passthrough")
    model = Pipeline([
        ("encode", encoder),
        ("forest", RandomForestRegressor(oob_score=True, random_state=seed, n_jobs=-1, **forest_kwargs)),
    ])
    model.fit(X, y)
    print(f"R2 (train): {r2_score(y, model.predict(X)):.3f}")
    print(f"R2 (out-of-bag): {model.named_steps['forest'].oob_score_:.3f}")
    return model
