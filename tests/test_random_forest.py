import numpy as np
import pandas as pd
import pytest
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import RandomForestRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OrdinalEncoder

from pdpanalysis import PartialDependenceEstimator


@pytest.fixture(scope="module")
def rentals():
    rng = np.random.default_rng(42)
    size = 300
    data = pd.DataFrame({
        "temp": rng.uniform(0, 35, size),
        "hum": rng.uniform(20, 100, size),
        "season": pd.Categorical(rng.choice(["spring", "summer", "fall", "winter"], size),
                                 categories=["spring", "summer", "fall", "winter"]),
    })
    season_effect = data["season"].map({"spring": 0., "summer": 500., "fall": 300., "winter": -200.})
    target = 100 * data["temp"] - 5 * data["hum"] + season_effect.astype(float) \
        + rng.normal(0, 50, size)
    model = Pipeline([
        ("encode", ColumnTransformer(
            [("season", OrdinalEncoder(categories=[list(data["season"].cat.categories)]), ["season"])],
            remainder="passthrough")),
        ("forest", RandomForestRegressor(n_estimators=30, random_state=0)),
    ])
    model.fit(data, target)
    return data, model


def test_forest_temperature_effect_is_increasing(rentals):
    data, model = rentals
    result = PartialDependenceEstimator().compute(model, data, "temp", grid_resolution=10)
    assert len(result) == 10
    assert result.values[-1] - result.values[0] > 1500


def test_forest_season_effect(rentals):
    data, model = rentals
    result = PartialDependenceEstimator().compute(model, data, "season")
    effects = dict((season, yhat) for season, yhat in result)
    assert list(effects) == ["spring", "summer", "fall", "winter"]
    assert effects["summer"] > effects["spring"]
    assert effects["summer"] > effects["winter"]


def test_forest_two_features_within_hull(rentals):
    data, model = rentals
    subset = data[data["temp"] < 5 + data["hum"] / 4]
    result = PartialDependenceEstimator(verbose=True).compute(
        model, subset, ("temp", "hum"), grid_resolution=8, restrict_to_convex_hull=True)
    assert 0 < len(result) < 64
    assert np.isnan(result.as_matrix()).sum() == 64 - len(result)
