import argparse
import json
import os
import time

import yaml
from tqdm import tqdm

from experiments.util.datasets import get_dataset, get_ds_metadata, sample_rows, type_columns
from experiments.util.models import train_forest
from experiments.util.plotting import plot_pdp_1d, plot_pdp_2d
from pdpanalysis import PartialDependenceEstimator

_DESC = """
This script loads a dataset, fits a random forest on it and computes partial
dependence plots for a list of features and feature pairs.

The experiment is described by a YAML file (see experiments/configs). For each
feature (pair), a PNG figure and a CSV file with the partial dependence values
are written to [OUT_DIR]/[DATASET_NAME]. A meta.json file with the configuration
and runtimes is written alongside.
"""


def measure_runtime(func):
    start_t = time.time()
    return_value = func()
    end_t = time.time()
    return return_value, end_t - start_t


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=_DESC)
    parser.add_argument("experiment_config", type=str, help="YAML file describing the experiment")
    parser.add_argument("out_dir", type=str, help="Directory where figures and values are stored")
    parser.add_argument("-d", "--data-dir", default="./data", help="Directory where datasets are cached")
    args = parser.parse_args()

    with open(args.experiment_config, "r") as stream:
        config = yaml.full_load(stream)

    ds_name = config["dataset"]
    target_name = get_ds_metadata(ds_name)["target"]
    out_dir = os.path.join(args.out_dir, ds_name)
    os.makedirs(out_dir, exist_ok=True)

    print("Loading data...")
    X, y = get_dataset(ds_name, args.data_dir, download=True)
    X = type_columns(X, config.get("categorical", []), config.get("drop", []))
    X, y = sample_rows(X, y, config.get("num_rows"), config.get("seed"))
    print(f"Number of samples: {X.shape[0]}")

    print("Training random forest...")
    model, train_time = measure_runtime(
        lambda: train_forest(X, y, config.get("forest"), config.get("seed")))

    estimator = PartialDependenceEstimator(n_jobs=config.get("n_jobs"))
    grid_resolution = config.get("grid_resolution", 20)
    runtime = {"train": train_time}

    prog = tqdm(config.get("features", []))
    for feature in prog:
        prog.set_description(f"PDP {feature}")
        result, runtime[feature] = measure_runtime(
            lambda: estimator.compute(model, X, feature, grid_resolution=grid_resolution))
        result.to_frame().to_csv(os.path.join(out_dir, f"pdp_{feature}.csv"), index=False)
        plot_pdp_1d(result, X, os.path.join(out_dir, f"pdp_{feature}.png"), target_name)

    prog = tqdm(config.get("pairs", []))
    for feat_x, feat_y in prog:
        name = f"{feat_x}_{feat_y}"
        prog.set_description(f"PDP {feat_x}, {feat_y}")
        result, runtime[name] = measure_runtime(
            lambda: estimator.compute(model, X, (feat_x, feat_y), grid_resolution=grid_resolution,
                                      restrict_to_convex_hull=config.get("convex_hull", False)))
        result.to_frame().to_csv(os.path.join(out_dir, f"pdp_{name}.csv"), index=False)
        plot_pdp_2d(result, os.path.join(out_dir, f"pdp_{name}.png"), target_name)

    with open(os.path.join(out_dir, "meta.json"), "w") as fp:
        json.dump({"config": config, "runtime": runtime}, fp)
    print(f"Results saved in {out_dir}")
