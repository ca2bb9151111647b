from matplotlib import pyplot as plt
import numpy as np
import pandas as pd

from pdpanalysis import PDPResult


def plot_pdp_1d(result: PDPResult, data: pd.DataFrame, path: str, target_name: str = "prediction"):
    feature = result.features[0]
    fig, ax = plt.subplots(figsize=(6, 4))
    frame = result.to_frame()
    if isinstance(data[feature].dtype, pd.CategoricalDtype) or frame[feature].dtype == object:
        ax.bar([str(v) for v in frame[feature]], frame["yhat"])
    else:
        ax.plot(frame[feature], frame["yhat"])
        # Rug of observed values shows where the curve is supported by data
        ax.plot(data[feature], np.full(data.shape[0], frame["yhat"].min()), "|", color="black", alpha=.3)
    ax.set_xlabel(feature)
    ax.set_ylabel(f"Average {target_name}")
    ax.set_title(f"Partial dependence on {feature}")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def plot_pdp_2d(result: PDPResult, path: str, target_name: str = "prediction"):
    feat_x, feat_y = result.features
    fig, ax = plt.subplots(figsize=(6, 5))
    # Rows of the matrix follow the first feature, which goes on the x axis
    matrix = np.ma.masked_invalid(result.as_matrix().T)
    x_labels, y_labels = result.grid
    mesh = ax.pcolormesh(np.arange(len(x_labels)), np.arange(len(y_labels)), matrix,
                         shading="nearest")
    ax.set_xticks(np.arange(len(x_labels)), _tick_labels(x_labels), rotation=90)
    ax.set_yticks(np.arange(len(y_labels)), _tick_labels(y_labels))
    ax.set_xlabel(feat_x)
    ax.set_ylabel(feat_y)
    fig.colorbar(mesh, ax=ax, label=f"Average {target_name}")
    ax.set_title(f"Partial dependence on {feat_x} and {feat_y}")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def _tick_labels(values):
    return [f"{v:.3g}" if isinstance(v, float) else str(v) for v in values]
