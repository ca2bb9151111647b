from .model import Model, PredictFn, get_predict_fn
