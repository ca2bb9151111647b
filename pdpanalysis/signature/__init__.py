from .feature_subset import FeatureSubset
from .data_signature import DataSignature, as_frame
