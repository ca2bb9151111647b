from .exceptions import PDPError, InvalidFeatureError, EmptyDatasetError, PredictorError
from .signature import DataSignature, FeatureSubset
from .util import Model
from .pdp_result import PDPResult
from .partial_dependence import PartialDependenceEstimator, partial_dependence
