from typing import Collection, Optional


class PDPError(Exception):
    pass


class InvalidFeatureError(PDPError):
    def __init__(self, feature: str, columns: Collection[str]) -> None:
        super().__init__(
                f"Feature {feature!r} not found in reference dataset. "
                f"Available columns: {', '.join(str(c) for c in columns)}")
        self.feature = feature
        self.columns = tuple(columns)


class EmptyDatasetError(PDPError):
    def __init__(self) -> None:
        super().__init__(
                "Reference dataset contains no rows, "
                "partial dependence cannot be computed")


class PredictorError(PDPError):
    def __init__(self, message: str, num_rows: Optional[int] = None) -> None:
        super().__init__(message)
        self.num_rows = num_rows
