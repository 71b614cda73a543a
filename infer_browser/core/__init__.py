from .exceptions import (
    ConfigError,
    InferBrowserError,
    InputParseError,
    InputShapeError,
    ModelLoadError,
    PredictionError,
)
from .model import LoadedModel, load_model
from .preprocess import parse_vector, to_batch

__all__ = [
    "ConfigError",
    "InferBrowserError",
    "InputParseError",
    "InputShapeError",
    "LoadedModel",
    "ModelLoadError",
    "PredictionError",
    "load_model",
    "parse_vector",
    "to_batch",
]
