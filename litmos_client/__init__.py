"""Python client for the Litmos learning-management REST API."""

from .client import LitmosClient
from .config import Configuration, configuration_from_env, load_configuration
from .dates import decode_asp_date, is_asp_date
from .errors import (
    ApiError,
    ConfigurationError,
    DateFormatError,
    LitmosError,
    NotFound,
    RateLimited,
    ResponseError,
)
from .mapper import normalise_keys, normalise_response, underscore
from .outcome import Failure, FailureKind, Success, classify
from .transport import SUPPRESS_FLAG, RequestDispatcher

__all__ = [
    "ApiError",
    "Configuration",
    "ConfigurationError",
    "DateFormatError",
    "Failure",
    "FailureKind",
    "LitmosClient",
    "LitmosError",
    "NotFound",
    "RateLimited",
    "RequestDispatcher",
    "ResponseError",
    "SUPPRESS_FLAG",
    "Success",
    "classify",
    "configuration_from_env",
    "decode_asp_date",
    "is_asp_date",
    "load_configuration",
    "normalise_keys",
    "normalise_response",
    "underscore",
]

__version__ = "0.1.0"
