from .errors import (
    ClientDecodeError,
    ClientError,
    ConfigurationError,
    ResponseError,
    WrapiError,
)
from .method import Method

__all__ = [
    "ClientDecodeError",
    "ClientError",
    "ConfigurationError",
    "Method",
    "ResponseError",
    "WrapiError",
]
