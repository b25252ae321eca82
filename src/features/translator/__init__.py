from .dispatcher import Dispatcher
from .exceptions import (
    ApiError,
    ConfigurationError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
    TranslationError,
    UnknownError,
)
from .translation_service import TranslationService

__all__ = [
    "ApiError",
    "ConfigurationError",
    "Dispatcher",
    "NetworkError",
    "ParseError",
    "RequestTimeoutError",
    "TranslationError",
    "TranslationService",
    "UnknownError",
]
