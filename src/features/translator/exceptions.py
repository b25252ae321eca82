from schemas.enums import ErrorKind
from schemas.models import Failure


class TranslationError(RuntimeError):
    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, code: int | None = None, data: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data


class ConfigurationError(TranslationError):
    kind = ErrorKind.CONFIGURATION


class NetworkError(TranslationError):
    kind = ErrorKind.NETWORK


class RequestTimeoutError(TranslationError):
    kind = ErrorKind.TIMEOUT


class ParseError(TranslationError):
    kind = ErrorKind.PARSE


class ApiError(TranslationError):
    kind = ErrorKind.API


class UnknownError(TranslationError):
    kind = ErrorKind.UNKNOWN


def to_failure(error: TranslationError) -> Failure:
    return Failure(kind=error.kind, detail=error.message, code=error.code, data=error.data)
