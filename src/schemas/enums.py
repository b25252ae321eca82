from enum import StrEnum


class Provider(StrEnum):
    MTRANSERVER = "mtranserver"
    DEEPLX = "deeplx"


class ErrorKind(StrEnum):
    VALIDATION = "ValidationError"
    CONFIGURATION = "ConfigurationError"
    NETWORK = "NetworkError"
    TIMEOUT = "TimeoutError"
    PARSE = "ParseError"
    API = "ApiError"
    UNKNOWN = "UnknownError"
