import json

import pytest

from features.translator.exceptions import ApiError, ParseError
from features.translator.providers.deeplx import DeepLXStrategy
from schemas.models import RawResponse


@pytest.fixture
def strategy() -> DeepLXStrategy:
    return DeepLXStrategy()


def response(status: int = 200, **envelope: object) -> RawResponse:
    return RawResponse(status=status, body=json.dumps(envelope).encode())


def test_parse_response_success(strategy: DeepLXStrategy) -> None:
    result = strategy.parse_response(
        response(code=200, id=8356681003, data="你好", alternatives=["您好"]),
    )
    assert result == "你好"


def test_parse_response_minimal_envelope(strategy: DeepLXStrategy) -> None:
    assert strategy.parse_response(response(code=200, data="你好")) == "你好"


def test_parse_response_error_code(strategy: DeepLXStrategy) -> None:
    with pytest.raises(ApiError) as exc_info:
        strategy.parse_response(response(code=500, data=None))

    assert exc_info.value.message == "code=500"
    assert exc_info.value.code == 500
    assert exc_info.value.data == "N/A"


def test_parse_response_error_code_with_data(strategy: DeepLXStrategy) -> None:
    with pytest.raises(ApiError) as exc_info:
        strategy.parse_response(response(code=429, data="Too Many Requests"))

    assert exc_info.value.message == "code=429"
    assert exc_info.value.data == "Too Many Requests"


def test_parse_response_empty_data(strategy: DeepLXStrategy) -> None:
    with pytest.raises(ApiError) as exc_info:
        strategy.parse_response(response(code=200, data=""))

    assert exc_info.value.code == 200
    assert exc_info.value.data == "N/A"


def test_parse_response_http_error(strategy: DeepLXStrategy) -> None:
    with pytest.raises(ApiError) as exc_info:
        strategy.parse_response(RawResponse(status=503, body=b"<html>down</html>"))

    assert exc_info.value.code == 503


@pytest.mark.parametrize("body", [b"not json", b"", b'{"data": "missing code"}', b"[1, 2]"])
def test_parse_response_malformed(strategy: DeepLXStrategy, body: bytes) -> None:
    with pytest.raises(ParseError):
        strategy.parse_response(RawResponse(status=200, body=body))
