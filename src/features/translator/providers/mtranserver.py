from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from features.translator import constants
from features.translator.exceptions import ApiError, ParseError

from .payloads import MTranServerRequest
from .provider_strategy import ProviderStrategy

if TYPE_CHECKING:
    from schemas.models import ProviderConfig, RawResponse


def translate_url(api_url: str) -> str:
    url = api_url.rstrip("/")
    if url.endswith(constants.MTRANSERVER_TRANSLATE_PATH):
        return url
    return url + constants.MTRANSERVER_TRANSLATE_PATH


class MTranServerStrategy(ProviderStrategy):
    @override
    def build_request(
        self,
        config: ProviderConfig,
        text: str,
        from_language: str,
        to_language: str,
    ) -> tuple[str, MTranServerRequest, dict[str, str]]:
        headers = {"Authorization": config.api_key} if config.api_key else {}
        payload = MTranServerRequest(from_=from_language.lower(), to=to_language.lower(), text=text)
        return translate_url(config.api_url), payload, headers

    @override
    def parse_response(self, response: RawResponse) -> str:
        if not response.is_success:
            msg = f"status={response.status}"
            raise ApiError(msg, code=response.status)

        # The server answers with the bare translation, not a JSON envelope.
        try:
            return response.body.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Response body is not valid UTF-8: {e.reason}"
            raise ParseError(msg) from e
