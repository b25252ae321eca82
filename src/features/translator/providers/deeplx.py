from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from pydantic import ValidationError

from features.translator.exceptions import ApiError, ParseError

from .payloads import DeepLXRequest, DeepLXResponse
from .provider_strategy import ProviderStrategy

if TYPE_CHECKING:
    from schemas.models import ProviderConfig, RawResponse

SUCCESS_CODE = 200


class DeepLXStrategy(ProviderStrategy):
    @override
    def build_request(
        self,
        config: ProviderConfig,
        text: str,
        from_language: str,
        to_language: str,
    ) -> tuple[str, DeepLXRequest, dict[str, str]]:
        # The API key is part of the URL path, so no Authorization header.
        payload = DeepLXRequest(source_lang=from_language.upper(), target_lang=to_language.upper(), text=text)
        return config.api_url, payload, {}

    @override
    def parse_response(self, response: RawResponse) -> str:
        if not response.is_success:
            msg = f"status={response.status}"
            raise ApiError(msg, code=response.status)

        try:
            envelope = DeepLXResponse.model_validate_json(response.body)
        except ValidationError as e:
            msg = f"Malformed DeepLX response: {e.error_count()} error(s)"
            raise ParseError(msg) from e

        if envelope.code == SUCCESS_CODE and envelope.data:
            return envelope.data

        msg = f"code={envelope.code}"
        raise ApiError(msg, code=envelope.code, data=envelope.data or "N/A")
