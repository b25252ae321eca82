from __future__ import annotations

from typing import TYPE_CHECKING

from features.translator import constants

if TYPE_CHECKING:
    from pydantic import BaseModel

    from schemas.models import ProviderConfig, RawResponse


class ProviderStrategy:
    """Wire contract of one translation backend.

    `build_request` returns the target URL, the JSON body model and the
    provider specific headers. `parse_response` returns the translated text or
    raises a `TranslationError` subclass.
    """

    def build_request(
        self,
        config: ProviderConfig,
        text: str,
        from_language: str,
        to_language: str,
    ) -> tuple[str, BaseModel, dict[str, str]]:
        raise NotImplementedError

    def parse_response(self, response: RawResponse) -> str:
        raise NotImplementedError

    def serialize(self, payload: BaseModel) -> bytes:
        return payload.model_dump_json(by_alias=True).encode("utf-8")

    def base_headers(self) -> dict[str, str]:
        return {
            "Accept": "*/*",
            "User-Agent": constants.USER_AGENT,
            "Content-Type": constants.CONTENT_TYPE,
        }
