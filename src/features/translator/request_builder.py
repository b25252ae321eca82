from __future__ import annotations

from typing import TYPE_CHECKING

from schemas.models import PreparedRequest

from .exceptions import ConfigurationError
from .provider_registry import get_strategy

if TYPE_CHECKING:
    from schemas.enums import Provider
    from schemas.models import ProviderConfig


def build(
    provider: Provider,
    provider_config: ProviderConfig,
    text: str,
    from_language: str,
    to_language: str,
) -> PreparedRequest:
    if not provider_config.api_url.strip():
        msg = f"API URL of provider '{provider}' is not configured."
        raise ConfigurationError(msg)

    strategy = get_strategy(provider)
    url, payload, headers = strategy.build_request(provider_config, text, from_language, to_language)

    return PreparedRequest(
        url=url,
        body=strategy.serialize(payload),
        headers={**strategy.base_headers(), **headers},
    )
