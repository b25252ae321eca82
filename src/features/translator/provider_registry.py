from __future__ import annotations

from typing import TYPE_CHECKING

from schemas.enums import Provider

from .exceptions import ConfigurationError
from .providers import DeepLXStrategy, MTranServerStrategy, ProviderStrategy

if TYPE_CHECKING:
    from schemas.models import Configuration, ProviderConfig

STRATEGIES: dict[Provider, ProviderStrategy] = {
    Provider.MTRANSERVER: MTranServerStrategy(),
    Provider.DEEPLX: DeepLXStrategy(),
}


def resolve(configuration: Configuration) -> tuple[Provider, ProviderConfig]:
    provider = configuration.selected_provider
    provider_config = configuration.provider_configs.get(provider)

    if provider_config is None:
        msg = f"No configuration for provider '{provider}'."
        raise ConfigurationError(msg)

    if not provider_config.api_url.strip():
        msg = f"API URL of provider '{provider}' is not configured."
        raise ConfigurationError(msg)

    return provider, provider_config


def get_strategy(provider: Provider) -> ProviderStrategy:
    if (strategy := STRATEGIES.get(provider)) is None:
        msg = f"Unknown provider: {provider}"
        raise ConfigurationError(msg)

    return strategy
