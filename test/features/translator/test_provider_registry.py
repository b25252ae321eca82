import pytest

from features.translator import provider_registry
from features.translator.exceptions import ConfigurationError
from features.translator.providers import DeepLXStrategy, MTranServerStrategy
from schemas.enums import Provider
from schemas.models import Configuration, ProviderConfig


def test_resolve_selected_provider(mtranserver_configuration: Configuration) -> None:
    provider, provider_config = provider_registry.resolve(mtranserver_configuration)

    assert provider == Provider.MTRANSERVER
    assert provider_config == ProviderConfig(api_url="http://localhost:8989", api_key="k1")


def test_resolve_follows_selection(deeplx_configuration: Configuration) -> None:
    provider, provider_config = provider_registry.resolve(deeplx_configuration)

    assert provider == Provider.DEEPLX
    assert provider_config.api_url == "https://x/key/translate"


def test_resolve_missing_entry() -> None:
    configuration = Configuration.model_construct(selected_provider=Provider.DEEPLX, configs={})

    with pytest.raises(ConfigurationError, match="No configuration"):
        provider_registry.resolve(configuration)


@pytest.mark.parametrize("api_url", ["", "   "])
def test_resolve_empty_url(mtranserver_configuration: Configuration, api_url: str) -> None:
    configuration = mtranserver_configuration.with_provider_config(
        Provider.MTRANSERVER,
        ProviderConfig(api_url=api_url, api_key="k1"),
    )

    with pytest.raises(ConfigurationError, match="not configured"):
        provider_registry.resolve(configuration)


def test_get_strategy() -> None:
    assert isinstance(provider_registry.get_strategy(Provider.MTRANSERVER), MTranServerStrategy)
    assert isinstance(provider_registry.get_strategy(Provider.DEEPLX), DeepLXStrategy)


def test_every_provider_has_a_strategy() -> None:
    assert set(provider_registry.STRATEGIES) == set(Provider)


def test_get_strategy_unknown() -> None:
    with pytest.raises(ConfigurationError):
        provider_registry.get_strategy("bing")  # type: ignore[arg-type]
