import logging
from unittest.mock import MagicMock

import pytest

from schemas.enums import Provider
from schemas.models import Configuration, ProviderConfig

MTRANSERVER_URL = "http://localhost:8989"
MTRANSERVER_KEY = "k1"
DEEPLX_URL = "https://x/key/translate"


@pytest.fixture
def mock_logger() -> MagicMock:
    logger = MagicMock(spec=logging.Logger)
    logger.getChild.return_value = logger
    return logger


@pytest.fixture
def mtranserver_configuration() -> Configuration:
    return Configuration(
        selected_provider=Provider.MTRANSERVER,
        configs={
            Provider.MTRANSERVER: ProviderConfig(api_url=MTRANSERVER_URL, api_key=MTRANSERVER_KEY),
            Provider.DEEPLX: ProviderConfig(api_url=DEEPLX_URL),
        },
        default_from_language="en",
        default_to_language="zh",
    )


@pytest.fixture
def deeplx_configuration(mtranserver_configuration: Configuration) -> Configuration:
    return mtranserver_configuration.model_copy(update={"selected_provider": Provider.DEEPLX})
