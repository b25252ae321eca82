from .deeplx import DeepLXStrategy
from .mtranserver import MTranServerStrategy
from .provider_strategy import ProviderStrategy

__all__ = [
    "DeepLXStrategy",
    "MTranServerStrategy",
    "ProviderStrategy",
]
