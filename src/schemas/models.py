from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self, TypeAlias

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from . import enums

DEFAULT_FROM_LANGUAGE = "en"
DEFAULT_TO_LANGUAGE = "zh"


class ProviderConfig(BaseModel, frozen=True):
    api_url: str = ""
    api_key: str = Field(default="", repr=False)


def default_provider_configs() -> dict[enums.Provider, ProviderConfig]:
    return {
        enums.Provider.MTRANSERVER: ProviderConfig(api_url="http://10.0.0.147:8989", api_key="123456"),
        # DeepLX carries its key inside the URL path.
        enums.Provider.DEEPLX: ProviderConfig(api_url="https://api.xxx.xxx/YOUR_API_KEY_HERE/translate"),
    }


class Configuration(BaseModel, frozen=True):
    selected_provider: enums.Provider = enums.Provider.MTRANSERVER
    configs: Mapping[enums.Provider, ProviderConfig] = Field(
        default_factory=default_provider_configs,
        validate_default=True,
    )
    default_from_language: str = DEFAULT_FROM_LANGUAGE
    default_to_language: str = DEFAULT_TO_LANGUAGE

    @model_validator(mode="before")
    @classmethod
    def fill_missing_providers(cls, data: Any) -> Any:  # noqa: ANN401
        if not isinstance(data, dict) or not isinstance(data.get("configs"), Mapping):
            return data

        configs = dict(data["configs"])
        for provider in enums.Provider:
            if provider not in configs:
                configs[provider] = ProviderConfig()

        return {**data, "configs": configs}

    @field_validator("configs")
    @classmethod
    def freeze_configs(
        cls,
        configs: Mapping[enums.Provider, ProviderConfig],
    ) -> Mapping[enums.Provider, ProviderConfig]:
        return MappingProxyType(dict(configs))

    @field_serializer("configs")
    def serialize_configs(
        self,
        configs: Mapping[enums.Provider, ProviderConfig],
    ) -> dict[enums.Provider, ProviderConfig]:
        return dict(configs)

    @property
    def provider_configs(self) -> Mapping[enums.Provider, ProviderConfig]:
        return self.configs

    def with_provider_config(self, provider: enums.Provider, config: ProviderConfig) -> Self:
        return self.model_copy(update={"configs": MappingProxyType({**self.configs, provider: config})})


class LanguageItem(BaseModel, frozen=True):
    display_name: str
    value: str


class PreparedRequest(BaseModel, frozen=True):
    url: str
    body: bytes
    headers: dict[str, str] = Field(repr=False)


class RawResponse(BaseModel, frozen=True):
    status: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300  # noqa: PLR2004


class Success(BaseModel, frozen=True):
    text: str


class Failure(BaseModel, frozen=True):
    kind: enums.ErrorKind
    detail: str
    code: int | None = None
    data: str | None = None

    @property
    def message(self) -> str:
        """Human readable text for display collaborators."""
        match self.kind:
            case enums.ErrorKind.VALIDATION:
                return "Error: Text to translate is empty."
            case enums.ErrorKind.CONFIGURATION:
                return f"Error: Translation provider is not configured. {self.detail}"
            case enums.ErrorKind.NETWORK:
                return f"Error: Network request failed. {self.detail}"
            case enums.ErrorKind.TIMEOUT:
                return f"Error: Request timed out. {self.detail}"
            case enums.ErrorKind.PARSE:
                return f"Error: Unexpected response from the provider. {self.detail}"
            case enums.ErrorKind.API:
                if self.data is not None:
                    return f"Error: API request failed ({self.detail}, data={self.data})."
                return f"Error: API request failed ({self.detail})."
        return f"Error: An unexpected error occurred. {self.detail}"


TranslationOutcome: TypeAlias = Success | Failure
