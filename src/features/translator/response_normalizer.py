from __future__ import annotations

from typing import TYPE_CHECKING

from schemas.models import Success

from .exceptions import TranslationError, to_failure
from .provider_registry import get_strategy

if TYPE_CHECKING:
    from schemas.enums import Provider
    from schemas.models import RawResponse, TranslationOutcome


def normalize(provider: Provider, response: RawResponse) -> TranslationOutcome:
    try:
        return Success(text=get_strategy(provider).parse_response(response))
    except TranslationError as e:
        return to_failure(e)
