from __future__ import annotations

from typing import TYPE_CHECKING, Self

from schemas.enums import ErrorKind
from schemas.models import Failure, Success

from . import constants, provider_registry, request_builder, response_normalizer
from .dispatcher import Dispatcher
from .exceptions import TranslationError, to_failure

if TYPE_CHECKING:
    import datetime
    import logging
    from types import TracebackType

    from schemas.models import Configuration, TranslationOutcome


class TranslationService:
    """Entry point used by the capture and display collaborators.

    `translate` never raises for a failed translation; the caller always
    receives a `Success` or a `Failure`. The held configuration is an immutable
    snapshot replaced as a whole by `update_configuration`, and each call reads
    it exactly once.
    """

    def __init__(
        self,
        logger: logging.Logger,
        configuration: Configuration,
        dispatcher: Dispatcher | None = None,
        timeout: datetime.timedelta = constants.DEFAULT_TIMEOUT,
    ) -> None:
        self._logger = logger.getChild(type(self).__name__)
        self._configuration = configuration
        self._dispatcher = dispatcher if dispatcher is not None else Dispatcher(self._logger)
        self._timeout = timeout

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._dispatcher.close()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def update_configuration(self, configuration: Configuration) -> None:
        self._configuration = configuration
        self._logger.debug("Configuration updated. provider: %s", configuration.selected_provider)

    async def translate(
        self,
        text: str,
        from_language: str | None = None,
        to_language: str | None = None,
        *,
        timeout: datetime.timedelta | None = None,
    ) -> TranslationOutcome:
        if not text or text.isspace():
            self._logger.debug("Skip translation of empty text.")
            return Failure(kind=ErrorKind.VALIDATION, detail="text empty")

        configuration = self._configuration

        try:
            provider, provider_config = provider_registry.resolve(configuration)
            request = request_builder.build(
                provider,
                provider_config,
                text,
                from_language if from_language is not None else configuration.default_from_language,
                to_language if to_language is not None else configuration.default_to_language,
            )

            self._logger.debug("Dispatching to %s", provider)
            response = await self._dispatcher.send(request, timeout if timeout is not None else self._timeout)
            outcome = response_normalizer.normalize(provider, response)
        except TranslationError as e:
            outcome = to_failure(e)
        except Exception as e:
            self._logger.exception("Unexpected error during translation")
            outcome = Failure(kind=ErrorKind.UNKNOWN, detail=str(e) or type(e).__name__)

        match outcome:
            case Success():
                self._logger.debug("Translation succeeded.")
            case Failure(kind=kind, detail=detail):
                self._logger.warning("Translation failed. %s: %s", kind, detail)

        return outcome
