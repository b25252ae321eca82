from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Self

import aiohttp

from schemas.models import RawResponse

from . import constants
from .exceptions import ConfigurationError, NetworkError, RequestTimeoutError, UnknownError

if TYPE_CHECKING:
    import datetime
    import logging
    from types import TracebackType

    from schemas.models import PreparedRequest


class Dispatcher:
    """Sends prepared requests over one shared `aiohttp.ClientSession`.

    The session carries no default headers. Everything request specific travels
    with the `PreparedRequest`, so concurrent calls never see each other's
    credentials.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger.getChild(type(self).__name__)
        self._session: aiohttp.ClientSession | None = None

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
        session, self._session = self._session, None
        if session is not None and not session.closed:
            self._logger.debug("Closing session")
            await session.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def send(
        self,
        request: PreparedRequest,
        timeout: datetime.timedelta = constants.DEFAULT_TIMEOUT,
    ) -> RawResponse:
        session = self._get_session()
        # The URL may embed a credential, so it is not logged.
        self._logger.debug("POST request (timeout %ss)", timeout.total_seconds())

        try:
            async with (
                asyncio.timeout(timeout.total_seconds()),
                session.post(request.url, data=request.body, headers=request.headers) as response,
            ):
                body = await response.read()
                return RawResponse(status=response.status, body=body)
        except TimeoutError as e:
            msg = f"No response within {timeout.total_seconds():g} seconds."
            raise RequestTimeoutError(msg) from e
        except aiohttp.InvalidURL as e:
            msg = "Invalid API URL."
            raise ConfigurationError(msg) from e
        except aiohttp.ClientConnectionError as e:
            msg = str(e) or type(e).__name__
            raise NetworkError(msg) from e
        except aiohttp.ClientError as e:
            msg = str(e) or type(e).__name__
            raise UnknownError(msg) from e
