"""Asynchronous HTTP communication for the remote translation fallback.

`AsyncHttp` wraps an aiohttp session, decodes responses by content type, and maps transport
failures onto the `AsyncCommError` hierarchy so callers handle a single family of errors.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from typing import TYPE_CHECKING, Any, Final, Literal

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncCommError", "AsyncCommInvalidContentTypeError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

type HTTPMethod = Literal["POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client with content-type based response decoding.

    The aiohttp session is created on first use, so instances can be built outside a running event loop.
    """

    def __init__(self, *, headers: dict[str, str] | None = None) -> None:
        """Initialize the client.

        The default handler parses "application/json".

        Args:
            headers (dict[str, str] | None): Headers sent with every request.
        """
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.headers: dict[str, str] = dict(headers or {})
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    def initialize_session(self) -> ClientSession:
        """Return the open aiohttp session, creating it when needed. Requires a running event loop."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True, headers=self.headers)
            logger.debug("%s session initialized", self.__class__.__name__)
        return self.__session

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session is not None and not self.__session.closed:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)
        self.__session = None

    async def post(
        self,
        *,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        total_timeout: float = 10.0,
    ) -> Any:
        """Perform an asynchronous HTTP POST request with a JSON body.

        Args:
            url (str): The URL to send the POST request to.
            data (Any | None): JSON-serialisable request body.
            headers (dict[str, str] | None): Extra headers for this request.
            total_timeout (float): Total timeout for the request in seconds.

        Returns:
            Any: The decoded response data.
        """
        return await self._request("POST", url=url, json=data, headers=headers, total_timeout=total_timeout)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response with the handler registered for its content type.

        Args:
            resp (ClientResponse): The response object from the aiohttp request.

        Returns:
            Any: The decoded data, or None for an empty body.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the content type.
            AsyncCommError: If the body cannot be decoded.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        msg: str
        if handler is None:
            msg = f"Unknown Content-Type '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg)
        try:
            return handler(raw)
        except (UnicodeDecodeError, JSONDecodeError) as err:
            logger.debug(err)
            msg = f"Response body is not valid '{content_type}'"
            raise AsyncCommError(msg) from err

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Register a decoder for a content type, replacing any existing one.

        Args:
            content_type (str): The content type to handle (e.g., "application/json").
            handler (Callable[[bytes], Any]): A function that takes bytes and returns the decoded data.
        """
        if content_type in self.content_handlers:
            logger.debug("Handler for content type '%s' replaced", content_type)
        self.content_handlers[content_type] = handler

    @staticmethod
    def _timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=total_timeout)
        # Fail fast on connect while honouring the total budget
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def _request(self, method: HTTPMethod, *, url: str, total_timeout: float, **kwargs: Any) -> Any:
        """Perform an asynchronous HTTP request.

        Args:
            method (HTTPMethod): The HTTP method to use.
            url (str): The URL to send the request to.
            total_timeout (float): Total timeout in seconds. 0 or negative for no timeout.
            **kwargs: Additional keyword arguments passed to aiohttp.

        Returns:
            Any: The decoded response data.

        Raises:
            AsyncCommTimeoutError: If the server does not answer in time.
            AsyncCommError: If the connection fails or the server returns an error status.
            AsyncCommInvalidContentTypeError: If the response content type is not supported.
        """
        logger.debug("[%s] url=%s timeout=%s", method, url, total_timeout)
        session: ClientSession = self.initialize_session()
        msg: str
        try:
            async with session.request(method=method, url=url, timeout=self._timeout(total_timeout), **kwargs) as resp:
                return await self.decode_response(resp)
        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "The server is not running, or the port is closed."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors."""

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """The request did not complete within the timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response content type is not recognized or has no registered handler."""
