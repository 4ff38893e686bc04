from logging import getLogger
from types import TracebackType
from typing import Optional, TypeVar

from httpx import AsyncClient, Headers

from ._config import Config
from ._request import Request
from ._utils import (
    RequestBuilder,
    get_httpx_client_kwargs,
    header_user_agent,
    setup_logging,
)
from ._utils.constants import HEADER_ACCEPT, PRODUCT_NAME

ResponseT = TypeVar("ResponseT")


class ApiClient:
    """Pairs an ``httpx.AsyncClient`` with a base URL for sending descriptors.

    The client is created from the configuration (SSL context, timeout,
    redirects and default headers) unless one is passed in. A client passed in
    stays owned by the caller and is not closed by ``aclose``.

    Requests are sent exactly once; retries and rate limiting are left to the
    caller or to the transport.

    Examples:
        ```python
        async with ApiClient(Config(base_url="https://api.example.com")) as api:
            created = await api.send(CreateUserRequest(name="John Doe"))
        ```
    """

    def __init__(self, config: Config, *, client: Optional[AsyncClient] = None) -> None:
        self._logger = getLogger(PRODUCT_NAME)
        self._config = config

        if self._config.debug:
            setup_logging(self._config.debug)

        self._owns_client = client is None
        if client is None:
            client = AsyncClient(
                **get_httpx_client_kwargs(
                    self._config.timeout, self._config.follow_redirects
                ),
                headers=Headers(self.default_headers),
            )
        self._client = client

        self._logger.debug(f"HEADERS: {self.default_headers}")

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def client(self) -> AsyncClient:
        return self._client

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            **header_user_agent(),
            **self._config.headers,
        }

    def build(self, request: Request[ResponseT]) -> RequestBuilder:
        return request.build(self._client, self._config.base_url)

    async def send(self, request: Request[ResponseT]) -> ResponseT:
        return await request.send(self._client, self._config.base_url)

    async def send_opt(self, request: Request[ResponseT]) -> Optional[ResponseT]:
        return await request.send_opt(self._client, self._config.base_url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
