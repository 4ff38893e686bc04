from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Union

from httpx import (
    USE_CLIENT_DEFAULT,
    AsyncClient,
    BasicAuth,
    Headers,
    Request,
    Response,
    Timeout,
)

from ._logs import logger
from .constants import HEADER_AUTHORIZATION


@dataclass(frozen=True)
class RequestBuilder:
    """Encapsulates everything needed to send one HTTP request.

    The builder is bound to the ``httpx.AsyncClient`` that will dispatch it and
    carries the HTTP method, the full URL, query parameters, headers, and either
    a form or a JSON body. It is immutable: every ``with_*`` method returns a new
    builder, so a builder can be customized and shared without surprises.

    Merge policy: headers and query parameters are merged, and a key that is
    already set is overwritten by the later call. At dispatch time the values of
    the builder override the client's own defaults the same way. A form body and
    a JSON body replace each other, as do bearer and basic credentials.

    Examples:
        ```python
        builder = (
            RequestBuilder(client=client, method="GET", url="https://api.example.com/users")
            .with_query({"page": "2"})
            .with_header("X-Request-Id", "abc")
        )
        response = await builder.send()
        ```
    """

    client: AsyncClient = field(repr=False, compare=False)
    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: Headers = field(default_factory=Headers)
    data: Optional[dict[str, str]] = None
    json: Optional[Any] = None
    auth: Optional[BasicAuth] = field(default=None, compare=False)
    # set by bearer credentials so an auth configured on the client is not applied
    skip_client_auth: bool = field(default=False, compare=False)
    timeout: Any = field(default=USE_CLIENT_DEFAULT, compare=False)

    def with_header(self, name: str, value: str) -> "RequestBuilder":
        return self.with_headers({name: value})

    def with_headers(
        self, headers: Union[Mapping[str, str], Headers]
    ) -> "RequestBuilder":
        merged = Headers(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)

    def with_query(self, query: Mapping[str, str]) -> "RequestBuilder":
        return replace(self, params={**self.params, **query})

    def with_form(self, form: Mapping[str, str]) -> "RequestBuilder":
        """Sends ``form`` as an urlencoded body, replacing any JSON body."""
        if self.json is not None:
            logger.debug("Form body replaces the previously set JSON body")
        return replace(self, data=dict(form), json=None)

    def with_json(self, body: Any) -> "RequestBuilder":
        """Sends ``body`` as a JSON body, replacing any form body."""
        if self.data is not None:
            logger.debug("JSON body replaces the previously set form body")
        return replace(self, json=body, data=None)

    def with_bearer_auth(self, token: str) -> "RequestBuilder":
        """Sends ``Authorization: Bearer <token>``.

        Basic credentials set earlier on the builder, and any ``auth`` configured
        on the client, are not applied to this request.
        """
        builder = self.with_header(HEADER_AUTHORIZATION, f"Bearer {token}")
        return replace(builder, auth=None, skip_client_auth=True)

    def with_basic_auth(
        self, username: str, password: Optional[str] = None
    ) -> "RequestBuilder":
        # httpx writes the Authorization header when the request is sent, so
        # basic credentials win over a bearer header set earlier.
        return replace(
            self, auth=BasicAuth(username, password or ""), skip_client_auth=False
        )

    def with_timeout(self, timeout: Union[int, float, Timeout, None]) -> "RequestBuilder":
        """Overrides the client's timeout for this request only.

        ``None`` disables the timeout entirely.
        """
        return replace(self, timeout=timeout)

    def build(self) -> Request:
        """Finalizes the builder into an ``httpx.Request``. Performs no I/O."""
        return self.client.build_request(
            self.method,
            self.url,
            params=self.params or None,
            headers=self.headers,
            data=self.data,
            json=self.json,
            timeout=self.timeout,
        )

    async def send(self) -> Response:
        """Finalizes the builder and dispatches it through the bound client.

        Raises:
            httpx.RequestError: If the transport fails before a response arrives.
        """
        request = self.build()
        logger.debug(f"Request: {request.method} {request.url}")

        return await self.client.send(request, auth=self._send_auth())

    def _send_auth(self) -> Any:
        if self.auth is not None:
            return self.auth
        if self.skip_client_auth:
            # httpx treats an explicit None as "no auth", unlike USE_CLIENT_DEFAULT
            return None
        return USE_CLIENT_DEFAULT
