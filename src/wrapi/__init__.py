"""Wrapi: declarative wrappers for HTTP APIs on top of ``httpx`` and ``pydantic``.

Each API operation is a ``Request`` subclass: its fields are the payload, its
generic argument is the type the response decodes into, and a few hook methods
say where and how to send it. Requests are not tied to a client instance, so
any ``httpx.AsyncClient`` can be brought along.

Examples:
    ```python
    import httpx
    from pydantic import BaseModel
    from wrapi import Method, Request


    class CreateUserResponse(BaseModel):
        id: int


    class CreateUserRequest(Request[CreateUserResponse]):
        name: str

        def endpoint(self) -> str:
            return "user"

        def method(self) -> Method:
            return Method.POST


    async def main() -> None:
        async with httpx.AsyncClient() as client:
            response = await CreateUserRequest(name="John Doe").send(client, "<URI>")
            print(response.id)
    ```
"""

import httpx

from ._api_client import ApiClient
from ._config import Config
from ._parameters import Parameters
from ._request import Request
from ._utils import RequestBuilder, join_url, setup_logging
from .models import (
    ClientDecodeError,
    ClientError,
    ConfigurationError,
    Method,
    ResponseError,
    WrapiError,
)

__all__ = [
    "ApiClient",
    "ClientDecodeError",
    "ClientError",
    "Config",
    "ConfigurationError",
    "Method",
    "Parameters",
    "Request",
    "RequestBuilder",
    "ResponseError",
    "WrapiError",
    "httpx",
    "join_url",
    "setup_logging",
]
