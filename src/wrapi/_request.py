import abc
from functools import lru_cache
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar, Union

from httpx import AsyncClient, HTTPError, RequestError, Response
from pydantic import BaseModel, TypeAdapter, ValidationError

from ._utils import RequestBuilder, join_url
from ._utils._logs import logger
from .models.errors import ClientDecodeError, ClientError, ResponseError
from .models.method import Method

ResponseT = TypeVar("ResponseT")


@lru_cache(maxsize=None)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _lookup_type_argument(cls: type, parameter: Any) -> Any:
    for base in cls.__mro__:
        metadata = getattr(base, "__pydantic_generic_metadata__", None) or {}
        origin, args = metadata.get("origin"), metadata.get("args") or ()
        if origin is None or not args:
            continue
        parameters = origin.__pydantic_generic_metadata__["parameters"]
        if parameter in parameters:
            return args[parameters.index(parameter)]
    return None


def _resolve_response_type(cls: type) -> Any:
    """Finds the type bound to ``ResponseT`` anywhere in the class hierarchy.

    Type variables of intermediate generic descriptors are followed, so both
    ``class Foo(Request[X])`` and ``class Foo(Paged[X])`` with
    ``class Paged(Request[T], Generic[T])`` resolve to ``X``.
    """
    resolved: Any = ResponseT
    for _ in cls.__mro__:
        if not isinstance(resolved, TypeVar):
            return resolved
        resolved = _lookup_type_argument(cls, resolved)
    return resolved if not isinstance(resolved, TypeVar) else None


class Request(BaseModel, Generic[ResponseT]):
    """Declarative description of a single API operation.

    Subclass it once per endpoint: the model fields are the request payload, the
    generic argument is the type the response body decodes into, and the hook
    methods describe where and how the request is sent. Only ``endpoint`` and
    ``method`` are required; every other hook has a default that fits the common
    case.

    By default the descriptor itself is sent as the JSON body. Operations without
    a body (usually ``GET``) override ``body`` to return ``None``. Fields that only
    shape the URL can be left out of the body with ``Field(exclude=True)``.

    The result type may be anything pydantic can validate: a model, a dataclass,
    ``dict[str, Any]``, ``list[int]``... An unparameterized descriptor decodes to
    plain JSON. Instead of the generic argument, ``response_type`` can also be
    assigned on the class.

    Examples:
        ```python
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


        async with httpx.AsyncClient() as client:
            created = await CreateUserRequest(name="John Doe").send(
                client, "https://api.example.com"
            )
            print(created.id)
        ```
    """

    response_type: ClassVar[Any] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if "response_type" not in cls.__dict__:
            resolved = _resolve_response_type(cls)
            if resolved is not None:
                cls.response_type = resolved

    @abc.abstractmethod
    def endpoint(self) -> str:
        """Endpoint to perform the request against, relative to the base URL.

        E.g. ``"auth"`` or ``f"users/{self.user_id}"``.
        """

    @abc.abstractmethod
    def method(self) -> Union[Method, str]:
        """HTTP method to use."""

    def headers(self) -> Optional[Mapping[str, str]]:
        """Header parameters to include in the request."""
        return None

    def query(self) -> Optional[Mapping[str, str]]:
        """Query parameters to include in the request."""
        return None

    def form(self) -> Optional[Mapping[str, str]]:
        """Form parameters to send as an urlencoded body."""
        return None

    def bearer(self) -> Optional[str]:
        """Bearer token to authorize the request with."""
        return None

    def basic_auth(self) -> Optional[tuple[str, Optional[str]]]:
        """Username and optional password for HTTP basic authorization."""
        return None

    def body(self) -> Optional["Request[ResponseT]"]:
        """The value sent as the JSON body.

        Exists so you can skip sending a body: return ``None`` for that.
        """
        return self

    def build(self, client: AsyncClient, base_url: str) -> RequestBuilder:
        """Builds the request for ``{method} {base_url}/{endpoint}``.

        Applies, in this order and only when present: headers, query parameters,
        form parameters, bearer token, basic credentials and the JSON body.
        Nothing is sent.

        Args:
            client (AsyncClient): The client that will dispatch the request.
            base_url (str): The API base URL, e.g. ``https://api.example.com/v1``.

        Returns:
            RequestBuilder: A builder that can be customized further or passed to ``exec``.
        """
        method = self.method()
        builder = RequestBuilder(
            client=client,
            method=method.value if isinstance(method, Method) else method.upper(),
            url=join_url(base_url, self.endpoint()),
        )

        headers = self.headers()
        if headers is not None:
            builder = builder.with_headers(headers)

        query = self.query()
        if query is not None:
            builder = builder.with_query(query)

        form = self.form()
        if form is not None:
            builder = builder.with_form(form)

        bearer = self.bearer()
        if bearer is not None:
            builder = builder.with_bearer_auth(bearer)

        basic_auth = self.basic_auth()
        if basic_auth is not None:
            username, password = basic_auth
            builder = builder.with_basic_auth(username, password)

        body = self.body()
        if body is not None:
            builder = builder.with_json(body.model_dump(mode="json", by_alias=True))

        return builder

    async def send(self, client: AsyncClient, base_url: str) -> ResponseT:
        """Builds and sends the request, then decodes the response.

        Raises:
            ClientError: If the transport failed before a response arrived.
            ResponseError: If the response status is not a success.
            ClientDecodeError: If the body does not decode into the result type.
        """
        return await self.exec(self.build(client, base_url))

    async def send_opt(self, client: AsyncClient, base_url: str) -> Optional[ResponseT]:
        """Like ``send``, but a body that does not decode yields ``None``."""
        return await self.exec_opt(self.build(client, base_url))

    async def exec(self, builder: RequestBuilder) -> ResponseT:
        """Sends an already built request and decodes the response.

        Exists so you can customize the builder returned by ``build`` (say, to add
        a header the descriptor does not know about) and still get the response
        classification and decoding.

        Raises:
            ClientError: If the transport failed before a response arrived.
            ResponseError: If the response status is not a success.
            ClientDecodeError: If the body does not decode into the result type.
        """
        response = await self._dispatch(builder)
        return await self.from_response(response)

    async def exec_opt(self, builder: RequestBuilder) -> Optional[ResponseT]:
        """Like ``exec``, but a body that does not decode yields ``None``."""
        response = await self._dispatch(builder)
        return await self.from_response_opt(response)

    @staticmethod
    async def check_response(response: Response) -> Response:
        """Passes successful responses through, raises for all others.

        Raises:
            ResponseError: If the status is not 2xx. The body is parsed as JSON on
                a best-effort basis and is ``None`` when that fails.
        """
        logger.debug(f"Response: {response.status_code}")
        if response.is_success:
            return response

        try:
            await response.aread()
            body = response.json()
        except (HTTPError, ValueError):
            body = None

        raise ResponseError(response.status_code, body)

    @classmethod
    async def from_response(cls, response: Response) -> ResponseT:
        """Decodes a successful response into the result type.

        Raises:
            ResponseError: If the status is not 2xx.
            ClientError: If the connection fails while the body is read.
            ClientDecodeError: If the body does not decode into the result type.
        """
        response = await cls.check_response(response)
        return cls._decode(await cls._read(response))

    @classmethod
    async def from_response_opt(cls, response: Response) -> Optional[ResponseT]:
        """Decodes a successful response, or returns ``None`` if it does not fit.

        Raises:
            ResponseError: If the status is not 2xx.
            ClientError: If the connection fails while the body is read.
        """
        response = await cls.check_response(response)
        content = await cls._read(response)
        try:
            return cls._decode(content)
        except ClientDecodeError as e:
            logger.debug(f"Discarding response body: {e.message}")
            return None

    @staticmethod
    async def _read(response: Response) -> bytes:
        try:
            return await response.aread()
        except RequestError as e:
            raise ClientError(f"HTTP client error: {e!r}") from e

    @classmethod
    def _decode(cls, content: bytes) -> ResponseT:
        response_type = cls.response_type if cls.response_type is not None else Any
        try:
            return _type_adapter(response_type).validate_json(content)
        except ValidationError as e:
            raise ClientDecodeError(str(e)) from e

    @staticmethod
    async def _dispatch(builder: RequestBuilder) -> Response:
        try:
            return await builder.send()
        except RequestError as e:
            raise ClientError(f"HTTP client error: {e!r}") from e
