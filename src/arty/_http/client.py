"""Request factory and the call/do primitives shared by every service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
import yaml
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from ..errors import EncodeError
from .auth import Authentication
from .config import ClientConfig
from .iter_coroutine import iter_coroutine
from .response import Response, check_response, is_byte_sink
from .transport import AsyncTransport, BaseTransport, BlockingTransport

JSON_CONTENT_TYPE = "application/json"
YAML_CONTENT_TYPE = "application/yaml"

_ANY: TypeAdapter[Any] = TypeAdapter(Any)

_SyncT = TypeVar("_SyncT", bound="SyncClient")
_AsyncT = TypeVar("_AsyncT", bound="AsyncClient")


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON request body - sets Content-Type to application/json."""

    data: Any


@dataclass(frozen=True, slots=True)
class YAMLBody:
    """YAML request body - sets Content-Type to application/yaml."""

    data: Any


@dataclass(frozen=True, slots=True)
class BytesBody:
    """Raw bytes sent without re-encoding. No Content-Type unless given."""

    data: bytes
    content_type: str | None = None


RequestBody = JSONBody | YAMLBody | BytesBody | None


def encode_body(body: Any) -> tuple[bytes | None, str | None]:
    """Serialize a request body, returning its bytes and content type.

    Bare ``bytes`` are sent raw. Any other value not wrapped in a body class
    is encoded as JSON, with pydantic models using their wire aliases and
    dropping unset (None) fields.

    Raises:
        EncodeError: If the value cannot be serialized.
    """
    if body is None:
        return None, None
    if isinstance(body, (bytes, bytearray, memoryview)):
        body = BytesBody(bytes(body))
    if isinstance(body, BytesBody):
        return body.data, body.content_type

    try:
        if isinstance(body, YAMLBody):
            plain = _ANY.dump_python(body.data, mode="json", by_alias=True, exclude_none=True)
            text = yaml.safe_dump(plain, default_flow_style=False, sort_keys=False)
            return text.encode("utf-8"), YAML_CONTENT_TYPE

        data = body.data if isinstance(body, JSONBody) else body
        return _ANY.dump_json(data, by_alias=True, exclude_none=True), JSON_CONTENT_TYPE
    except (PydanticSerializationError, yaml.YAMLError, TypeError, ValueError) as ex:
        raise EncodeError("could not encode request body", ex) from ex


class BaseClient:
    """State and async business logic shared by the sync and async clients.

    ``new_request`` builds a request, ``_do`` sends it and wraps the result,
    and ``_call`` combines both. Service classes call ``_call`` directly.
    """

    def __init__(self, transport: BaseTransport, authentication: Authentication) -> None:
        self._transport = transport
        self.authentication = authentication

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    @property
    def base_url(self) -> str:
        return self._transport.config.base_url

    @property
    def user_agent(self) -> str:
        return self._transport.config.user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self._transport.config.user_agent = value

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Create an API request for ``path`` relative to the base URL.

        Raises:
            URLError: If the URL cannot be built.
            EncodeError: If ``body`` cannot be serialized.
        """
        url = self._transport.config.build_url(path)
        content, content_type = encode_body(body)

        headers: dict[str, str] = {}
        if content_type is not None:
            headers["content-type"] = content_type

        request = self._transport.build_request(method, url, content=content, headers=headers)
        if self.authentication.has_auth():
            self.authentication.apply(request)
        return request

    async def _do(self, request: httpx.Request, into: Any = None) -> Response:
        # A writable target receives the raw body as it streams in.
        sink = into if is_byte_sink(into) else None
        http_response = await self._transport.send(request, stream=sink is not None)
        if sink is not None and not http_response.is_success:
            await self._transport.read(http_response)

        response = Response(http_response, redact_param=self.authentication.query_secret())
        check_response(response)

        if sink is not None:
            await self._transport.stream_into(http_response, sink)
        elif into is not None:
            response.decode(into)
        return response

    async def _call(
        self, method: str, path: str, *, body: Any = None, into: Any = None
    ) -> Response:
        request = self.new_request(method, path, body)
        return await self._do(request, into)


class SyncClient(BaseClient):
    """Blocking client core backed by httpx.Client."""

    def __init__(
        self,
        config: ClientConfig,
        authentication: Authentication,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(BlockingTransport(config, client), authentication)

    def do(self, request: httpx.Request, into: Any = None) -> Response:
        """Send ``request`` and decode the body into ``into``.

        Raises:
            APIError: On a non-2xx status; the envelope is on ``error.response``.
        """
        return iter_coroutine(self._do(request, into))

    def call(self, method: str, path: str, *, body: Any = None, into: Any = None) -> Response:
        """Build, send and decode a request in one step."""
        return iter_coroutine(self._call(method, path, body=body, into=into))

    def close(self) -> None:
        iter_coroutine(self._transport.close())

    def __enter__(self: _SyncT) -> _SyncT:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncClient(BaseClient):
    """Asynchronous client core backed by httpx.AsyncClient."""

    def __init__(
        self,
        config: ClientConfig,
        authentication: Authentication,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(AsyncTransport(config, client), authentication)

    async def do(self, request: httpx.Request, into: Any = None) -> Response:
        """Send ``request`` and decode the body into ``into``.

        Raises:
            APIError: On a non-2xx status; the envelope is on ``error.response``.
        """
        return await self._do(request, into)

    async def call(
        self, method: str, path: str, *, body: Any = None, into: Any = None
    ) -> Response:
        """Build, send and decode a request in one step."""
        return await self._call(method, path, body=body, into=into)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self: _AsyncT) -> _AsyncT:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = [
    "AsyncClient",
    "BaseClient",
    "BytesBody",
    "JSONBody",
    "RequestBody",
    "SyncClient",
    "YAMLBody",
    "encode_body",
]
