from os import environ as env
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_PREFIX,
    ENV_TIMEOUT,
)
from .models.errors import ConfigurationError

_HTTP_URL = TypeAdapter(HttpUrl)


class Config(BaseModel):
    """Settings for an ``ApiClient``.

    Attributes:
        base_url: The API base URL every endpoint is joined onto.
        timeout: Default timeout in seconds for every request.
        follow_redirects: Whether redirects are followed by the HTTP client.
        headers: Extra headers sent with every request.
        debug: Enables debug logging for the ``wrapi`` logger.
    """

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    headers: dict[str, str] = Field(default_factory=dict)
    debug: bool = False

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # keep the caller's spelling, HttpUrl would normalize it
        _HTTP_URL.validate_python(value)
        return value

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides: Any) -> "Config":
        """Reads the configuration from the environment and a ``.env`` file.

        Looks up ``{prefix}BASE_URL``, ``{prefix}TIMEOUT`` and ``{prefix}DEBUG``.
        Keyword arguments that are not ``None`` take precedence over the
        environment.

        Raises:
            ConfigurationError: If no base URL is configured.
        """
        load_dotenv()

        values: dict[str, Any] = {}
        for key, var in (
            ("base_url", ENV_BASE_URL),
            ("timeout", ENV_TIMEOUT),
            ("debug", ENV_DEBUG),
        ):
            value = env.get(f"{prefix}{var}")
            if value:
                values[key] = value

        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values.get("base_url"):
            raise ConfigurationError(
                f"Base URL missing. Pass base_url explicitly or set the {prefix}{ENV_BASE_URL} environment variable."
            )

        return cls(**values)
