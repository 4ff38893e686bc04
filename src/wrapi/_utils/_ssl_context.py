import os
import ssl
from typing import Any, Optional, Union

from httpx import Timeout

# Checked in order; the first one set wins over certifi's bundle.
_CA_FILE_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
_CA_DIR_VAR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """SSL context for outgoing requests.

    Uses the operating system trust store when the ``truststore`` extra is
    installed, otherwise certifi's CA bundle. ``SSL_CERT_FILE``,
    ``REQUESTS_CA_BUNDLE`` and ``SSL_CERT_DIR`` override the bundle in the
    latter case.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_FILE_VARS) if path), None
        )
        return ssl.create_default_context(
            cafile=cafile or certifi.where(),
            capath=_env_path(_CA_DIR_VAR),
        )


def get_httpx_client_kwargs(
    timeout: Union[float, Timeout], follow_redirects: bool = True
) -> dict[str, Any]:
    """Keyword arguments shared by every ``httpx`` client wrapi creates.

    Args:
        timeout: Default timeout applied to every request of the client.
        follow_redirects: Whether the client follows redirects on its own.

    Returns:
        dict[str, Any]: SSL, timeout and redirect settings for ``httpx.AsyncClient``.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }
