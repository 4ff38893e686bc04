from urllib.parse import urlparse


def join_url(base_url: str, endpoint: str) -> str:
    """Join a base URL and an endpoint path with exactly one slash.

    Trailing slashes of ``base_url`` and leading slashes of ``endpoint`` are
    dropped before joining. Anything after the leading part of the endpoint,
    including a trailing slash or a query string, is kept as is.

    >>> join_url("https://api.example.com/v1/", "/users/42")
    'https://api.example.com/v1/users/42'
    >>> join_url("https://api.example.com", "users/")
    'https://api.example.com/users/'

    An absolute ``http(s)`` endpoint is returned unchanged:

    >>> join_url("https://api.example.com", "https://other.example.com/ping")
    'https://other.example.com/ping'

    Args:
        base_url (str): The base URL, e.g. ``https://api.example.com/v1``.
        endpoint (str): The endpoint path, e.g. ``users/42``.

    Returns:
        str: The full request URL.
    """
    if _is_absolute_url(endpoint):
        return endpoint

    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def _is_absolute_url(url: str) -> bool:
    if not url:
        return False

    parsed = urlparse(url)

    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
