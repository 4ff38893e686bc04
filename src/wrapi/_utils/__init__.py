from ._logs import setup_logging
from ._request_spec import RequestBuilder
from ._ssl_context import get_httpx_client_kwargs
from ._url import join_url
from ._user_agent import header_user_agent, user_agent_value

__all__ = [
    "RequestBuilder",
    "get_httpx_client_kwargs",
    "header_user_agent",
    "join_url",
    "setup_logging",
    "user_agent_value",
]
