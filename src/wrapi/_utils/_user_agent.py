import importlib.metadata

from .constants import HEADER_USER_AGENT, PRODUCT_NAME


def user_agent_value() -> str:
    try:
        version = importlib.metadata.version(PRODUCT_NAME)
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"

    return f"{PRODUCT_NAME}/{version}"


def header_user_agent() -> dict[str, str]:
    return {HEADER_USER_AGENT: user_agent_value()}
