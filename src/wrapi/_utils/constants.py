PRODUCT_NAME = "wrapi"

# Environment variables
ENV_PREFIX = "WRAPI_"
ENV_BASE_URL = "BASE_URL"
ENV_TIMEOUT = "TIMEOUT"
ENV_DEBUG = "DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

# Defaults
DEFAULT_TIMEOUT = 30.0
