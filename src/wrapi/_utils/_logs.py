import logging
import sys
from typing import Optional

from .constants import PRODUCT_NAME

logger: logging.Logger = logging.getLogger(PRODUCT_NAME)


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logging.basicConfig(
        format="[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)

    # one stderr handler, however many clients get configured
    if not any(getattr(h, "_wrapi_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler._wrapi_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
