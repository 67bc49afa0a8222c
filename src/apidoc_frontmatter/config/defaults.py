"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default traversal settings
DEFAULT_ROOT = "content/docs/api"

# Default metadata settings
DEFAULT_ORDER_STEP = 10
DEFAULT_PRODUCT_NAME = "OpenSeadragon"

# Default strip settings
DEFAULT_NORMALIZE = False

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "root": DEFAULT_ROOT,
        "order_step": DEFAULT_ORDER_STEP,
        "product_name": DEFAULT_PRODUCT_NAME,
        "normalize": DEFAULT_NORMALIZE,
        "log_level": DEFAULT_LOG_LEVEL,
        "categories": None,
    }
