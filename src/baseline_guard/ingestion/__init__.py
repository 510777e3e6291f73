"""Loading of the web-features database snapshot."""

from .web_features import (
    WEB_FEATURES_URL,
    fetch_web_features,
    load_snapshot,
)

__all__ = [
    "WEB_FEATURES_URL",
    "fetch_web_features",
    "load_snapshot",
]
