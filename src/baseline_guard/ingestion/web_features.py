"""web-features database ingestion helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from ..result import DataLoadError

logger = logging.getLogger(__name__)

WEB_FEATURES_URL = "https://unpkg.com/web-features/data.json"

USER_AGENT = "baseline-guard (+https://github.com/web-platform-dx/web-features)"


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=30)


def fetch_web_features(url: str = WEB_FEATURES_URL) -> bytes:
    """Return the raw web-features JSON payload."""

    try:
        response = _http_get(url)
    except requests.RequestException as exc:  # pragma: no cover - network failure path
        raise DataLoadError(f"Failed to fetch feature data: {exc}") from exc

    if response.status_code != 200:
        raise DataLoadError(
            f"Unexpected status code {response.status_code} fetching feature data"
        )

    return response.content


def load_snapshot(source: str | Path | None = None) -> Any:
    """Load the feature database from a URL or local path.

    Params:
        source: http(s) URL or filesystem path of a web-features ``data.json``
            (or a bare feature id -> record mapping); None fetches
            ``WEB_FEATURES_URL``.

    Raises:
        DataLoadError: If the data cannot be fetched, read or decoded.
    """
    source = str(source) if source is not None else WEB_FEATURES_URL

    if source.startswith("http://") or source.startswith("https://"):
        logger.info("Fetching feature data from %s", source)
        payload = fetch_web_features(source)
    else:
        logger.info("Reading feature data from %s", source)
        try:
            payload = Path(source).read_bytes()
        except OSError as exc:
            raise DataLoadError(f"Failed to read feature data: {exc}") from exc

    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Invalid JSON in feature data: {exc}") from exc
