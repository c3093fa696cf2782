"""HTTP client for the funding data endpoint."""

from __future__ import annotations

import logging

import requests

from core.errors import ApplicationError, MalformedResponseError, TransportError
from core.models import AssetRecord, normalize_assets
from core.policy import APPLICATION_ERROR_FALLBACK, DATA_PATH

logger = logging.getLogger(__name__)


def data_url(base_url: str) -> str:
    return base_url.rstrip("/") + DATA_PATH


def parse_payload(payload: object) -> list[AssetRecord]:
    """Validate a decoded response body and return its usable asset records."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(payload).__name__}")

    success = payload.get("success")
    if not isinstance(success, bool):
        raise MalformedResponseError("Response has no boolean 'success' field")

    if not success:
        error = payload.get("error")
        server_message = error if isinstance(error, str) and error.strip() else None
        raise ApplicationError(server_message or APPLICATION_ERROR_FALLBACK, server_message=server_message)

    assets = payload.get("assets")
    if not isinstance(assets, list):
        raise MalformedResponseError("Response has no 'assets' list")
    return normalize_assets(assets)


def fetch_assets(base_url: str, timeout: float = 10.0) -> list[AssetRecord]:
    """GET the funding snapshot. Raises a ``FundingDataError`` subclass on failure.

    No retries here: the regular polling cadence is the only retry policy.
    """
    url = data_url(base_url)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    if resp.status_code != 200:
        raise TransportError(f"HTTP {resp.status_code} for {url}")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Invalid JSON from {url}") from exc

    records = parse_payload(payload)
    logger.debug("Fetched %d assets from %s", len(records), url)
    return records
