import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

import requests

from .errors import ConfigurationError, NoDataError, RemoteError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")
DEMO_URL = "DEMO_MOCK_API"


@dataclass
class RemoteConfig:
    url: str
    method: str = "GET"
    headers: str = '{\n  "Content-Type": "application/json"\n}'
    body: str = '{\n  "collection": "students",\n  "database": "airr_records"\n}'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RemoteConfig":
        defaults = cls(url="")
        return cls(
            url=(data.get("url") or "").strip(),
            method=(data.get("method") or "GET").strip().upper(),
            headers=data.get("headers") if data.get("headers") is not None else defaults.headers,
            body=data.get("body") if data.get("body") is not None else defaults.body,
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def parse_headers(headers_text: str) -> Dict[str, str]:
    try:
        headers = json.loads(headers_text)
    except (TypeError, ValueError):
        raise ConfigurationError("Invalid Headers JSON")
    if not isinstance(headers, dict):
        raise ConfigurationError("Invalid Headers JSON")
    return {str(k): str(v) for k, v in headers.items()}


def build_request(config: RemoteConfig) -> Dict[str, Any]:
    """Validate connector settings and return keyword arguments for requests."""
    if not config.url:
        raise ConfigurationError("API endpoint URL is required")
    if config.method not in SUPPORTED_METHODS:
        raise ConfigurationError(f"Unsupported HTTP method: {config.method}")
    kwargs: Dict[str, Any] = {
        "method": config.method,
        "url": config.url,
        "headers": parse_headers(config.headers),
    }
    if config.method == "POST":
        # Body goes out exactly as typed
        kwargs["data"] = config.body
    return kwargs


def extract_records(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict):
        records = payload.get("documents") or payload.get("records") or []
    else:
        records = []
    if not isinstance(records, list) or len(records) == 0:
        raise NoDataError("No student records found.")
    return records


def fetch_remote_records(config: RemoteConfig) -> List[Dict[str, Any]]:
    """Run one request against the configured endpoint and return its records.

    Records are returned as the server sent them; no per-field coercion is
    applied on this path.
    """
    kwargs = build_request(config)
    try:
        response = requests.request(**kwargs)
    except requests.RequestException as e:
        logger.warning("Remote fetch to %s failed: %s", config.url, e)
        raise RemoteError(f"Could not reach {config.url}: {e}")
    if not response.ok:
        logger.warning("Remote fetch to %s returned %s", config.url, response.status_code)
        if response.status_code == 404:
            raise RemoteError("Endpoint not found. Use 'Demo Data' in the connector.")
        raise RemoteError(f"API responded with {response.status_code}")
    try:
        payload = response.json()
    except ValueError:
        raise RemoteError("API returned a response that is not valid JSON")
    return extract_records(payload)
