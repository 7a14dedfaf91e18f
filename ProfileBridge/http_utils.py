from __future__ import annotations

import json
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    HTTP_BACKOFF_INITIAL,
    HTTP_MAX_RETRIES,
    HTTP_RETRY_STATUS_CODES,
    HTTP_TIMEOUT_DEFAULT,
)
from .exceptions import RemoteServiceError
from .log_utils import logger, LogSource, LogCategory

# Standard HTTP headers for API requests
DEFAULT_JSON_HEADERS = {
    "User-Agent": "ProfileBridge/1.0",
    "Accept": "application/json",
}


def build_session(max_retries: int = HTTP_MAX_RETRIES) -> requests.Session:
    """
    Create a session with connection pooling and the configured retry policy.
    Statuses are never turned into exceptions by the adapter; fetch_record and
    put_record classify them.
    """
    session = requests.Session()
    retry = Retry(
        total=max_retries,
        backoff_factor=HTTP_BACKOFF_INITIAL,
        status_forcelist=HTTP_RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


# Global session for connection pooling
_SESSION = build_session()


def _auth_headers(token: Optional[str]) -> Dict[str, str]:
    headers = DEFAULT_JSON_HEADERS.copy()
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _decode_json_bytes(raw: bytes, url: str) -> Any:
    """
    Decode a UTF-8 JSON response and parse it into a Python object, including a
    short preview of invalid data in error messages.
    """
    try:
        return json.loads(raw.decode("utf-8"))
    except json.JSONDecodeError as ex:
        preview = raw[:256].decode("utf-8", errors="replace")
        raise ValueError(f"Invalid JSON from {url!r}: {ex.msg} at pos {ex.pos}; preview={preview!r}") from ex


def _raise_for_status(resp: requests.Response, url: str):
    if not 200 <= resp.status_code < 300:
        raise RemoteServiceError(resp.status_code, resp.reason or "", url, response=resp)


def fetch_record(
        url: str,
        token: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
) -> Any:
    """
    GET a record from the identity service and return its parsed JSON body.

    Sends Accept: application/json, plus a bearer Authorization header only
    when a token is given. A non-success status raises RemoteServiceError with
    the status code and reason. One attempt, no timeout.
    """
    session = session or _SESSION
    try:
        resp = session.get(url, headers=_auth_headers(token), timeout=HTTP_TIMEOUT_DEFAULT)
        _raise_for_status(resp, url)
        return _decode_json_bytes(resp.content, url)
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.debug(f"Fetch failed for {url}: {e}", source=LogSource.ORCID, category=LogCategory.FETCH)
        raise


def put_record(
        url: str,
        payload: Dict[str, Any],
        token: str,
        *,
        session: Optional[requests.Session] = None,
) -> Any:
    """
    PUT a mapped payload to the identity service and return the parsed
    response body, or an empty dict when the service answers without one.
    Non-success statuses raise RemoteServiceError.
    """
    session = session or _SESSION
    headers = _auth_headers(token)
    headers["Content-Type"] = "application/json"
    try:
        resp = session.put(url, headers=headers, json=payload, timeout=HTTP_TIMEOUT_DEFAULT)
        _raise_for_status(resp, url)
        if not resp.content:
            return {}
        return _decode_json_bytes(resp.content, url)
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Update failed for {url}: {e}", source=LogSource.ORCID, category=LogCategory.SAVE)
        raise
