from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from ..core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT, DEFAULT_QR_BASE_URL
from ..core.exceptions import ApiConnectionError, ApiResponseError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_API_TIMEOUT
    qr_base_url: str = DEFAULT_QR_BASE_URL


@dataclass(frozen=True)
class TextResponse:
    """Raw reply for the few tasks that answer with text instead of JSON."""

    ok: bool
    status_code: int
    text: str


class ApiClient:
    """Gateway to the shared `api.php?task=<name>` endpoint.

    Every call is a fresh request; there is no caching, retry or cancellation.
    Transport problems surface as ApiConnectionError, a body whose `status`
    is not "success" is checked separately with `require_success`.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def config(self) -> ApiConfig:
        return self._config

    def post(self, task: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        resp = self._send("POST", task, json=dict(payload or {}))
        return self._decode(task, resp)

    def get(self, task: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        resp = self._send("GET", task, params=dict(params or {}))
        return self._decode(task, resp)

    def post_text(self, task: str, payload: Optional[Mapping[str, Any]] = None) -> TextResponse:
        resp = self._send("POST", task, json=dict(payload or {}), raise_for_status=False)
        return TextResponse(ok=resp.ok, status_code=resp.status_code, text=resp.text or "")

    def _send(self, method: str, task: str, *, params=None, json=None, raise_for_status: bool = True):
        query = {"task": task}
        query.update(params or {})
        log.debug("api %s task=%s", method, task)
        try:
            resp = self._session.request(
                method,
                self._config.base_url,
                params=query,
                json=json if method == "POST" else None,
                timeout=self._config.timeout,
            )
            if raise_for_status:
                resp.raise_for_status()
        except requests.RequestException as e:
            log.warning("api task=%s failed: %s", task, e)
            raise ApiConnectionError(f"Unable to reach server ({task})") from e
        return resp

    @staticmethod
    def _decode(task: str, resp) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            log.warning("api task=%s returned a non-JSON body", task)
            raise ApiConnectionError(f"Invalid response from server ({task})") from e


def require_success(body: Any, *, task: str, default_message: str = "Request failed") -> Mapping[str, Any]:
    """Return the body if it reports `status == "success"`, else raise ApiResponseError."""
    if not isinstance(body, Mapping) or body.get("status") != "success":
        message = default_message
        if isinstance(body, Mapping) and body.get("message"):
            message = str(body["message"])
        raise ApiResponseError(message, task=task, body=body)
    return body
