"""
HTTP transport for the Podio API.

ResourceClient is the only place where HTTP calls are made. API classes
(clients/*) hand it a path and an optional body and get decoded JSON, or a
validated model, back.

Behavior:
- Accept and Content-Type are always application/json
- Non-2xx responses raise the RemoteError subclass for the status
- httpx.RequestError (connect/read failures, timeouts) propagates unchanged
- One request per call; no retries
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type

import httpx
from pydantic import BaseModel

from podio_client.config import ClientConfig
from podio_client.contracts.base import M, parse_model
from podio_client.errors import ResponseValidationError, error_for_status

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class ResourceClient:
    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        timeout_seconds: float = 20.0,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    @classmethod
    def from_config(cls, config: ClientConfig, http_client: Optional[httpx.Client] = None) -> "ResourceClient":
        return cls(
            base_url=config.api_url,
            access_token=config.access_token,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": JSON_MEDIA_TYPE,
            "Content-Type": JSON_MEDIA_TYPE,
        }
        if self.access_token:
            headers["Authorization"] = f"OAuth2 {self.access_token}"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    # -- verbs --

    def get(
        self,
        path: str,
        model: Optional[Type[M]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        data = self._request("GET", path, params=params)
        if model is None:
            return data
        return parse_model(model, data)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, body=body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # -- internals --

    def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"headers": self._headers()}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if body is not None:
            kwargs["json"] = to_json(body)

        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error calling {method} {url}: {e}")
            raise

        if response.is_success:
            return _decode_success(response)

        logger.warning("%s %s failed: status=%s body=%s", method, url, response.status_code, response.text)
        raise error_for_status(response.status_code, response.text, _safe_json(response))


def to_json(body: Any) -> Any:
    """Convert a request body into a JSON-serializable value."""
    if hasattr(body, "to_payload"):
        return body.to_payload()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    return body


def _decode_success(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise ResponseValidationError("Response body is not valid JSON", payload=response.text) from exc


def _safe_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
