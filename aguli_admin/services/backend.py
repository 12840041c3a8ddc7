# Copyright (c) 2026 Mohammed Hassan. All rights reserved.
# Proprietary and confidential. Unauthorized copying, modification, distribution, or use is prohibited.

import requests
from typing import Any
from fastapi import HTTPException
from aguli_admin.config import settings
from aguli_admin.logging_setup import log_event

API_PREFIX = "/api/v1/aguli_tv"

class BackendError(Exception):
    """The Aguli TV backend was unreachable or rejected the request."""
    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

class BackendClient:
    """
    Thin client for the Aguli TV REST backend.

    Every call is attempted once. Responses are JSON envelopes of the form
    {"success": bool, "message": str, "data": ...}; a few list endpoints
    return bare keys instead, so the whole decoded body is handed back.
    """
    def __init__(self, base_url: str, timeout: float = 30.0, api_key: str | None = None, token: str | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self.token = token

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, path: str, *, params: dict | None = None, json: Any = None,
                data: Any = None, files: Any = None) -> dict:
        url = f"{self.base_url}{path}"
        log_event("backend_request", level="debug", method=method, path=path)
        try:
            res = requests.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log_event("backend_unreachable", level="error", method=method, path=path, error=str(e))
            raise BackendError(f"Backend unreachable: {e}") from e

        try:
            body = res.json()
        except ValueError:
            body = None

        if res.status_code >= 400:
            detail = body.get("message") if isinstance(body, dict) else None
            log_event("backend_rejected", level="warning", method=method, path=path, status_code=res.status_code, error=detail)
            raise BackendError(detail or f"Backend returned HTTP {res.status_code}", res.status_code, body)

        if body is None:
            raise BackendError("Backend returned a non-JSON response", res.status_code)

        if isinstance(body, dict) and body.get("success") is False:
            raise BackendError(body.get("message") or "Backend reported failure", res.status_code, body)

        return body

    def get(self, path: str, **kwargs) -> dict:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> dict:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> dict:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> dict:
        return self.request("DELETE", path, **kwargs)

def get_backend(token: str | None = None) -> BackendClient:
    return BackendClient(
        settings.api_url,
        timeout=settings.request_timeout,
        api_key=settings.saas_api_key,
        token=token,
    )

def http_error(e: BackendError):
    """HTTPException for a backend failure: client errors pass through, anything else is a 502."""
    code = e.status_code if e.status_code and 400 <= e.status_code < 500 else 502
    return HTTPException(status_code=code, detail=e.message)

def multipart_fields(data: dict) -> list:
    """Text fields as multipart parts, so requests sends multipart/form-data even without files."""
    return [(key, (None, str(value))) for key, value in data.items()]
