import json
from typing import Any, Dict, List, Optional

import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    def __init__(
        self,
        responses: Optional[List[FakeResponse]] = None,
        error: Optional[requests.RequestException] = None,
    ) -> None:
        self.auth = None
        self.headers: Dict[str, str] = {}
        self._responses = list(responses or [])
        self._error = error
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("POST", url, **kwargs)

    def close(self) -> None:
        self.closed = True

    def _respond(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return self._responses.pop(0)
