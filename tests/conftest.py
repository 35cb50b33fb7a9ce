"""Shared fixtures for the Slack webhook tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "ok") -> None:
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)


class FakeSession:
    """Records POST calls instead of touching the network."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._response = response or FakeResponse()
        self._error = error

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
