from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict

import httpx
import pytest


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], str]:
    def _write(name: str, payload: object) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def mock_client() -> Callable[[Dict[str, httpx.Response]], httpx.Client]:
    """Build an httpx client that serves canned responses by URL."""

    def _build(routes: Dict[str, httpx.Response]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            response = routes.get(str(request.url))
            if response is None:
                return httpx.Response(404, text="not found")
            return response

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _build
