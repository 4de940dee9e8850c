"""Shared pytest fixtures."""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import requests

from riftmaker.config import RiftmakerConfig


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any = None, status_code: int = 200, reason: str = 'OK', text: str = None):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = text

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text[:20]!r}")
        return self.payload


@pytest.fixture
def test_config() -> RiftmakerConfig:
    """Configuration pointing at fixture endpoints."""
    return RiftmakerConfig(
        base_url='https://cdragon.test',
    )


@pytest.fixture
def make_session():
    """Build a mock session answering GETs from a ``{url: FakeResponse}`` table.

    URLs missing from the table answer 404.
    """

    def _make(routes: Dict[str, Any]) -> MagicMock:
        session = MagicMock(spec=requests.Session)

        def get(url, **kwargs):
            route = routes.get(url)
            if isinstance(route, Exception):
                raise route
            if route is None:
                return FakeResponse(status_code=404, reason='Not Found')
            return route

        session.get.side_effect = get
        return session

    return _make


@pytest.fixture
def make_response():
    """Factory for FakeResponse objects."""
    return FakeResponse
