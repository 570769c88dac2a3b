"""
Shared fixtures for gmailrest tests.

This module provides:
- A fake transport that records every call and replays canned responses
- A Base helper wired to that transport with a fresh ApiConfig
- Registration of the `integration` marker
"""

import pytest

from gmailrest.sdk.config import ApiConfig, DEFAULT_BASE_URL
from gmailrest.sdk.mail.base import Base


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: talks to the live Gmail API (needs GMAILREST_TOKEN_FILE)"
    )


class FakeTransport:
    """
    Stand-in for gmailrest.sdk.http.HttpClient.

    Each verb appends (method, url, data) to `calls` and returns the next
    queued response, or `default` when the queue is empty.
    """

    def __init__(self, *responses, default=None):
        self.responses = list(responses)
        self.default = default
        self.calls = []

    def _respond(self, method, url, data=None):
        self.calls.append((method, url, data))
        if self.responses:
            return self.responses.pop(0)
        return self.default

    def get(self, url):
        return self._respond("GET", url)

    def post(self, url, data=None):
        return self._respond("POST", url, data)

    def put(self, url, data=None):
        return self._respond("PUT", url, data)

    def patch(self, url, data=None):
        return self._respond("PATCH", url, data)

    def delete(self, url):
        return self._respond("DELETE", url)

    @property
    def last_url(self):
        return self.calls[-1][1]


@pytest.fixture
def api_url():
    """Prefix every request URL is expected to carry."""
    return DEFAULT_BASE_URL


@pytest.fixture
def make_base():
    """
    Factory fixture returning (Base, FakeTransport) for the given responses.

    Usage:
        base, transport = make_base({"id": "t1", ...})
    """
    def factory(*responses, default=None):
        transport = FakeTransport(*responses, default=default)
        return Base(transport, ApiConfig()), transport
    return factory
