"""HTTP transport for gmailrest.

Wraps a requests session. The session is normally a google-auth
AuthorizedSession, which attaches the bearer token and refreshes it.
"""

import logging
from typing import Any, Optional

import requests

from .timing import time_api_call

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Performs HTTP verbs against absolute URLs and returns decoded JSON.

    Error statuses are not raised: the Gmail API reports failures in a JSON
    `{"error": {...}}` envelope, which is returned for the caller to inspect.
    Network errors from requests propagate.
    """

    def __init__(self, session: requests.Session):
        self.session = session

    def get(self, url: str) -> Optional[Any]:
        return self.request("GET", url)

    def post(self, url: str, data: Optional[dict] = None) -> Optional[Any]:
        return self.request("POST", url, data)

    def put(self, url: str, data: Optional[dict] = None) -> Optional[Any]:
        return self.request("PUT", url, data)

    def patch(self, url: str, data: Optional[dict] = None) -> Optional[Any]:
        return self.request("PATCH", url, data)

    def delete(self, url: str) -> Optional[Any]:
        return self.request("DELETE", url)

    @time_api_call
    def request(self, method: str, url: str, data: Optional[dict] = None) -> Optional[Any]:
        """
        Issue a request and decode the response body.

        Returns:
            The decoded JSON body, or None for an empty success body. An
            error status without a JSON body is wrapped in an error envelope.
        """
        response = self.session.request(method, url, json=data)
        logger.debug(f"{method} {url} -> {response.status_code}")

        if not response.content:
            if response.ok:
                return None
            return {"error": {"code": response.status_code, "message": response.reason}}

        try:
            return response.json()
        except ValueError:
            if response.ok:
                raise
            return {"error": {"code": response.status_code, "message": response.text}}


def get_http_client(credentials: Any) -> HttpClient:
    """
    Build an HttpClient that authenticates with the given credentials.

    Args:
        credentials: google-auth credentials object

    Returns:
        HttpClient backed by an AuthorizedSession
    """
    from google.auth.transport.requests import AuthorizedSession

    return HttpClient(AuthorizedSession(credentials))
