"""Base request helper shared by the Gmail resources."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

from ..config import ApiConfig
from ..exceptions import ApiError, BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

# Parameter names accepted by list operations, mapped to API query names.
LIST_QUERY_PARAMS = {
    "page_token": "pageToken",
    "max_results": "maxResults",
}


class Base:
    """
    Prefixes relative API paths with the configured base URL and forwards
    them to the transport. Results are returned exactly as the transport
    produced them.
    """

    def __init__(self, transport: Any, config: Optional[ApiConfig] = None):
        self.transport = transport
        self.config = config if config is not None else ApiConfig()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def do_get(self, path: str) -> Any:
        """Performs an HTTP GET request."""
        return self.transport.get(self.base_url + path)

    def do_post(self, path: str, data: Optional[dict] = None) -> Any:
        """Performs an HTTP POST request."""
        return self.transport.post(self.base_url + path, data)

    def do_put(self, path: str, data: Optional[dict] = None) -> Any:
        """Performs an HTTP PUT request."""
        return self.transport.put(self.base_url + path, data)

    def do_patch(self, path: str, data: Optional[dict] = None) -> Any:
        """Performs an HTTP PATCH request."""
        return self.transport.patch(self.base_url + path, data)

    def do_delete(self, path: str) -> Any:
        """Performs an HTTP DELETE request."""
        return self.transport.delete(self.base_url + path)


def user_path(user_id: str, *parts: str) -> str:
    """Build `users/{user_id}/...` with every segment percent-encoded."""
    segments = [user_id] + [str(part) for part in parts]
    return "users/" + "/".join(quote(segment, safe="") for segment in segments)


def check_error(response: Any) -> None:
    """
    Raise the exception matching a Gmail error envelope, if any.

    Checked in order: code 404, code 400 with an `errors` list (only the
    first message is kept), then any other `error` value.
    """
    if not isinstance(response, dict) or "error" not in response:
        return

    details = response["error"]
    if isinstance(details, dict):
        code = details.get("code")
        if code == 404:
            logger.debug(f"Not found: {details}")
            raise NotFoundError(details)
        errors = details.get("errors")
        if code == 400 and isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and "message" in first:
                logger.debug(f"Bad request: {details}")
                raise BadRequestError(first["message"], details)

    logger.debug(f"API error: {details}")
    raise ApiError(details)


def build_list_query(params: Optional[Dict[str, Any]], extra: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Translate list params into API query names.

    Keys that are absent or None are left out; list values repeat the key.

    Args:
        params: e.g. {"page_token": "...", "max_results": 10}
        extra: Additional param-to-query name mappings for a resource
    """
    names = dict(LIST_QUERY_PARAMS)
    if extra:
        names.update(extra)

    query = {}
    for key, name in names.items():
        value = (params or {}).get(key)
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[name] = value
    return query


def with_query(path: str, query: Dict[str, Any]) -> str:
    """Append a percent-encoded query string to `path` when `query` is not empty."""
    if not query:
        return path
    return f"{path}?{urlencode(query, doseq=True)}"


def label_changes(add_label_ids: Optional[List[str]], remove_label_ids: Optional[List[str]]) -> dict:
    """Request body for the messages and threads modify endpoints."""
    return {
        "addLabelIds": list(add_label_ids or []),
        "removeLabelIds": list(remove_label_ids or []),
    }


def has_id(raw: Any) -> bool:
    """True for a resource dict carrying a non-empty string id."""
    return isinstance(raw, dict) and isinstance(raw.get("id"), str) and bool(raw["id"])
