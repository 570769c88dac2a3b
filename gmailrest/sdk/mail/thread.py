"""Gmail threads: a collection of messages representing a conversation.

Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/threads#resource
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..exceptions import UnexpectedShapeError
from . import message
from .base import Base, build_list_query, check_error, has_id, label_changes, user_path, with_query

logger = logging.getLogger(__name__)


class Thread(NamedTuple):
    """A conversation. `messages` is only populated by ThreadResource.get()."""

    id: str = ""
    snippet: str = ""
    history_id: str = ""
    messages: Tuple[message.Message, ...] = ()


def _summary(raw: Dict[str, Any], response: Any) -> Thread:
    if not has_id(raw):
        raise UnexpectedShapeError(response)
    return Thread(
        id=raw["id"],
        history_id=raw.get("historyId", ""),
        snippet=raw.get("snippet", ""),
    )


class ThreadResource:
    """Thread operations for one Base helper."""

    def __init__(self, base: Base):
        self.base = base

    def get(self, id: str, user_id: str = "me", format: str = "full") -> Thread:
        """
        Gets the specified thread.

        Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/threads/get

        Raises:
            NotFoundError: The thread does not exist
            BadRequestError: The request was rejected; carries the first error message
            ApiError: Any other error envelope
            UnexpectedShapeError: The response is neither an error nor a thread
        """
        path = with_query(user_path(user_id, "threads", id), {"format": format})
        response = self.base.do_get(path)
        check_error(response)

        if has_id(response) and "historyId" in response and isinstance(response.get("messages"), list):
            return Thread(
                id=response["id"],
                snippet=response.get("snippet", ""),
                history_id=response["historyId"],
                messages=tuple(message.convert(m) for m in response["messages"]),
            )
        raise UnexpectedShapeError(response)

    def search(self, query: str, user_id: str = "me") -> List[Thread]:
        """
        Searches for threads in the user's mailbox.

        Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/threads/list
        """
        path = with_query(user_path(user_id, "threads"), {"q": query})
        threads, _ = self._do_list(path)
        return threads

    def list(self, user_id: Any = "me", params: Optional[Dict[str, Any]] = None) -> Tuple[List[Thread], Optional[str]]:
        """
        Lists the threads in the user's mailbox.

        Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/threads/list

        Args:
            user_id: Mailbox owner, or a params dict (user_id then defaults to "me")
            params: Optional page_token and max_results

        Returns:
            Tuple of (threads, next_page_token); the token is None on the last page
        """
        if isinstance(user_id, dict):
            user_id, params = "me", user_id
        query = build_list_query(params)
        return self._do_list(with_query(user_path(user_id, "threads"), query))

    def _do_list(self, path: str) -> Tuple[List[Thread], Optional[str]]:
        response = self.base.do_get(path)
        check_error(response)
        if not isinstance(response, dict):
            raise UnexpectedShapeError(response)

        # The API omits "threads" when nothing matches.
        threads = [_summary(raw, response) for raw in response.get("threads", [])]
        logger.debug(f"Listed {len(threads)} threads")
        return threads, response.get("nextPageToken")

    def delete(self, id: str, user_id: str = "me") -> None:
        """Immediately and permanently deletes the specified thread."""
        check_error(self.base.do_delete(user_path(user_id, "threads", id)))

    def trash(self, id: str, user_id: str = "me") -> Thread:
        """Moves the specified thread to the trash."""
        return self._expect_summary(self.base.do_post(user_path(user_id, "threads", id, "trash")))

    def untrash(self, id: str, user_id: str = "me") -> Thread:
        """Removes the specified thread from the trash."""
        return self._expect_summary(self.base.do_post(user_path(user_id, "threads", id, "untrash")))

    def modify(
        self,
        id: str,
        add_label_ids: Optional[List[str]] = None,
        remove_label_ids: Optional[List[str]] = None,
        user_id: str = "me",
    ) -> Thread:
        """Adds and removes label IDs on every message in the specified thread."""
        path = user_path(user_id, "threads", id, "modify")
        return self._expect_summary(self.base.do_post(path, label_changes(add_label_ids, remove_label_ids)))

    def _expect_summary(self, response: Any) -> Thread:
        check_error(response)
        return _summary(response, response)
