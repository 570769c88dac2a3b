"""Gmail drafts.

Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/drafts
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..exceptions import UnexpectedShapeError
from .message import Message, convert as convert_message
from .base import Base, build_list_query, check_error, has_id, user_path, with_query

logger = logging.getLogger(__name__)


class Draft(NamedTuple):
    id: str = ""
    message: Optional[Message] = None


def convert(raw: Dict[str, Any]) -> Draft:
    """Build a Draft from its API representation."""
    raw_message = raw.get("message")
    return Draft(
        id=raw.get("id", ""),
        message=convert_message(raw_message) if raw_message else None,
    )


def _message_body(raw: str, thread_id: Optional[str]) -> dict:
    body = {"raw": raw}
    if thread_id:
        body["threadId"] = thread_id
    return {"message": body}


class DraftResource:
    """Draft operations for one Base helper."""

    def __init__(self, base: Base):
        self.base = base

    def _expect_draft(self, response: Any) -> Draft:
        check_error(response)
        if has_id(response):
            return convert(response)
        raise UnexpectedShapeError(response)

    def get(self, id: str, user_id: str = "me", format: str = "full") -> Draft:
        """Gets the specified draft."""
        path = with_query(user_path(user_id, "drafts", id), {"format": format})
        return self._expect_draft(self.base.do_get(path))

    def list(self, user_id: Any = "me", params: Optional[Dict[str, Any]] = None) -> Tuple[List[Draft], Optional[str]]:
        """
        Lists the drafts in the user's mailbox.

        Args:
            user_id: Mailbox owner, or a params dict (user_id then defaults to "me")
            params: Optional page_token and max_results

        Returns:
            Tuple of (drafts, next_page_token); the token is None on the last page
        """
        if isinstance(user_id, dict):
            user_id, params = "me", user_id
        path = with_query(user_path(user_id, "drafts"), build_list_query(params))
        response = self.base.do_get(path)
        check_error(response)
        if not isinstance(response, dict):
            raise UnexpectedShapeError(response)
        entries = response.get("drafts", [])
        if not all(has_id(entry) for entry in entries):
            raise UnexpectedShapeError(response)
        drafts = [convert(raw) for raw in entries]
        return drafts, response.get("nextPageToken")

    def create(self, raw: str, user_id: str = "me", thread_id: Optional[str] = None) -> Draft:
        """
        Creates a draft from a message built with build_raw().
        """
        draft = self._expect_draft(self.base.do_post(user_path(user_id, "drafts"), _message_body(raw, thread_id)))
        logger.info(f"Draft created. Draft ID: {draft.id}")
        return draft

    def update(self, id: str, raw: str, user_id: str = "me", thread_id: Optional[str] = None) -> Draft:
        """Replaces the content of the specified draft."""
        path = user_path(user_id, "drafts", id)
        return self._expect_draft(self.base.do_put(path, _message_body(raw, thread_id)))

    def delete(self, id: str, user_id: str = "me") -> None:
        """Immediately and permanently deletes the specified draft."""
        check_error(self.base.do_delete(user_path(user_id, "drafts", id)))

    def send(self, id: str, user_id: str = "me") -> Message:
        """Sends the specified existing draft and returns the sent message."""
        response = self.base.do_post(user_path(user_id, "drafts", "send"), {"id": id})
        check_error(response)
        if has_id(response):
            sent = convert_message(response)
            logger.info(f"Draft {id} sent. Message ID: {sent.id}")
            return sent
        raise UnexpectedShapeError(response)
