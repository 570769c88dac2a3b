"""Gmail messages: the Message record and message operations.

Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/messages
"""

import base64
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..exceptions import UnexpectedShapeError
from .base import Base, build_list_query, check_error, has_id, label_changes, user_path, with_query

logger = logging.getLogger(__name__)

MESSAGE_LIST_PARAMS = {
    "query": "q",
    "label_ids": "labelIds",
    "include_spam_trash": "includeSpamTrash",
}


class Message(NamedTuple):
    """An email message. Fields not returned for the requested format keep their defaults."""

    id: str = ""
    thread_id: str = ""
    label_ids: Tuple[str, ...] = ()
    snippet: str = ""
    history_id: str = ""
    internal_date: str = ""
    size_estimate: int = 0
    payload: Optional[Dict[str, Any]] = None
    raw: Optional[str] = None

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a header value by name, case-insensitively."""
        for header in (self.payload or {}).get("headers", []):
            if header.get("name", "").lower() == name.lower():
                return header.get("value")
        return default

    def body(self) -> Tuple[Optional[str], Optional[str]]:
        """
        Extract text and HTML body parts from the payload.

        Returns:
            Tuple of (text_body, html_body)
        """
        if not self.payload:
            return None, None
        return _extract_body_parts(self.payload)

    def attachments(self) -> List[Dict[str, Any]]:
        """
        Attachment metadata found anywhere in the MIME tree.

        Each entry has attachmentId, filename, mimeType and size.
        """
        if not self.payload:
            return []
        return _extract_attachments(self.payload)


def convert(raw: Dict[str, Any]) -> Message:
    """Build a Message from its API representation."""
    return Message(
        id=raw.get("id", ""),
        thread_id=raw.get("threadId", ""),
        label_ids=tuple(raw.get("labelIds", ())),
        snippet=raw.get("snippet", ""),
        history_id=raw.get("historyId", ""),
        internal_date=raw.get("internalDate", ""),
        size_estimate=raw.get("sizeEstimate", 0),
        payload=raw.get("payload"),
        raw=raw.get("raw"),
    )


def _decode(data: str) -> str:
    return base64.urlsafe_b64decode(data).decode("utf-8", errors="ignore")


def _extract_body_parts(payload: dict) -> tuple:
    text_body = None
    html_body = None

    def process_part(part: dict):
        nonlocal text_body, html_body

        mime_type = part.get("mimeType", "")
        data = part.get("body", {}).get("data")

        if data:
            if mime_type == "text/plain" and text_body is None:
                text_body = _decode(data)
            elif mime_type == "text/html" and html_body is None:
                html_body = _decode(data)

        for subpart in part.get("parts", []):
            process_part(subpart)

    process_part(payload)
    return text_body, html_body


def _extract_attachments(payload: dict) -> List[Dict[str, Any]]:
    attachments = []

    def process_part(part: dict):
        filename = part.get("filename", "")
        body = part.get("body", {})
        attachment_id = body.get("attachmentId")

        # An attachment has both a filename and an attachmentId
        if filename and attachment_id:
            attachments.append({
                "attachmentId": attachment_id,
                "filename": filename,
                "mimeType": part.get("mimeType", "application/octet-stream"),
                "size": body.get("size", 0),
            })

        for subpart in part.get("parts", []):
            process_part(subpart)

    process_part(payload)
    return attachments


def build_raw(
    to: str,
    subject: str,
    body: str,
    cc: Optional[str] = None,
    bcc: Optional[str] = None,
    html_body: Optional[str] = None,
) -> str:
    """
    Build a base64url-encoded RFC 2822 message for send and draft operations.

    Args:
        to: Recipient email address (comma-separated for multiple)
        subject: Email subject line
        body: Plain text body of the email
        cc: Optional CC recipients (comma-separated)
        bcc: Optional BCC recipients (comma-separated)
        html_body: Optional HTML body (if provided, builds multipart/alternative)

    Returns:
        The encoded message, suitable for the API's `raw` field
    """
    if html_body:
        message = MIMEMultipart("alternative")
        message.attach(MIMEText(body, "plain"))
        message.attach(MIMEText(html_body, "html"))
    else:
        message = MIMEText(body, "plain")

    message["to"] = to
    message["subject"] = subject

    if cc:
        message["cc"] = cc
    if bcc:
        message["bcc"] = bcc

    return base64.urlsafe_b64encode(message.as_bytes()).decode("utf-8")


class MessageResource:
    """Message operations for one Base helper."""

    def __init__(self, base: Base):
        self.base = base

    def _expect_message(self, response: Any) -> Message:
        check_error(response)
        if has_id(response):
            return convert(response)
        raise UnexpectedShapeError(response)

    def _expect_list(self, response: Any) -> Tuple[List[Message], Optional[str]]:
        check_error(response)
        if not isinstance(response, dict):
            raise UnexpectedShapeError(response)
        entries = response.get("messages", [])
        if not all(has_id(entry) for entry in entries):
            raise UnexpectedShapeError(response)
        messages = [convert(entry) for entry in entries]
        return messages, response.get("nextPageToken")

    def get(self, id: str, user_id: str = "me", format: str = "full") -> Message:
        """
        Gets the specified message.

        Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/messages/get
        """
        path = with_query(user_path(user_id, "messages", id), {"format": format})
        return self._expect_message(self.base.do_get(path))

    def search(self, query: str, user_id: str = "me") -> List[Message]:
        """
        Searches for messages in the user's mailbox.

        Entries carry only id and thread_id; use get() for the content.
        """
        path = with_query(user_path(user_id, "messages"), {"q": query})
        messages, _ = self._expect_list(self.base.do_get(path))
        return messages

    def list(self, user_id: Any = "me", params: Optional[Dict[str, Any]] = None) -> Tuple[List[Message], Optional[str]]:
        """
        Lists the messages in the user's mailbox.

        Args:
            user_id: Mailbox owner, or a params dict (user_id then defaults to "me")
            params: page_token, max_results, query, label_ids, include_spam_trash

        Returns:
            Tuple of (messages, next_page_token); the token is None on the last page
        """
        if isinstance(user_id, dict):
            user_id, params = "me", user_id
        query = build_list_query(params, MESSAGE_LIST_PARAMS)
        path = with_query(user_path(user_id, "messages"), query)
        return self._expect_list(self.base.do_get(path))

    def send(self, raw: str, user_id: str = "me", thread_id: Optional[str] = None) -> Message:
        """
        Sends a message built with build_raw().

        Returns:
            The sent Message (id, thread_id, label_ids)
        """
        data = {"raw": raw}
        if thread_id:
            data["threadId"] = thread_id
        message = self._expect_message(self.base.do_post(user_path(user_id, "messages", "send"), data))
        logger.info(f"Message sent. Message ID: {message.id}")
        return message

    def delete(self, id: str, user_id: str = "me") -> None:
        """Permanently deletes the specified message."""
        check_error(self.base.do_delete(user_path(user_id, "messages", id)))

    def trash(self, id: str, user_id: str = "me") -> Message:
        """Moves the specified message to the trash."""
        return self._expect_message(self.base.do_post(user_path(user_id, "messages", id, "trash")))

    def untrash(self, id: str, user_id: str = "me") -> Message:
        """Removes the specified message from the trash."""
        return self._expect_message(self.base.do_post(user_path(user_id, "messages", id, "untrash")))

    def modify(
        self,
        id: str,
        add_label_ids: Optional[List[str]] = None,
        remove_label_ids: Optional[List[str]] = None,
        user_id: str = "me",
    ) -> Message:
        """Adds and removes label IDs on the specified message."""
        path = user_path(user_id, "messages", id, "modify")
        return self._expect_message(self.base.do_post(path, label_changes(add_label_ids, remove_label_ids)))
