"""Gmail labels.

Gmail API documentation: https://developers.google.com/gmail/api/v1/reference/users/labels
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from ..exceptions import UnexpectedShapeError
from .base import Base, check_error, has_id, user_path

logger = logging.getLogger(__name__)


class Label(NamedTuple):
    id: str = ""
    name: str = ""
    type: Optional[str] = None
    message_list_visibility: Optional[str] = None
    label_list_visibility: Optional[str] = None


_FIELDS = {
    "id": "id",
    "name": "name",
    "type": "type",
    "message_list_visibility": "messageListVisibility",
    "label_list_visibility": "labelListVisibility",
}


def convert(raw: Dict[str, Any]) -> Label:
    """Build a Label from its API representation."""
    return Label(**{field: raw.get(key, Label._field_defaults[field]) for field, key in _FIELDS.items()})


def to_body(label: Label, skip_none: bool = False) -> Dict[str, Any]:
    """API representation of a label. `type` is server-assigned and never sent."""
    body = {}
    for field, key in _FIELDS.items():
        value = getattr(label, field)
        if field == "type" or (skip_none and value is None):
            continue
        body[key] = value
    return body


class LabelResource:
    """Label operations for one Base helper."""

    def __init__(self, base: Base):
        self.base = base

    def _expect_label(self, response: Any) -> Label:
        check_error(response)
        if has_id(response) and "name" in response:
            return convert(response)
        raise UnexpectedShapeError(response)

    def get(self, id: str, user_id: str = "me") -> Label:
        """Gets the specified label."""
        return self._expect_label(self.base.do_get(user_path(user_id, "labels", id)))

    def list(self, user_id: str = "me") -> List[Label]:
        """Lists all labels in the user's mailbox."""
        response = self.base.do_get(user_path(user_id, "labels"))
        check_error(response)
        entries = response.get("labels", []) if isinstance(response, dict) else None
        if entries is None or not all(has_id(entry) for entry in entries):
            raise UnexpectedShapeError(response)
        return [convert(raw) for raw in entries]

    def create(
        self,
        name: str,
        message_list_visibility: Optional[str] = None,
        label_list_visibility: Optional[str] = None,
        user_id: str = "me",
    ) -> Label:
        """
        Creates a new label.

        Args:
            name: Display name of the label
            message_list_visibility: "show" or "hide"
            label_list_visibility: "labelShow", "labelShowIfUnread" or "labelHide"
        """
        body = to_body(Label(
            name=name,
            message_list_visibility=message_list_visibility,
            label_list_visibility=label_list_visibility,
        ), skip_none=True)
        body.pop("id", None)
        label = self._expect_label(self.base.do_post(user_path(user_id, "labels"), body))
        logger.debug(f"Created label '{label.name}' with ID: {label.id}")
        return label

    def update(self, label: Label, user_id: str = "me") -> Label:
        """Replaces the label identified by `label.id` with `label`."""
        return self._expect_label(self.base.do_put(user_path(user_id, "labels", label.id), to_body(label)))

    def patch(self, label: Label, user_id: str = "me") -> Label:
        """Updates only the fields of `label` that are not None."""
        return self._expect_label(
            self.base.do_patch(user_path(user_id, "labels", label.id), to_body(label, skip_none=True))
        )

    def delete(self, id: str, user_id: str = "me") -> None:
        """Deletes the label and removes it from any messages and threads."""
        check_error(self.base.do_delete(user_path(user_id, "labels", id)))
