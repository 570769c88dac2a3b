"""Gmail resources for gmailrest SDK.

Example usage:
    from gmailrest.sdk import mail

    client = mail.get_gmail_client()

    # Page through threads
    threads, token = client.threads.list({"max_results": 50})
    while token:
        page, token = client.threads.list({"page_token": token})
        threads.extend(page)

    # Create a label and send a message
    label = client.labels.create("Receipts")
    client.messages.send(mail.build_raw("bob@example.com", "Hi", "Hello Bob"))
"""

from .base import Base
from .client import GmailClient, get_gmail_client
from .draft import Draft, DraftResource
from .label import Label, LabelResource
from .message import Message, MessageResource, build_raw
from .thread import Thread, ThreadResource

__all__ = [
    "Base",
    "GmailClient",
    "get_gmail_client",
    "Draft",
    "DraftResource",
    "Label",
    "LabelResource",
    "Message",
    "MessageResource",
    "build_raw",
    "Thread",
    "ThreadResource",
]
