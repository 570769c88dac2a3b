"""gmailrest SDK - thin access to the Gmail REST API v1.

Every public operation maps onto a single REST endpoint. Responses are
translated into immutable records, and the Gmail error envelope into
exceptions from gmailrest.sdk.exceptions.

Example usage:
    from gmailrest.sdk import mail

    client = mail.get_gmail_client(token_file="user_token.json")

    threads, next_page_token = client.threads.list({"max_results": 10})
    thread = client.threads.get(threads[0].id)
    for message in thread.messages:
        print(message.header("Subject"))
"""

from . import config
from . import auth
from . import exceptions
from . import mail

__all__ = ["config", "auth", "exceptions", "mail"]
