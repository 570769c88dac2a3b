"""gmailrest - a thin client for the Gmail REST API.

Package layout:
- gmailrest.sdk: configuration, credentials, HTTP transport
- gmailrest.sdk.mail: thread, label, message and draft resources
"""

__version__ = "0.1.0"
