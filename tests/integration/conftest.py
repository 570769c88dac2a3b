"""
Integration test configuration.

These tests talk to the live Gmail API with the token file named by
GMAILREST_TOKEN_FILE and are skipped when it is not set.
"""

import os

import pytest

from gmailrest.sdk.mail import get_gmail_client


@pytest.fixture(scope="session")
def gmail_client():
    token_file = os.getenv("GMAILREST_TOKEN_FILE")
    if not token_file:
        pytest.skip("GMAILREST_TOKEN_FILE not set")
    return get_gmail_client(token_file=token_file)
