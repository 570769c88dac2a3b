"""Credential loading for gmailrest.

gmailrest does not run OAuth consent flows. It loads credentials that were
created elsewhere: an authorized-user token file, or Application Default
Credentials.
"""

import os
import logging
from pathlib import Path
from typing import Tuple, Any

from .config import get_config_value
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

GMAIL_SCOPES = [
    "https://www.googleapis.com/auth/gmail.modify",
    "https://www.googleapis.com/auth/gmail.labels",
]


def get_token_file_path(token_file: str = None) -> Path:
    """
    Resolve the token file path.

    Precedence: explicit argument, then `auth.token_file` from the config
    file, then the GMAILREST_TOKEN_FILE env var.

    Raises:
        ConfigurationError: If no token file is configured anywhere
    """
    path = token_file or get_config_value("auth.token_file") or os.getenv("GMAILREST_TOKEN_FILE")
    if not path:
        raise ConfigurationError(
            "No token file configured. Pass token_file, set auth.token_file "
            "in the config file or GMAILREST_TOKEN_FILE."
        )
    return Path(path).expanduser()


def get_credentials(
    token_file: str = None,
    use_adc: bool = False,
) -> Tuple[Any, str]:
    """
    Load credentials from a token file or Application Default Credentials.

    Args:
        token_file: Path to an authorized-user token JSON file
        use_adc: Force use of Application Default Credentials

    Returns:
        Tuple of (credentials object, source description)

    Raises:
        ConfigurationError: If no token file is configured
        FileNotFoundError: If the token file does not exist
    """
    import google.auth
    from google.oauth2.credentials import Credentials

    if use_adc:
        creds, project = google.auth.default(scopes=GMAIL_SCOPES)
        source = "Application Default Credentials"
        if project:
            source += f" (project: {project})"
        return creds, source

    token_path = get_token_file_path(token_file)
    if not token_path.exists():
        raise FileNotFoundError(f"Token file not found: {token_path}")

    creds = Credentials.from_authorized_user_file(str(token_path))
    logger.debug(f"Loaded credentials from {token_path}")
    return creds, f"Token file: {token_path}"
