"""Gmail client factory for gmailrest SDK."""

import logging
from typing import Any, Optional

from ..auth import get_credentials
from ..config import ApiConfig, load_api_config
from ..http import get_http_client
from .base import Base
from .draft import DraftResource
from .label import LabelResource
from .message import MessageResource
from .thread import ThreadResource

logger = logging.getLogger(__name__)


class GmailClient:
    """The four Gmail resources sharing one transport and one ApiConfig."""

    def __init__(self, transport: Any, config: Optional[ApiConfig] = None):
        self.base = Base(transport, config)
        self.threads = ThreadResource(self.base)
        self.labels = LabelResource(self.base)
        self.messages = MessageResource(self.base)
        self.drafts = DraftResource(self.base)


def get_gmail_client(
    token_file: str = None,
    use_adc: bool = False,
    config: Optional[ApiConfig] = None,
    env_file: str = None,
) -> GmailClient:
    """
    Get an authenticated Gmail client.

    Args:
        token_file: Path to an authorized-user token file
        use_adc: Force use of Application Default Credentials
        config: API settings; loaded from the config file and environment when omitted
        env_file: Optional .env file read before loading settings

    Returns:
        GmailClient

    Raises:
        ConfigurationError: If no credentials are configured
        FileNotFoundError: If the token file does not exist
    """
    if config is None:
        config = load_api_config(env_file)
    creds, source = get_credentials(token_file=token_file, use_adc=use_adc)
    logger.debug(f"Building Gmail client using credentials from: {source}")
    return GmailClient(get_http_client(creds), config)
