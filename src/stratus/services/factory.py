import logging

from botocore.exceptions import BotoCoreError

from stratus.core.config import HostConfig
from stratus.core.errors import ArgumentParseError, ClientInitError
from stratus.core.models import BaseClient
from stratus.core.urls import URLType, parse_url
from stratus.services.fs.client import FilesystemClient
from stratus.services.s3.client import S3Client

logger = logging.getLogger(__name__)

CLIENT_REGISTRY: dict[URLType, type[BaseClient]] = {
    client_cls.url_type: client_cls for client_cls in (S3Client, FilesystemClient)
}


def new_client(url: str, host_config: HostConfig) -> BaseClient:
    """
    Builds the client registered for the URL's type.
    """
    try:
        parsed = parse_url(url)
    except ArgumentParseError as e:
        raise ClientInitError(str(e), url=url) from e

    client_cls = CLIENT_REGISTRY.get(parsed.url_type)
    if client_cls is None:
        raise ClientInitError(f"no client for URL type ‘{parsed.url_type}’", url=url)

    try:
        client = client_cls(parsed, host_config)
    except (BotoCoreError, ValueError) as e:
        raise ClientInitError(str(e), url=url) from e

    logger.debug("Initialized %s for %s", client_cls.__name__, url)
    return client
