import logging
from pathlib import Path

from stratus.core.errors import RemoteError
from stratus.core.models import BaseClient
from stratus.core.urls import URLType

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o700


class FilesystemClient(BaseClient):
    """Treats a local directory as a bucket."""

    url_type = URLType.FILESYSTEM

    def make_bucket(self) -> None:
        path = Path(self.url.path)
        logger.debug("Creating directory %s", path)
        try:
            path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise RemoteError(str(e), url=str(self.url)) from e
