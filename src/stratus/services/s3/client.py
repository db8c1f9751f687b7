import logging
import re
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import boto3
from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from stratus.core.config import HostConfig
from stratus.core.errors import RemoteError
from stratus.core.models import BaseClient
from stratus.core.urls import ParsedURL, URLType

logger = logging.getLogger(__name__)

T = TypeVar("T")

BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")
DEFAULT_REGION = "us-east-1"


def remote_aws_call(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to surface botocore failures as RemoteError, unmodified
    apart from the error code.
    """

    @wraps(func)
    def wrapper(self: "S3Client", *args: Any, **kwargs: Any) -> T:
        try:
            return func(self, *args, **kwargs)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.debug("AWS Error in %s for %s: %s", func.__name__, self.url, e)
            raise RemoteError(str(e), code=error_code, url=str(self.url)) from e
        except BotoCoreError as e:
            logger.debug(
                "Transport error in %s for %s: %s", func.__name__, self.url, e
            )
            raise RemoteError(str(e), url=str(self.url)) from e

    return wrapper


def split_bucket_path(path: str) -> tuple[str, str]:
    bucket, _, key = path.lstrip("/").partition("/")
    return bucket, key


class S3Client(BaseClient):
    """
    Wrapper for Boto3 S3 interactions against one endpoint.
    """

    url_type = URLType.OBJECT

    def __init__(self, url: ParsedURL, host_config: HostConfig):
        super().__init__(url, host_config)
        self.retry_config = Config(
            retries={"mode": "standard", "max_attempts": 3},
            s3={"addressing_style": "path"},
            signature_version=UNSIGNED if host_config.is_anonymous else None,
        )
        self.session = boto3.Session(
            aws_access_key_id=host_config.access_key_id or None,
            aws_secret_access_key=host_config.secret_access_key or None,
            region_name=host_config.region or DEFAULT_REGION,
        )
        self._client = self.session.client(
            "s3", endpoint_url=url.endpoint, config=self.retry_config
        )

    @property
    def bucket_name(self) -> str:
        return split_bucket_path(self.url.path)[0]

    def _validate_bucket_path(self) -> str:
        bucket, key = split_bucket_path(self.url.path)
        if not bucket:
            raise RemoteError("no bucket name given", url=str(self.url))
        if key:
            raise RemoteError(
                f"‘{key}’ is an object path, only a bucket name is allowed",
                url=str(self.url),
            )
        if not BUCKET_NAME_PATTERN.match(bucket) or ".." in bucket:
            raise RemoteError(f"invalid bucket name ‘{bucket}’", url=str(self.url))
        return bucket

    @remote_aws_call
    def make_bucket(self) -> None:
        bucket = self._validate_bucket_path()
        params: dict[str, Any] = {"Bucket": bucket}

        region = self.host_config.region
        if region and region != DEFAULT_REGION:
            params["CreateBucketConfiguration"] = {"LocationConstraint": region}

        logger.debug("Creating bucket %s at %s", bucket, self.url.endpoint)
        self._client.create_bucket(**params)
