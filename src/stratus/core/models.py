from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any

from stratus.core.config import HostConfig
from stratus.core.errors import StratusError
from stratus.core.urls import ParsedURL, URLType


@dataclass
class Target:
    """A resolved URL and the host record it will be created with."""

    url: str
    host_config: HostConfig


@dataclass
class MakeBucketResult:
    url: str
    error_message: str | None = None
    error: StratusError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["error"] = str(self.error) if self.error else None
        return data


class BaseClient(ABC):
    """Abstract base class for all storage clients."""

    url_type: URLType

    def __init__(self, url: ParsedURL, host_config: HostConfig):
        self.url = url
        self.host_config = host_config

    @abstractmethod
    def make_bucket(self) -> None:
        """
        Creates the bucket (or directory) at the bound URL.
        Raises RemoteError on any failure.
        """
