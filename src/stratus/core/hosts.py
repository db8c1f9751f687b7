import logging
from fnmatch import fnmatch

from stratus.core.config import HostConfig, StratusConfig
from stratus.core.errors import ArgumentParseError, HostConfigLookupError
from stratus.core.urls import URLType, parse_url

logger = logging.getLogger(__name__)


def lookup_host_config(url: str, config: StratusConfig) -> HostConfig:
    """
    Returns the host record for a resolved URL.

    Filesystem targets need no credentials. For object storage the first
    glob in ``config.hosts`` matching ``host[:port]`` wins.
    """
    try:
        parsed = parse_url(url)
    except ArgumentParseError as e:
        raise HostConfigLookupError(str(e), url=url) from e

    if parsed.url_type == URLType.FILESYSTEM:
        return HostConfig()

    for host_glob, host_config in config.hosts.items():
        if not fnmatch(parsed.host, host_glob.lower()):
            continue

        logger.debug("Host %s matched %s", parsed.host, host_glob)
        if not host_config.has_valid_credentials:
            raise HostConfigLookupError(
                f"invalid credentials for host ‘{host_glob}’: "
                "access_key_id and secret_access_key must be set together",
                url=url,
            )
        return host_config

    raise HostConfigLookupError(f"no matching host for ‘{parsed.host}’", url=url)
