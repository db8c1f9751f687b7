import logging
import sys
from collections.abc import Callable, Sequence

from stratus.core.config import ConfigStore, HostConfig, StratusConfig
from stratus.core.errors import (
    ArgumentParseError,
    ClientInitError,
    ConfigurationMissingError,
    ConfigurationReadError,
    HostConfigLookupError,
    RemoteError,
    StratusError,
    UnsupportedSchemeError,
)
from stratus.core.hosts import lookup_host_config
from stratus.core.models import BaseClient, MakeBucketResult, Target
from stratus.core.presenter import ErrorMessage, print_error, print_fatal, print_success
from stratus.core.urls import resolve
from stratus.services.factory import new_client

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, HostConfig], BaseClient]


def setup_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_config(store: ConfigStore) -> StratusConfig:
    if not store.exists():
        raise ConfigurationMissingError(path=str(store.path()))
    return store.load()


def build_target_map(
    arguments: Sequence[str], config: StratusConfig, config_path: str
) -> dict[str, HostConfig]:
    """
    Resolves every argument and looks up its host record.

    Keyed by resolved URL so repeated targets collapse to one entry.
    Iteration order is the order each URL first appeared in.
    """
    target_map: dict[str, HostConfig] = {}
    for arg in arguments:
        url = resolve(arg, config.aliases)
        if url in target_map:
            logger.debug("Skipping duplicate target %s (from %s)", url, arg)
            continue

        try:
            target_map[url] = lookup_host_config(url, config)
        except HostConfigLookupError as e:
            e.argument = arg
            e.path = config_path
            raise
    return target_map


def describe_fatal(error: StratusError, config_path: str) -> str:
    if isinstance(error, ConfigurationMissingError):
        return 'Please run "stratus config generate"'
    if isinstance(error, ConfigurationReadError):
        return f"Unable to read config file ‘{config_path}’"
    if isinstance(error, UnsupportedSchemeError):
        return f"Unknown type of URL ‘{error.url}’"
    if isinstance(error, ArgumentParseError):
        return f"Unable to parse argument ‘{error.argument}’"
    if isinstance(error, HostConfigLookupError):
        return (
            f"Unable to read host configuration for ‘{error.url}’ "
            f"from config file ‘{config_path}’"
        )
    return str(error)


def make_bucket(
    target: Target, client_factory: ClientFactory = new_client
) -> MakeBucketResult:
    try:
        client = client_factory(target.url, target.host_config)
    except ClientInitError as e:
        return MakeBucketResult(
            url=target.url,
            error_message=f"Unable to initialize client for ‘{target.url}’",
            error=e,
        )

    try:
        client.make_bucket()
    except RemoteError as e:
        return MakeBucketResult(
            url=target.url,
            error_message=f"Failed to create bucket for URL ‘{target.url}’",
            error=e,
        )

    return MakeBucketResult(url=target.url)


def run_make_bucket(
    arguments: Sequence[str],
    store: ConfigStore,
    client_factory: ClientFactory = new_client,
) -> int:
    """
    Creates one bucket per unique target.

    Configuration and resolution errors abort the run before any client is
    built and return 1. Per-target client and remote failures are reported
    and the run moves on; they do not change the exit code.
    """
    config_path = str(store.path())

    try:
        config = load_config(store)
        target_map = build_target_map(arguments, config, config_path)
    except (
        ConfigurationMissingError,
        ConfigurationReadError,
        ArgumentParseError,
        HostConfigLookupError,
    ) as e:
        print_fatal(ErrorMessage(describe_fatal(e, config_path), e))
        return 1

    for url, host_config in target_map.items():
        result = make_bucket(Target(url=url, host_config=host_config), client_factory)
        if result.ok:
            print_success(f"Bucket created successfully ‘{url}’.")
        else:
            print_error(ErrorMessage(result.error_message, result.error))

    return 0
