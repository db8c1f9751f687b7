import logging
import os
import re
from dataclasses import dataclass
from enum import StrEnum, auto
from urllib.parse import SplitResult, urlsplit

from stratus.core.errors import ArgumentParseError, UnsupportedSchemeError

logger = logging.getLogger(__name__)

OBJECT_SCHEMES = {"http", "https"}
FILESYSTEM_SCHEMES = {"", "file"}
SUPPORTED_SCHEMES = OBJECT_SCHEMES | FILESYSTEM_SCHEMES
LOCAL_FILE_HOSTS = {"", "localhost"}

WINDOWS_DRIVE = re.compile(r"^[a-zA-Z]:[\\/]")
REPEATED_SLASHES = re.compile(r"/{2,}")


class URLType(StrEnum):
    OBJECT = auto()
    FILESYSTEM = auto()


@dataclass(frozen=True)
class ParsedURL:
    url_type: URLType
    scheme: str
    host: str
    path: str

    @property
    def endpoint(self) -> str:
        return f"{self.scheme}://{self.host}"

    def __str__(self) -> str:
        if self.url_type == URLType.FILESYSTEM:
            return self.path
        return f"{self.endpoint}{self.path}"


def _filesystem_url(path: str) -> ParsedURL:
    absolute = os.path.abspath(os.path.expanduser(path))
    return ParsedURL(url_type=URLType.FILESYSTEM, scheme="", host="", path=absolute)


def _object_url(parts: SplitResult, url_str: str) -> ParsedURL:
    host = parts.hostname
    if not host:
        raise ArgumentParseError(f"missing host in ‘{url_str}’", url=url_str)

    try:
        port = parts.port
    except ValueError as e:
        raise ArgumentParseError(f"invalid port in ‘{url_str}’", url=url_str) from e

    if ":" in host:
        host = f"[{host}]"
    netloc = host if port is None else f"{host}:{port}"
    path = REPEATED_SLASHES.sub("/", parts.path).rstrip("/")

    return ParsedURL(
        url_type=URLType.OBJECT,
        scheme=parts.scheme.lower(),
        host=netloc,
        path=path,
    )


def parse_url(url_str: str) -> ParsedURL:
    """
    Classifies a URL string as object storage or a filesystem path.

    Paths without a scheme, local ``file://`` URLs and, on Windows, drive
    paths are filesystem targets. ``http``/``https`` URLs are object
    storage targets.
    Every other scheme raises UnsupportedSchemeError.
    """
    if not url_str or not url_str.strip():
        raise ArgumentParseError("empty URL", url=url_str)

    if os.name == "nt" and WINDOWS_DRIVE.match(url_str):
        return _filesystem_url(url_str)

    try:
        parts = urlsplit(url_str)
    except ValueError as e:
        raise ArgumentParseError(f"malformed URL ‘{url_str}’", url=url_str) from e

    scheme = parts.scheme.lower()
    if scheme in OBJECT_SCHEMES:
        return _object_url(parts, url_str)
    if scheme == "file":
        if parts.netloc.lower() not in LOCAL_FILE_HOSTS:
            raise ArgumentParseError(
                f"file URL host ‘{parts.netloc}’ is not local", url=url_str
            )
        return _filesystem_url(parts.path)
    if scheme == "":
        return _filesystem_url(url_str)

    raise UnsupportedSchemeError(f"unsupported URL scheme ‘{scheme}’", url=url_str)


def expand_alias(argument: str, aliases: dict[str, str]) -> str:
    if "://" in argument:
        return argument

    name, _, rest = argument.partition("/")
    prefix = aliases.get(name)
    if prefix is None:
        return argument

    expanded = prefix.rstrip("/")
    if rest.lstrip("/"):
        expanded = f"{expanded}/{rest.lstrip('/')}"

    logger.debug("Expanded alias %s: %s -> %s", name, argument, expanded)
    return expanded


def resolve(argument: str, aliases: dict[str, str]) -> str:
    """
    Expands a command-line argument into a canonical absolute URL.

    ``alias/bucket`` and the URL it expands to resolve to the same string,
    so callers can deduplicate on the result.
    """
    if not argument or not argument.strip():
        raise ArgumentParseError("empty argument", argument=argument)

    try:
        return str(parse_url(expand_alias(argument, aliases)))
    except ArgumentParseError as e:
        e.argument = argument
        raise
