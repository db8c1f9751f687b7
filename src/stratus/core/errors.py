class StratusError(Exception):
    """
    Base error carrying the context it was raised in.

    The underlying error, when any, is attached via ``raise ... from err``
    and is available as ``__cause__``.
    """

    default_message = "stratus error"

    def __init__(
        self,
        message: str | None = None,
        *,
        argument: str | None = None,
        url: str | None = None,
        path: str | None = None,
    ):
        self.message = message or self.default_message
        self.argument = argument
        self.url = url
        self.path = path
        super().__init__(self.message)

    @property
    def context(self) -> dict[str, str]:
        fields = {"argument": self.argument, "url": self.url, "path": self.path}
        return {k: v for k, v in fields.items() if v is not None}

    def cause_chain(self) -> list[BaseException]:
        chain = []
        cause = self.__cause__
        while cause is not None:
            chain.append(cause)
            cause = cause.__cause__
        return chain


class ConfigurationMissingError(StratusError):
    default_message = '"stratus" is not configured'


class ConfigurationReadError(StratusError):
    default_message = "config file could not be read"


class ArgumentParseError(StratusError, ValueError):
    default_message = "invalid argument"


class UnsupportedSchemeError(ArgumentParseError):
    default_message = "unsupported URL scheme"


class HostConfigLookupError(StratusError):
    default_message = "no matching host configuration"


class ClientInitError(StratusError):
    default_message = "client could not be initialized"


class RemoteError(StratusError):
    """Raised when a create-bucket request fails for any reason."""

    default_message = "remote operation failed"

    def __init__(
        self, message: str | None = None, *, code: str | None = None, **kwargs
    ):
        self.code = code
        super().__init__(message, **kwargs)


class ConfigurationWriteError(StratusError):
    default_message = "config file could not be written"
