from stratus.cli import config
from stratus.cli.mb import MB_EPILOG, make_bucket_command

config_app = config.app

__all__ = ["MB_EPILOG", "config_app", "make_bucket_command"]
