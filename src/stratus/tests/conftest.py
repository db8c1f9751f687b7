import os

import boto3
import pytest
from moto import mock_aws

from stratus.core.config import ConfigStore, HostConfig, StratusConfig


@pytest.fixture(scope="function")
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(scope="function")
def s3_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("s3", region_name="us-east-1")


@pytest.fixture
def test_config():
    return StratusConfig(
        aliases={
            "s3": "https://s3.amazonaws.com",
            "local": "http://localhost:9000/",
        },
        hosts={
            "localhost:*": HostConfig(),
            "s3*.amazonaws.com": HostConfig(
                access_key_id="testing", secret_access_key="testing"
            ),
        },
    )


@pytest.fixture
def config_store(tmp_path, test_config):
    store = ConfigStore(tmp_path / "stratus")
    store.save(test_config)
    return store


@pytest.fixture
def empty_store(tmp_path):
    """A store pointing at a directory with no config generated yet."""
    return ConfigStore(tmp_path / "unconfigured")
