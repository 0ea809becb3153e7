"""Shared pytest fixtures for hybridauth tests."""

import os
from unittest.mock import Mock

import pytest
from moto import mock_aws

from hybridauth import AdapterRegistry, Hybridauth, MemoryStorage, ProviderAdapter


class FakeAdapter(ProviderAdapter):
    """Adapter whose connection state is a flag in storage."""

    def authenticate(self) -> None:
        self.store_data("connected", True)

    def is_connected(self) -> bool:
        return bool(self.get_stored_data("connected", False))

    def disconnect(self) -> None:
        self.delete_stored_data("connected")
        self.store_data("disconnected", True)


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for testing."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def mock_dynamodb(aws_credentials):
    """Mock DynamoDB service."""
    with mock_aws():
        yield


@pytest.fixture
def region():
    """AWS region for tests."""
    return "us-east-1"


@pytest.fixture
def created_adapters():
    """Every adapter built through the fake registry, in creation order."""
    return []


@pytest.fixture
def fake_registry(created_adapters):
    """Registry with FakeAdapter registered for google, twitter, a and b."""

    def build(config, http_client, storage, logger):
        adapter = FakeAdapter(config, http_client, storage, logger)
        created_adapters.append(adapter)
        return adapter

    return AdapterRegistry({name: build for name in ("google", "twitter", "a", "b")})


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def make_hybridauth(fake_registry, storage, logger):
    """Build a Hybridauth wired to the fake registry and shared storage."""

    def make(config):
        return Hybridauth(
            config,
            http_client=Mock(),
            storage=storage,
            logger=logger,
            registry=fake_registry,
        )

    return make
