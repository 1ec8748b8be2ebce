"""Shared test fixtures for secrets-sync tests."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from secrets_sync.core.store import SecretStore
from secrets_sync.models import RemoteSecret


def _client_error(code: str, operation: str = "GetSecretValue") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


@pytest.fixture
def mock_client():
    """Mock boto3 secretsmanager client."""
    client = MagicMock()
    client.get_secret_value.side_effect = _client_error("ResourceNotFoundException")
    return client


@pytest.fixture
def store(mock_client):
    """SecretStore wrapping the mock client."""
    return SecretStore(mock_client)


@pytest.fixture
def mock_store():
    """Mock SecretStore reporting every secret as absent."""
    mock = MagicMock(spec=SecretStore)
    mock.fetch_current.return_value = RemoteSecret(found=False)
    return mock


@pytest.fixture
def mock_console():
    """Mock console used by the reconciler."""
    with patch("secrets_sync.core.reconciler.console") as mock:
        yield mock


@pytest.fixture
def sample_config_yaml():
    """Sample secrets config YAML content."""
    return """secrets:
  /app/db:
    key_value:
      U: a
      P: b
    tags:
      env: local
  /app/token:
    plaintext: s3cr3t
  /app/cert:
    file: cert.pem
    tags:
      team: platform
      port: 5432
"""


@pytest.fixture
def config_file(tmp_path, sample_config_yaml):
    """Sample config written to a temporary file."""
    path = tmp_path / "secrets.yaml"
    path.write_text(sample_config_yaml)
    return path


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors with a given error code."""
    return _client_error
