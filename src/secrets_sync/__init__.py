"""secrets-sync: Declarative sync of secrets to AWS Secrets Manager.

This package reads secrets described in a YAML file and creates or
updates them in AWS Secrets Manager, leaving unchanged secrets alone.

Example usage:
    from secrets_sync import Reconciler, SecretStore, create_session, load_config

    secrets = load_config("secrets.yaml")
    store = SecretStore.from_session(create_session("default", "us-east-1"))
    report = Reconciler(store).reconcile(secrets)
"""

__version__ = "0.1.0"

from secrets_sync.cli import cli
from secrets_sync.core.reconciler import Reconciler
from secrets_sync.core.store import SecretStore, create_session
from secrets_sync.exceptions import (
    ConfigInvalidError,
    ConfigParsingError,
    CreateError,
    DescribeError,
    ResolutionError,
    SecretsSyncError,
    SessionError,
    UpdateError,
)
from secrets_sync.secrets.parsing import load_config

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "Reconciler",
    "SecretStore",
    # Functions
    "create_session",
    "load_config",
    # Exceptions
    "SecretsSyncError",
    "ConfigParsingError",
    "ConfigInvalidError",
    "SessionError",
    "ResolutionError",
    "DescribeError",
    "CreateError",
    "UpdateError",
]
