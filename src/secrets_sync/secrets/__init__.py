"""Declared secrets subpackage.

This package contains modules for loading, validating and resolving
the secrets declared in the configuration file.
"""

from secrets_sync.secrets.parsing import load_config, parse_secret
from secrets_sync.secrets.resolution import resolve_value, serialize_key_value
from secrets_sync.secrets.validation import validate_secret, validate_secrets

__all__ = [
    # parsing
    "load_config",
    "parse_secret",
    # resolution
    "resolve_value",
    "serialize_key_value",
    # validation
    "validate_secret",
    "validate_secrets",
]
