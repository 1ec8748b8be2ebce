"""Configuration document parsing.

This module loads the YAML configuration file and turns its ``secrets``
mapping into declared secrets.
"""

from typing import Any

import yaml

from secrets_sync.exceptions import ConfigParsingError
from secrets_sync.models import DeclaredSecret

_SECRET_FIELDS = frozenset({"key_value", "plaintext", "file", "tags"})

# Implicit YAML 1.1 types that would rewrite a secret's text (0123 -> 83, yes -> True)
_TEXT_KEPT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)


class StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as strings; only null is resolved."""


StringScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _string_map(name: str, field_name: str, value: Any) -> dict[str, str]:
    """Coerce a YAML mapping of scalars into a string map.

    Args:
        name: Secret name, for error messages.
        field_name: Field being converted, for error messages.
        value: The raw YAML value.

    Returns:
        The mapping with keys and values converted to strings.

    Raises:
        ConfigParsingError: If the value is not a mapping of scalars.

    """
    if not isinstance(value, dict):
        raise ConfigParsingError(f"Secret '{name}': '{field_name}' must be a mapping")

    result: dict[str, str] = {}
    for key, item in value.items():
        if isinstance(item, (dict, list)):
            raise ConfigParsingError(f"Secret '{name}': '{field_name}.{key}' must be a scalar value")
        # null stays empty so the validator can reject it as an empty tag
        result[str(key)] = "" if item is None else str(item)
    return result


def _string_field(name: str, field_name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigParsingError(f"Secret '{name}': '{field_name}' must be a string")
    return str(value)


def parse_secret(name: str, entry: Any) -> DeclaredSecret:
    """Build a declared secret from one entry of the ``secrets`` mapping.

    Args:
        name: The secret name (the mapping key).
        entry: The raw YAML value for that name.

    Returns:
        The declared secret.

    Raises:
        ConfigParsingError: If the entry is not a mapping, has unknown
            fields, or a field has the wrong shape.

    """
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise ConfigParsingError(f"Secret '{name}' must be a mapping of fields")

    unknown = sorted(str(key) for key in set(entry) - _SECRET_FIELDS)
    if unknown:
        raise ConfigParsingError(f"Secret '{name}' has unknown field(s): {', '.join(unknown)}")

    key_value = entry.get("key_value")
    tags = entry.get("tags")

    return DeclaredSecret(
        key_value=None if key_value is None else _string_map(name, "key_value", key_value),
        plaintext=_string_field(name, "plaintext", entry.get("plaintext")),
        file=_string_field(name, "file", entry.get("file")),
        tags={} if tags is None else _string_map(name, "tags", tags),
    )


def load_config(config_path: str) -> dict[str, DeclaredSecret]:
    """Load declared secrets from a YAML configuration file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Mapping of secret name to declared secret. Empty if the document
        is empty or has no ``secrets`` key.

    Raises:
        ConfigParsingError: If the file does not exist, cannot be read,
            contains malformed YAML, or does not have the expected shape.

    """
    try:
        with open(config_path) as stream:
            document = yaml.load(stream, Loader=StringScalarLoader)
    except FileNotFoundError as err:
        raise ConfigParsingError(f"Config file '{config_path}' does not exist") from err
    except OSError as err:
        raise ConfigParsingError(f"Failed to read config '{config_path}': {err.strerror}") from err
    except yaml.YAMLError as err:
        raise ConfigParsingError(f"Config file '{config_path}' contains malformed YAML: {err}") from err

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigParsingError(f"Config file '{config_path}' does not contain a YAML mapping")

    secrets = document.get("secrets")
    if secrets is None:
        return {}
    if not isinstance(secrets, dict):
        raise ConfigParsingError(f"Config file '{config_path}': 'secrets' must be a mapping")

    return {str(name): parse_secret(str(name), entry) for name, entry in secrets.items()}
