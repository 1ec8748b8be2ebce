"""Secret value resolution.

Turns a declared secret's source into the string stored in the backend.
"""

import json
from collections.abc import Mapping

from secrets_sync.exceptions import ResolutionError
from secrets_sync.models import DeclaredSecret


def serialize_key_value(name: str, key_value: Mapping[str, str]) -> str:
    """Serialize a key/value mapping to canonical compact JSON.

    Keys are sorted so that the same mapping always produces the same
    payload, whatever order it was declared in.

    Args:
        name: The secret name, for error messages.
        key_value: The mapping to serialize.

    Returns:
        The JSON object as a string.

    Raises:
        ResolutionError: If the mapping cannot be encoded.

    """
    try:
        return json.dumps(dict(key_value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise ResolutionError(f"Failed to serialize secret {name}: {err}") from err


def read_secret_file(path: str) -> str:
    """Read a secret file as text, keeping its line endings.

    Args:
        path: Path to the file.

    Returns:
        The full file contents.

    Raises:
        ResolutionError: If the file cannot be read or decoded.

    """
    try:
        with open(path, newline="") as stream:
            return stream.read()
    except OSError as err:
        reason = err.strerror or str(err)
        raise ResolutionError(f"Failed to read file {path}: {reason}") from err
    except UnicodeDecodeError as err:
        raise ResolutionError(f"Failed to read file {path}: {err}") from err


def resolve_value(name: str, secret: DeclaredSecret) -> str:
    """Resolve the value of a declared secret.

    key_value wins when set (even if empty), then a non-empty file path,
    then plaintext verbatim.

    Args:
        name: The secret name.
        secret: The declared secret.

    Returns:
        The resolved string payload.

    Raises:
        ResolutionError: If serialization or the file read fails.

    """
    if secret.key_value is not None:
        return serialize_key_value(name, secret.key_value)
    if secret.file:
        return read_secret_file(secret.file)
    return secret.plaintext
