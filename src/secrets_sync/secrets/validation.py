"""Declared secret validation.

Checks every declared secret before any call is made to the backend.
"""

from collections.abc import Mapping

from secrets_sync.exceptions import ConfigInvalidError
from secrets_sync.models import DeclaredSecret


def validate_secret(name: str, secret: DeclaredSecret) -> None:
    """Validate a single declared secret.

    Args:
        name: The secret name.
        secret: The declared secret.

    Raises:
        ConfigInvalidError: If key_value and file are both set, no source
            is set, or a tag has an empty key or value.

    """
    if secret.key_value is not None and secret.file:
        raise ConfigInvalidError(
            f"Secret '{name}' has both key_value and file set; these sources are mutually exclusive"
        )

    if secret.key_value is None and not secret.file and not secret.plaintext:
        raise ConfigInvalidError(f"Secret '{name}' is missing a source: set one of key_value, file or plaintext")

    for tag_key, tag_value in secret.tags.items():
        if not tag_key or not tag_value:
            raise ConfigInvalidError(f"Secret '{name}' has an invalid tag; tag keys and values must not be empty")


def validate_secrets(secrets: Mapping[str, DeclaredSecret]) -> None:
    """Validate the whole declared set, stopping at the first invalid secret.

    Args:
        secrets: Mapping of secret name to declared secret.

    Raises:
        ConfigInvalidError: For the first secret that fails validation.

    """
    for name, secret in secrets.items():
        validate_secret(name, secret)
