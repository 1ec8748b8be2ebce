"""Custom exceptions for secrets-sync.

This module defines the exception hierarchy used throughout the application.
Configuration and session errors abort the whole run; the remaining errors
are raised per secret and isolated by the reconciler.
"""


class SecretsSyncError(Exception):
    """Base exception for all secrets-sync errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all secrets-sync errors with a single
    except clause if desired.
    """

    pass


class ConfigParsingError(SecretsSyncError):
    """Raised when the configuration document cannot be loaded.

    This can occur when:
    - The file does not exist or cannot be read
    - The file is not valid YAML
    - The YAML does not have the expected shape
    """

    pass


class ConfigInvalidError(SecretsSyncError):
    """Raised when a declared secret fails validation.

    This can occur when:
    - Both key_value and file are set
    - None of key_value, file or plaintext is set
    - A tag has an empty key or value
    """

    pass


class SessionError(SecretsSyncError):
    """Raised when the AWS session or client cannot be established.

    This can occur when:
    - The named profile does not exist
    - No region is configured
    - The client cannot be built from the session
    """

    pass


class ResolutionError(SecretsSyncError):
    """Raised when a secret's value cannot be derived from its source."""

    pass


class DescribeError(SecretsSyncError):
    """Raised when fetching the current value fails for a reason other than not-found."""

    pass


class CreateError(SecretsSyncError):
    """Raised when creating a secret in the backend fails."""

    pass


class UpdateError(SecretsSyncError):
    """Raised when updating a secret in the backend fails."""

    pass
