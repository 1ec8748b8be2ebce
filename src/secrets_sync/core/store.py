"""AWS Secrets Manager gateway.

This module provides the SecretStore class, a thin wrapper around the
boto3 ``secretsmanager`` client exposing the calls the reconciler needs,
and the session bootstrap used to build it.
"""

from collections.abc import Mapping
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from icecream import ic

from secrets_sync.exceptions import CreateError, DescribeError, SessionError, UpdateError
from secrets_sync.models import RemoteSecret

_NOT_FOUND_CODE = "ResourceNotFoundException"


def _error_code(err: Exception) -> str | None:
    """Return the AWS error code of a ClientError, if any."""
    if isinstance(err, ClientError):
        return err.response.get("Error", {}).get("Code")
    return None


def tags_as_pairs(tags: Mapping[str, str]) -> list[dict[str, str]]:
    """Convert a tag mapping into the backend's list of Key/Value pairs.

    Args:
        tags: Mapping of tag key to tag value.

    Returns:
        List of ``{"Key": ..., "Value": ...}`` dictionaries.

    """
    return [{"Key": key, "Value": value} for key, value in tags.items()]


def create_session(profile: str, region: str) -> boto3.Session:
    """Create an AWS session for the given profile and region.

    Args:
        profile: Named profile from the shared AWS config.
        region: AWS region name.

    Returns:
        The configured boto3 session.

    Raises:
        SessionError: If the profile does not exist or no region is set.

    """
    try:
        session = boto3.Session(profile_name=profile or None, region_name=region or None)
    except BotoCoreError as err:
        raise SessionError(f"Failed to create AWS session for profile '{profile}': {err}") from err

    if not session.region_name:
        raise SessionError("No AWS region configured; pass --region or set one in the profile")

    ic(session.profile_name, session.region_name)
    return session


class SecretStore:
    """Gateway to AWS Secrets Manager.

    Each method performs a single API call and keeps no state between
    calls. Failures are raised as the matching per-secret error.

    Attributes:
        client: The boto3 ``secretsmanager`` client.

    """

    def __init__(self, client: Any) -> None:
        """Initialize SecretStore with an authenticated client.

        Args:
            client: A boto3 ``secretsmanager`` client.

        """
        self.client = client

    @classmethod
    def from_session(cls, session: boto3.Session) -> "SecretStore":
        """Build a SecretStore from an AWS session.

        Args:
            session: The boto3 session to create the client from.

        Returns:
            A new SecretStore.

        Raises:
            SessionError: If the client cannot be created.

        """
        try:
            return cls(session.client("secretsmanager"))
        except BotoCoreError as err:
            raise SessionError(f"Failed to create Secrets Manager client: {err}") from err

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        region = getattr(getattr(self.client, "meta", None), "region_name", None)
        return f"SecretStore(region={region!r})"

    def fetch_current(self, name: str) -> RemoteSecret:
        """Fetch the current value of a secret.

        Args:
            name: The secret name or ARN.

        Returns:
            The remote state; ``found`` is False when the secret does not exist.

        Raises:
            DescribeError: If the call fails for any reason other than not-found.

        """
        try:
            response = self.client.get_secret_value(SecretId=name)
        except (ClientError, BotoCoreError) as err:
            if _error_code(err) == _NOT_FOUND_CODE:
                return RemoteSecret(found=False)
            raise DescribeError(f"Failed to describe secret {name}: {err}") from err

        return RemoteSecret(found=True, value=response.get("SecretString"))

    def create(
        self,
        name: str,
        value: str,
        tags: list[dict[str, str]],
        kms_key: str | None = None,
    ) -> None:
        """Create a new secret with tags.

        Args:
            name: The secret name.
            value: The secret string.
            tags: Tags as Key/Value pairs.
            kms_key: KMS key id or alias; omitted when None or empty.

        Raises:
            CreateError: If the call fails.

        """
        params: dict[str, Any] = {"Name": name, "SecretString": value, "Tags": tags}
        if kms_key:
            params["KmsKeyId"] = kms_key
        ic(name, kms_key, tags)

        try:
            self.client.create_secret(**params)
        except (ClientError, BotoCoreError) as err:
            raise CreateError(f"Failed to create secret {name}: {err}") from err

    def update(self, name: str, value: str, kms_key: str | None = None) -> None:
        """Replace the value of an existing secret.

        Tags are not sent; they are only set when a secret is created.

        Args:
            name: The secret name or ARN.
            value: The new secret string.
            kms_key: KMS key id or alias; omitted when None or empty.

        Raises:
            UpdateError: If the call fails.

        """
        params: dict[str, Any] = {"SecretId": name, "SecretString": value}
        if kms_key:
            params["KmsKeyId"] = kms_key
        ic(name, kms_key)

        try:
            self.client.update_secret(**params)
        except (ClientError, BotoCoreError) as err:
            raise UpdateError(f"Failed to update secret {name}: {err}") from err
