"""Data models for secrets-sync.

This module provides type-safe data structures for the declared secrets,
the remote state and the outcome of a reconciliation run.
"""

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class SecretSource(str, Enum):
    """Ways a declared secret can provide its value.

    Members are listed in resolution precedence order.
    """

    KEY_VALUE = "key_value"
    FILE = "file"
    PLAINTEXT = "plaintext"


@dataclass(frozen=True, slots=True)
class DeclaredSecret:
    """One entry of the desired-state configuration.

    key_value and tags are copied into read-only mappings at construction.

    Attributes:
        key_value: Mapping serialised to a JSON object, or None when unset.
        plaintext: Raw string value.
        file: Path of a file whose contents become the value.
        tags: Tags attached when the secret is created.

    """

    key_value: Mapping[str, str] | None = None
    plaintext: str = ""
    file: str = ""
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.key_value is not None:
            object.__setattr__(self, "key_value", MappingProxyType(dict(self.key_value)))
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def populated_sources(self) -> list[SecretSource]:
        """Return every source that is set, in precedence order."""
        populated: list[SecretSource] = []
        if self.key_value is not None:
            populated.append(SecretSource.KEY_VALUE)
        if self.file:
            populated.append(SecretSource.FILE)
        if self.plaintext:
            populated.append(SecretSource.PLAINTEXT)
        return populated

    @property
    def source(self) -> SecretSource:
        """The source the value is resolved from."""
        populated = self.populated_sources()
        return populated[0] if populated else SecretSource.PLAINTEXT

    @property
    def ignored_sources(self) -> list[SecretSource]:
        """Sources that are set but shadowed by a higher-precedence one."""
        return self.populated_sources()[1:]


@dataclass(frozen=True, slots=True)
class SyncOptions:
    """Resolved process-level settings for one run.

    Attributes:
        config_path: Path to the YAML configuration document.
        profile: AWS profile used to build the session.
        region: AWS region of the Secrets Manager endpoint.
        kms_key: KMS key id or alias; None or empty uses the account default.

    """

    config_path: str
    profile: str = "default"
    region: str = "us-east-1"
    kms_key: str | None = None


class RemoteSecret(NamedTuple):
    """Current state of a secret in the backend.

    Attributes:
        found: Whether the secret exists.
        value: The current SecretString, None when absent or binary-only.

    """

    found: bool
    value: str | None = None


class SyncAction(str, Enum):
    """Outcome of reconciling a single secret."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    CREATE_FAILED = "create_failed"
    UPDATE_FAILED = "update_failed"
    DESCRIBE_FAILED = "describe_failed"
    RESOLUTION_FAILED = "resolution_failed"

    @property
    def failed(self) -> bool:
        return self.value.endswith("_failed")


class SecretResult(NamedTuple):
    """Result for one secret.

    Attributes:
        name: The secret name.
        action: What happened to the secret.
        error: Error message when the action failed.

    """

    name: str
    action: SyncAction
    error: str | None = None


@dataclass
class SyncReport:
    """Collected results of a reconciliation run."""

    results: list[SecretResult] = field(default_factory=list)

    def add(self, result: SecretResult) -> None:
        self.results.append(result)

    def counts(self) -> dict[SyncAction, int]:
        """Return the number of secrets per action."""
        return dict(Counter(result.action for result in self.results))

    @property
    def failed(self) -> list[SecretResult]:
        return [result for result in self.results if result.action.failed]

    @property
    def ok(self) -> bool:
        return not self.failed
