"""Secret reconciliation.

This module provides the Reconciler class, which compares every declared
secret against AWS Secrets Manager and creates or updates it as needed.
"""

from collections.abc import Mapping

from icecream import ic
from rich.markup import escape

from secrets_sync import console
from secrets_sync.core.store import SecretStore, tags_as_pairs
from secrets_sync.exceptions import CreateError, DescribeError, ResolutionError, UpdateError
from secrets_sync.models import DeclaredSecret, SecretResult, SyncAction, SyncReport
from secrets_sync.secrets.resolution import resolve_value


class Reconciler:
    """Drives one reconciliation pass over the declared secrets.

    Secrets are processed one at a time and independently: a failure on
    one secret is reported and never stops the others.

    Attributes:
        store: Gateway to the secrets backend.
        kms_key: KMS key forwarded on create and update, if set.

    """

    def __init__(self, store: SecretStore, kms_key: str | None = None) -> None:
        self.store = store
        self.kms_key = kms_key or None

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Reconciler(store={self.store!r}, kms_key={self.kms_key!r})"

    def reconcile(self, secrets: Mapping[str, DeclaredSecret]) -> SyncReport:
        """Reconcile every declared secret.

        Args:
            secrets: Mapping of secret name to declared secret.

        Returns:
            The report with one result per secret.

        """
        report = SyncReport()
        for name, secret in secrets.items():
            report.add(self.reconcile_secret(name, secret))
        return report

    def reconcile_secret(self, name: str, secret: DeclaredSecret) -> SecretResult:
        """Create, update or skip a single secret.

        Args:
            name: The secret name.
            secret: The declared secret.

        Returns:
            The outcome for this secret.

        """
        label = escape(name)

        ignored = secret.ignored_sources
        if ignored:
            console.warning(f"Secret {label} declares more than one source, using {secret.source.value}")
            for source in ignored:
                console.step(f"ignoring {source.value}")

        try:
            value = resolve_value(name, secret)
        except ResolutionError as err:
            return self._failed(name, SyncAction.RESOLUTION_FAILED, err)

        tags = tags_as_pairs(secret.tags)
        ic(name, secret.source, len(tags))

        try:
            current = self.store.fetch_current(name)
        except DescribeError as err:
            return self._failed(name, SyncAction.DESCRIBE_FAILED, err)

        if not current.found:
            try:
                self.store.create(name, value, tags, self.kms_key)
            except CreateError as err:
                return self._failed(name, SyncAction.CREATE_FAILED, err)
            console.success(f"Secret {label} created successfully")
            return SecretResult(name, SyncAction.CREATED)

        if current.value == value:
            console.info(f"Secret {label} has no changes, skipping update")
            return SecretResult(name, SyncAction.UNCHANGED)

        try:
            self.store.update(name, value, self.kms_key)
        except UpdateError as err:
            return self._failed(name, SyncAction.UPDATE_FAILED, err)
        console.success(f"Secret {label} updated successfully")
        return SecretResult(name, SyncAction.UPDATED)

    @staticmethod
    def _failed(name: str, action: SyncAction, err: Exception) -> SecretResult:
        console.error(escape(str(err)))
        return SecretResult(name, action, str(err))
